"""Channel string utilities shared by subscription normalizers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from types import MappingProxyType


def split_first(value: str, separator: str) -> tuple[str, str] | None:
    """Split a channel string on the first separator.

    - trade:XBTUSD -> (trade, XBTUSD)
    - spot/depth:BTC-USDT -> (spot/depth, BTC-USDT)

    Args:
        value: Channel string
        separator: Separator to split on

    Returns:
        Tuple of (prefix, remainder), or None if separator is absent
    """
    head, sep, tail = value.partition(separator)
    if not sep:
        return None
    return head, tail


def split_last(value: str, separator: str) -> tuple[str, str] | None:
    """Split a channel string on the last separator.

    - live_trades_btcusd -> (live_trades, btcusd)
    - live_orders_BTC_USD -> (live_orders_BTC, USD)

    Args:
        value: Channel string
        separator: Separator to split on

    Returns:
        Tuple of (prefix, suffix), or None if separator is absent
    """
    head, sep, tail = value.rpartition(separator)
    if not sep:
        return None
    return head, tail


def match_prefix(value: str, prefixes: Iterable[str], separator: str = "_") -> tuple[str, str] | None:
    """Match a channel string against known base names.

    Prefixes are tried in order and the first one followed by the separator
    wins, so longer names that share a stem with shorter ones must come first.

    Args:
        value: Channel string, e.g. lightning_board_snapshot_BTC_JPY
        prefixes: Known base channel names, in precedence order
        separator: Separator between base name and symbol

    Returns:
        Tuple of (base name, remainder), or None if nothing matches
    """
    for prefix in prefixes:
        if value.startswith(prefix + separator):
            return prefix, value[len(prefix) + len(separator) :]
    return None


class ExpansionTable(Mapping[str, tuple[str, ...]]):
    """Static mapping of logical channel names to physical channel names.

    Exchanges often acknowledge one logical channel (e.g. coinbase ``full``)
    while emitting data under several message types. The table is read-only
    and refuses logical names without physical targets.
    """

    def __init__(self, mappings: Mapping[str, Sequence[str]]):
        if not mappings:
            raise ValueError("Expansion table requires at least one logical channel")

        table: dict[str, tuple[str, ...]] = {}
        for name, targets in mappings.items():
            if isinstance(targets, str):
                raise ValueError(f"Physical channels for {name!r} must be a sequence, got a string")
            physical = tuple(targets)
            if not physical:
                raise ValueError(f"Logical channel {name!r} has no physical channels")
            if any(not channel for channel in physical):
                raise ValueError(f"Logical channel {name!r} maps to an empty channel name")
            table[name] = physical

        self._table = MappingProxyType(table)

    def __getitem__(self, name: str) -> tuple[str, ...]:
        return self._table[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"ExpansionTable({dict(self._table)!r})"
