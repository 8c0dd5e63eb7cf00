"""Protocol and shared types for subscription normalizers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol


class Exchange(str, Enum):
    """Exchanges with a subscription normalizer."""

    BITMEX = "bitmex"
    COINBASE = "coinbase"
    DERIBIT = "deribit"
    CRYPTOFACILITIES = "cryptofacilities"
    BITSTAMP = "bitstamp"
    OKEX = "okex"
    FTX = "ftx"
    KRAKEN = "kraken"
    BITFLYER = "bitflyer"
    GEMINI = "gemini"


@dataclass(frozen=True, slots=True)
class CanonicalFilter:
    """A subscribed channel and the symbols it was subscribed for.

    ``symbols`` is None when the subscription covers all symbols.
    """

    channel: str
    symbols: tuple[str, ...] | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"channel": self.channel}
        if self.symbols is not None:
            data["symbols"] = list(self.symbols)
        return data


class SubscriptionNormalizer(Protocol):
    """Protocol for per-exchange subscription confirmation normalizers."""

    exchange: Exchange

    def can_handle(self, message: Any) -> bool:
        """Return True if message is a subscription confirmation.

        Args:
            message: Parsed JSON message of any shape

        Returns:
            True for subscription confirmations, False otherwise. Never raises.
        """
        ...

    def map(self, message: Any) -> list[CanonicalFilter]:
        """Extract canonical filters from a subscription confirmation.

        Args:
            message: Message for which can_handle returned True

        Returns:
            Filters in the order the message lists them

        Raises:
            MalformedMessage: If the message lacks the expected fields
        """
        ...
