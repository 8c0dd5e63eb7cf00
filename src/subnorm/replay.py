"""Normalize subscription confirmations found in recorded feed messages."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal

from .exchanges import CanonicalFilter, Exchange, MalformedMessage, get_subscription_normalizer

logger = logging.getLogger(__name__)


@dataclass
class ReplayResult:
    """Filters collected from a message stream plus per-message tallies."""

    exchange: Exchange
    filters: list[CanonicalFilter] = field(default_factory=list)
    confirmations: int = 0
    skipped: int = 0
    malformed: list[MalformedMessage] = field(default_factory=list)


ARRAY_SUFFIXES = frozenset({".json"})


def read_messages(path: Path, layout: Literal["auto", "array", "lines"] = "auto") -> list[Any]:
    """Load a recording of raw feed messages.

    ``.json`` files hold one JSON array of messages; any other file is read
    as JSON lines, one message per line. Feed frames are often arrays
    themselves (kraken), so the layout is never guessed from the content.

    Args:
        path: Recording file
        layout: 'array', 'lines', or 'auto' to pick by file extension

    Raises:
        ValueError: If the file is not valid JSON in the chosen layout
    """
    path = Path(path)
    raw = path.read_text(encoding="utf-8")
    if layout == "auto":
        layout = "array" if path.suffix.lower() in ARRAY_SUFFIXES else "lines"

    if layout == "array":
        try:
            loaded = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ValueError(f"{path}:{exc.lineno}: invalid JSON: {exc.msg}") from exc
        if not isinstance(loaded, list):
            raise ValueError(f"{path}: expected a JSON array of messages, got {type(loaded).__name__}")
        return loaded

    messages = []
    for lineno, line in enumerate(raw.splitlines(), start=1):
        line = line.strip()
        if not line:
            continue
        try:
            messages.append(json.loads(line))
        except json.JSONDecodeError as exc:
            raise ValueError(f"{path}:{lineno}: invalid JSON: {exc.msg}") from exc
    return messages


def collect_filters(
    exchange: Exchange | str,
    messages: Iterable[Any],
    *,
    on_malformed: Literal["raise", "skip"] = "raise",
) -> ReplayResult:
    """Collect canonical filters from every subscription confirmation.

    Args:
        exchange: Exchange the messages were recorded from
        messages: Parsed JSON messages in feed order
        on_malformed: 'raise' to propagate MalformedMessage, 'skip' to log
            and record it

    Returns:
        ReplayResult with filters in message order

    Raises:
        ValueError: If the exchange has no subscription normalizer
        MalformedMessage: If a confirmation is malformed and on_malformed is 'raise'
    """
    normalizer = get_subscription_normalizer(exchange)
    if normalizer is None:
        supported = ", ".join(e.value for e in Exchange)
        raise ValueError(f"Unsupported exchange: {exchange}. Supported exchanges: {supported}")

    result = ReplayResult(exchange=normalizer.exchange)

    for message in messages:
        if not normalizer.can_handle(message):
            result.skipped += 1
            continue

        result.confirmations += 1
        try:
            result.filters.extend(normalizer.map(message))
        except MalformedMessage as exc:
            if on_malformed == "raise":
                raise
            logger.warning("Skipping malformed confirmation: %s", exc)
            result.malformed.append(exc)

    logger.info(
        "%s: %d confirmation(s), %d filter(s), %d other message(s), %d malformed",
        result.exchange.value,
        result.confirmations,
        len(result.filters),
        result.skipped,
        len(result.malformed),
    )
    return result
