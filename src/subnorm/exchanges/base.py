"""Base class for exchange subscription normalizers."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from .normalization import ExpansionTable, split_first, split_last
from .protocol import CanonicalFilter, Exchange

logger = logging.getLogger(__name__)

MessageT = TypeVar("MessageT", bound=BaseModel)


class MalformedMessage(ValueError):
    """A subscription confirmation lacks the structure its exchange promises."""

    def __init__(self, exchange: Exchange, detail: str):
        self.exchange = exchange
        self.detail = detail
        super().__init__(f"Malformed {exchange.value} subscription message: {detail}")


def describe_validation_error(exc: ValidationError) -> str:
    """Render pydantic validation errors as 'field.path: reason' pairs."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "<message>"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)


class BaseSubscriptionNormalizer(ABC, Generic[MessageT]):
    """Base class for all subscription normalizers.

    Subclasses declare the exchange they serve, the top-level field and value
    that mark a subscription confirmation, and a pydantic model describing the
    fields extraction relies on. ``map`` validates the raw message against
    that model before handing it to ``extract``.
    """

    exchange: ClassVar[Exchange]
    discriminator: ClassVar[tuple[str, str]]
    message_model: type[MessageT]

    def can_handle(self, message: Any) -> bool:
        if not isinstance(message, dict):
            return False
        field, marker = self.discriminator
        value = message.get(field)
        return isinstance(value, str) and value == marker

    def map(self, message: Any) -> list[CanonicalFilter]:
        if not self.can_handle(message):
            field, marker = self.discriminator
            raise self.malformed(f"not a subscription confirmation, expected {field}={marker!r}")

        filters = self.extract(self.parse(message))
        logger.debug(
            "%s subscription mapped to %d filter(s)", self.exchange.value, len(filters)
        )
        return filters

    def parse(self, message: Any) -> MessageT:
        """Validate a raw message against the exchange message model.

        Raises:
            MalformedMessage: If required fields are missing or mistyped
        """
        try:
            return self.message_model.model_validate(message)
        except ValidationError as exc:
            raise self.malformed(describe_validation_error(exc)) from exc

    @abstractmethod
    def extract(self, message: MessageT) -> list[CanonicalFilter]:
        """Build canonical filters from a validated message."""

    def malformed(self, detail: str) -> MalformedMessage:
        logger.warning("Rejecting %s subscription message: %s", self.exchange.value, detail)
        return MalformedMessage(self.exchange, detail)

    def split_first(self, channel: str, separator: str) -> tuple[str, str]:
        parts = split_first(channel, separator)
        if parts is None:
            raise self.malformed(f"channel {channel!r} has no {separator!r} separator")
        return parts

    def split_last(self, channel: str, separator: str) -> tuple[str, str]:
        parts = split_last(channel, separator)
        if parts is None:
            raise self.malformed(f"channel {channel!r} has no {separator!r} separator")
        return parts

    def expand(self, table: ExpansionTable, name: str) -> tuple[str, ...]:
        try:
            return table[name]
        except KeyError:
            known = ", ".join(table)
            raise self.malformed(f"unknown channel {name!r}, expected one of: {known}") from None

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
