"""BitMEX subscription normalizer."""

from __future__ import annotations

from pydantic import BaseModel

from .base import BaseSubscriptionNormalizer
from .protocol import CanonicalFilter, Exchange


class BitmexSubscribe(BaseModel):
    op: str
    args: str | list[str]


class BitmexNormalizer(BaseSubscriptionNormalizer[BitmexSubscribe]):
    """BitMEX subscription normalizer.

    ``args`` holds either one topic or a list of them, each a bare table name
    (``trade``) or a table scoped to an instrument (``trade:XBTUSD``).
    See https://www.bitmex.com/app/wsAPI
    """

    exchange = Exchange.BITMEX
    discriminator = ("op", "subscribe")
    message_model = BitmexSubscribe

    def extract(self, message: BitmexSubscribe) -> list[CanonicalFilter]:
        args = [message.args] if isinstance(message.args, str) else message.args

        filters = []
        for arg in args:
            channel, separator, symbol = arg.partition(":")
            if not separator:
                filters.append(CanonicalFilter(channel))
            else:
                filters.append(CanonicalFilter(channel, (symbol,)))
        return filters
