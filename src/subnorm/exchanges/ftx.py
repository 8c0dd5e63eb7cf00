"""FTX subscription normalizer."""

from __future__ import annotations

from pydantic import BaseModel

from .base import BaseSubscriptionNormalizer
from .protocol import CanonicalFilter, Exchange


class FtxSubscribe(BaseModel):
    op: str
    channel: str
    market: str


class FtxNormalizer(BaseSubscriptionNormalizer[FtxSubscribe]):
    """FTX subscription normalizer.

    See https://docs.ftx.com/#request-format
    """

    exchange = Exchange.FTX
    discriminator = ("op", "subscribe")
    message_model = FtxSubscribe

    def extract(self, message: FtxSubscribe) -> list[CanonicalFilter]:
        return [CanonicalFilter(message.channel, (message.market,))]
