"""bitFlyer subscription normalizer."""

from __future__ import annotations

from pydantic import BaseModel

from .base import BaseSubscriptionNormalizer
from .normalization import match_prefix
from .protocol import CanonicalFilter, Exchange

# Order matters: lightning_board is a prefix of lightning_board_snapshot
BITFLYER_CHANNELS = (
    "lightning_board_snapshot",
    "lightning_board",
    "lightning_ticker",
    "lightning_executions",
)


class BitflyerParams(BaseModel):
    channel: str


class BitflyerSubscribe(BaseModel):
    method: str
    params: BitflyerParams


class BitflyerNormalizer(BaseSubscriptionNormalizer[BitflyerSubscribe]):
    """bitFlyer Lightning subscription normalizer.

    Channel names and product codes both contain underscores
    (``lightning_board_snapshot_BTC_JPY``), so the channel is recovered by
    matching against the known channel names rather than by splitting.
    See https://lightning.bitflyer.com/docs?lang=en#json-rpc-2.0-over-websocket
    """

    exchange = Exchange.BITFLYER
    discriminator = ("method", "subscribe")
    message_model = BitflyerSubscribe
    channels = BITFLYER_CHANNELS

    def extract(self, message: BitflyerSubscribe) -> list[CanonicalFilter]:
        requested = message.params.channel
        matched = match_prefix(requested, self.channels)
        if matched is None:
            raise self.malformed(
                f"channel {requested!r} does not start with any of: {', '.join(self.channels)}"
            )

        channel, symbol = matched
        return [CanonicalFilter(channel, (symbol,))]
