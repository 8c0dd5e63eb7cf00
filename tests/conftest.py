"""Pytest configuration and fixtures."""

import pytest


@pytest.fixture
def bitmex_subscribe():
    """BitMEX subscription request with mixed bare and scoped topics."""
    return {"op": "subscribe", "args": ["trade:XBTUSD", "orderBookL2:ETHUSD", "instrument"]}


@pytest.fixture
def coinbase_subscribe():
    """Coinbase subscription with a bare channel and a scoped channel."""
    return {
        "type": "subscribe",
        "product_ids": ["BTC-USD", "ETH-USD"],
        "channels": [
            "level2",
            {"name": "matches", "product_ids": ["ETH-EUR"]},
        ],
    }


@pytest.fixture
def deribit_subscribe():
    """Deribit subscription with two- and five-segment channels."""
    return {
        "jsonrpc": "2.0",
        "id": 3600,
        "method": "public/subscribe",
        "params": {
            "channels": [
                "deribit_price_ranking.btc_usd",
                "book.ETH-PERPETUAL.100.1.100ms",
                "trades.BTC-PERPETUAL.raw",
            ]
        },
    }


@pytest.fixture
def cryptofacilities_subscribe():
    """Crypto Facilities book subscription."""
    return {"event": "subscribe", "feed": "book", "product_ids": ["PI_XBTUSD", "PI_ETHUSD"]}


@pytest.fixture
def bitstamp_subscribe():
    """Bitstamp live orders subscription."""
    return {"event": "bts:subscribe", "data": {"channel": "live_orders_btcusd"}}


@pytest.fixture
def okex_subscribe():
    """OKEx subscription with spot and swap channels."""
    return {"op": "subscribe", "args": ["spot/depth:BTC-USDT", "swap/trade:BTC-USD-SWAP"]}


@pytest.fixture
def ftx_subscribe():
    """FTX orderbook subscription."""
    return {"op": "subscribe", "channel": "orderbook", "market": "BTC-PERP"}


@pytest.fixture
def kraken_subscribe():
    """Kraken book subscription for two pairs."""
    return {"event": "subscribe", "pair": ["XBT/USD", "ETH/USD"], "subscription": {"name": "book", "depth": 100}}


@pytest.fixture
def bitflyer_subscribe():
    """bitFlyer board snapshot subscription."""
    return {"method": "subscribe", "params": {"channel": "lightning_board_snapshot_BTC_JPY"}}


@pytest.fixture
def gemini_subscribe():
    """Gemini market data v2 l2 subscription."""
    return {"type": "subscribe", "subscriptions": [{"name": "l2", "symbols": ["BTCUSD", "ETHUSD"]}]}


@pytest.fixture
def confirmations(
    bitmex_subscribe,
    coinbase_subscribe,
    deribit_subscribe,
    cryptofacilities_subscribe,
    bitstamp_subscribe,
    okex_subscribe,
    ftx_subscribe,
    kraken_subscribe,
    bitflyer_subscribe,
    gemini_subscribe,
):
    """One well-formed confirmation per exchange, keyed by exchange name."""
    return {
        "bitmex": bitmex_subscribe,
        "coinbase": coinbase_subscribe,
        "deribit": deribit_subscribe,
        "cryptofacilities": cryptofacilities_subscribe,
        "bitstamp": bitstamp_subscribe,
        "okex": okex_subscribe,
        "ftx": ftx_subscribe,
        "kraken": kraken_subscribe,
        "bitflyer": bitflyer_subscribe,
        "gemini": gemini_subscribe,
    }
