"""Tests for normalizing recorded message streams."""

import json

import pytest

from subnorm.exchanges.base import MalformedMessage
from subnorm.exchanges.protocol import CanonicalFilter, Exchange
from subnorm.replay import collect_filters, read_messages


@pytest.fixture
def bitmex_recording(bitmex_subscribe):
    """BitMEX feed: welcome, confirmation, data, second confirmation."""
    return [
        {"info": "Welcome to the BitMEX Realtime API."},
        bitmex_subscribe,
        {"table": "trade", "action": "insert", "data": [{"symbol": "XBTUSD", "price": 9000}]},
        {"op": "subscribe", "args": "liquidation"},
    ]


class TestCollectFilters:
    """Tests for collect_filters function."""

    def test_collects_in_order(self, bitmex_recording):
        """Test filters from every confirmation in message order."""
        result = collect_filters("bitmex", bitmex_recording)

        assert result.exchange is Exchange.BITMEX
        assert result.confirmations == 2
        assert result.skipped == 2
        assert result.malformed == []
        assert result.filters == [
            CanonicalFilter("trade", ("XBTUSD",)),
            CanonicalFilter("orderBookL2", ("ETHUSD",)),
            CanonicalFilter("instrument"),
            CanonicalFilter("liquidation"),
        ]

    def test_raise_on_malformed(self, bitmex_recording):
        """Test that malformed confirmations propagate by default."""
        bitmex_recording.append({"op": "subscribe"})
        with pytest.raises(MalformedMessage):
            collect_filters(Exchange.BITMEX, bitmex_recording)

    def test_skip_malformed(self, bitmex_recording):
        """Test that malformed confirmations are recorded in skip mode."""
        bitmex_recording.insert(1, {"op": "subscribe"})
        result = collect_filters(Exchange.BITMEX, bitmex_recording, on_malformed="skip")

        assert result.confirmations == 3
        assert len(result.malformed) == 1
        assert result.malformed[0].exchange is Exchange.BITMEX
        assert len(result.filters) == 4

    def test_no_confirmations(self):
        """Test a stream without confirmations."""
        result = collect_filters("kraken", [[1, [], "trade", "XBT/USD"], {"event": "heartbeat"}])

        assert result.filters == []
        assert result.confirmations == 0
        assert result.skipped == 2

    def test_unsupported_exchange(self):
        """Test error for unsupported exchange."""
        with pytest.raises(ValueError, match="Unsupported exchange"):
            collect_filters("binance", [])


class TestReadMessages:
    """Tests for read_messages function."""

    def test_json_array(self, tmp_path, bitmex_recording):
        """Test loading a JSON array file."""
        path = tmp_path / "feed.json"
        path.write_text(json.dumps(bitmex_recording), encoding="utf-8")

        assert read_messages(path) == bitmex_recording

    def test_json_lines(self, tmp_path, bitmex_recording):
        """Test loading one message per line, ignoring blank lines."""
        path = tmp_path / "feed.jsonl"
        path.write_text("\n".join(json.dumps(m) for m in bitmex_recording) + "\n\n", encoding="utf-8")

        assert read_messages(path) == bitmex_recording

    def test_json_lines_starting_with_array(self, tmp_path):
        """Test a JSON-lines file whose first message is an array."""
        messages = [[1, [], "trade", "XBT/USD"], {"event": "subscribe", "pair": ["XBT/USD"], "subscription": {"name": "trade"}}]
        path = tmp_path / "kraken.jsonl"
        path.write_text("\n".join(json.dumps(m) for m in messages), encoding="utf-8")

        assert read_messages(path) == messages

    def test_single_array_frame_stays_whole(self, tmp_path):
        """Test that a one-line recording of an array frame is one message."""
        frame = [1234, [["5541.2", "0.15", "1534614057.3"]], "trade", "XBT/USD"]
        path = tmp_path / "kraken.jsonl"
        path.write_text(json.dumps(frame) + "\n", encoding="utf-8")

        assert read_messages(path) == [frame]

    def test_explicit_layout_overrides_extension(self, tmp_path, bitmex_recording):
        """Test choosing the layout regardless of the file name."""
        array_path = tmp_path / "feed.txt"
        array_path.write_text(json.dumps(bitmex_recording, indent=2), encoding="utf-8")
        lines_path = tmp_path / "feed.json"
        lines_path.write_text("\n".join(json.dumps(m) for m in bitmex_recording), encoding="utf-8")

        assert read_messages(array_path, layout="array") == bitmex_recording
        assert read_messages(lines_path, layout="lines") == bitmex_recording

    def test_json_file_must_hold_array(self, tmp_path):
        """Test that a .json recording with a non-array root is refused."""
        path = tmp_path / "feed.json"
        path.write_text('{"op": "subscribe", "args": "trade"}', encoding="utf-8")

        with pytest.raises(ValueError, match="expected a JSON array"):
            read_messages(path)

    def test_invalid_line(self, tmp_path):
        """Test that invalid JSON names the offending line."""
        path = tmp_path / "feed.jsonl"
        path.write_text('{"op": "subscribe", "args": "trade"}\n{not json}\n', encoding="utf-8")

        with pytest.raises(ValueError, match=":2: invalid JSON"):
            read_messages(path)
