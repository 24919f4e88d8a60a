"""Tests for tools/registry.py — descriptors, schemas and ToolResult."""
from alphavantage_mcp.tools import list_tools, get_tool
from alphavantage_mcp.tools.registry import ToolParam, ToolResult


class TestListTools:
    def test_four_tools_in_fixed_order(self):
        names = [t.name for t in list_tools()]
        assert names == ["get_ticker_ohlcv", "get_dividends", "get_etf_holdings", "get_exchange_rate"]

    def test_listing_is_deterministic(self):
        assert [t.name for t in list_tools()] == [t.name for t in list_tools()]

    def test_every_tool_has_description(self):
        for tool in list_tools():
            assert tool.description

    def test_get_tool_exact_match(self):
        assert get_tool("get_dividends") is not None
        assert get_tool("GET_DIVIDENDS") is None
        assert get_tool("nope") is None


class TestInputSchema:
    def test_ohlcv_schema(self):
        schema = get_tool("get_ticker_ohlcv").input_schema()
        assert schema["type"] == "object"
        assert list(schema["properties"]) == ["ticker", "infoType", "date"]
        assert schema["properties"]["infoType"]["enum"] == ["open", "close", "high", "low", "volume"]
        assert schema["properties"]["date"]["pattern"] == r"^\d{4}-\d{2}-\d{2}$"
        assert schema["required"] == ["ticker", "infoType", "date"]

    def test_exchange_schema(self):
        schema = get_tool("get_exchange_rate").input_schema()
        assert schema["required"] == ["fromCurrency", "toCurrency"]
        assert "enum" not in schema["properties"]["fromCurrency"]

    def test_param_without_constraints(self):
        assert ToolParam("ticker", description="x").schema() == {"type": "string", "description": "x"}


class TestToolResult:
    def test_ok(self):
        r = ToolResult.ok("hello")
        assert r.content == [{"type": "text", "text": "hello"}]
        assert r.is_error is False

    def test_error(self):
        r = ToolResult.error("bad")
        assert r.is_error is True
        assert r.text == "bad"
