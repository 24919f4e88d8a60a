"""OHLCV tool — one field of a ticker's daily bar via TIME_SERIES_DAILY."""
import logging

from ... import alphavantage
from ..registry import register_tool, ToolResult, ToolParam

logger = logging.getLogger(__name__)

_SERIES_KEY = "Time Series (Daily)"

# infoType -> field name inside a daily record
_FIELDS = {
    "open": "1. open",
    "high": "2. high",
    "low": "3. low",
    "close": "4. close",
    "volume": "5. volume",
}


def latest_date(series: dict) -> str:
    """Most recent trading day in a date-keyed series, "" when the series is empty.

    Alpha Vantage lists dates newest first, but ISO dates compare correctly as
    strings, so the maximum is taken instead of trusting mapping order.
    """
    return max(series, default="")


@register_tool(
    "get_ticker_ohlcv",
    description="Get specific ticker OHLCV data (Open, High, Low, Close, Volume)",
    params=[
        ToolParam("ticker", description="The ticker symbol to get the price for (e.g. AAPL)"),
        ToolParam(
            "infoType",
            description="The type of ticker information to get (open, close, high, low, volume)",
            enum=["open", "close", "high", "low", "volume"],
        ),
        ToolParam(
            "date",
            description="The date for which to get the OHLCV data (YYYY-MM-DD)",
            pattern=r"^\d{4}-\d{2}-\d{2}$",
        ),
    ],
)
async def get_ticker_ohlcv(
    ticker: str = "", infoType: str = "", date: str = "", api_key: str = "", **kwargs
) -> ToolResult:
    failure = f"Failed to get the {infoType} price for {ticker}."
    try:
        data = await alphavantage.query(
            "TIME_SERIES_DAILY", api_key, symbol=ticker, outputsize="full"
        )
        series = data.get(_SERIES_KEY)
        if not isinstance(series, dict):
            raise alphavantage.AlphaVantageError(f"Response has no '{_SERIES_KEY}'")

        actual_date = date or latest_date(series)
        record = series.get(actual_date)
        if not record:
            return ToolResult.error(f"No data found for {ticker} on {actual_date}.")

        field_name = _FIELDS.get(infoType)
        if field_name is None:
            return ToolResult.error(f"Invalid infoType: {infoType}")

        price = record.get(field_name)
        if price is None:
            return ToolResult.error(f"No data found for {ticker} on {actual_date}.")
    except Exception as e:
        logger.error(f"OHLCV lookup for {ticker} failed: {e}", exc_info=True)
        return ToolResult.error(f"{failure} Error: {e}")

    return ToolResult.ok(f"The {infoType} for {ticker} on {actual_date} is {price}")
