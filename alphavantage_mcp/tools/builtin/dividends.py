"""Dividend tool — dividend history of a ticker via DIVIDENDS."""
import logging

from ... import alphavantage
from ..registry import register_tool, ToolResult, ToolParam

logger = logging.getLogger(__name__)


@register_tool(
    "get_dividends",
    description="Get the dividend history (ex-dividend dates and amounts) for a ticker",
    params=[
        ToolParam("ticker", description="The ticker symbol to get dividends for (e.g. AAPL)"),
    ],
)
async def get_dividends(ticker: str = "", api_key: str = "", **kwargs) -> ToolResult:
    try:
        data = await alphavantage.query("DIVIDENDS", api_key, symbol=ticker)
        records = data.get("data")
        if records is None:
            return ToolResult.error(f"No dividend data found for {ticker}.")

        lines = [
            f"Ex-Dividend Date: {r['ex_dividend_date']}, Amount: {r['amount']}"
            for r in records
        ]
    except Exception as e:
        logger.error(f"Dividend lookup for {ticker} failed: {e}", exc_info=True)
        return ToolResult.error(f"Failed to get the dividend data for {ticker}. Error: {e}")

    return ToolResult.ok("\n".join([f"Dividend history for {ticker}:", *lines]))
