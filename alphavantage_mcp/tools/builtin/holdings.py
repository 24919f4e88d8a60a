"""ETF holdings tool — constituents and weights via ETF_PROFILE."""
import logging

from ... import alphavantage
from ..registry import register_tool, ToolResult, ToolParam

logger = logging.getLogger(__name__)


def _format_holding(holding: dict) -> str:
    return (
        f"Holding: {holding['description']} ({holding['symbol']}), "
        f"Weight: {holding['weight']}"
    )


@register_tool(
    "get_etf_holdings",
    description="Get the holdings of an ETF with each constituent's portfolio weight",
    params=[
        ToolParam("ticker", description="The ETF ticker symbol to get holdings for (e.g. QQQ)"),
    ],
)
async def get_etf_holdings(ticker: str = "", api_key: str = "", **kwargs) -> ToolResult:
    try:
        data = await alphavantage.query("ETF_PROFILE", api_key, symbol=ticker)
        holdings = data.get("holdings")
        if holdings is None:
            return ToolResult.error(f"No holdings data found for {ticker}.")

        lines = [_format_holding(h) for h in holdings]
    except Exception as e:
        logger.error(f"Holdings lookup for {ticker} failed: {e}", exc_info=True)
        return ToolResult.error(f"Failed to get the holdings data for {ticker}. Error: {e}")

    return ToolResult.ok("\n".join([f"Holdings for {ticker}:", *lines]))
