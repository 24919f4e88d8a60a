"""Exchange rate tool — realtime fiat or crypto rate via CURRENCY_EXCHANGE_RATE."""
import logging

from ... import alphavantage
from ..registry import register_tool, ToolResult, ToolParam

logger = logging.getLogger(__name__)


@register_tool(
    "get_exchange_rate",
    description="Get the realtime exchange rate between two currencies (fiat or crypto)",
    params=[
        ToolParam("fromCurrency", description="The currency to convert from (e.g. USD, BTC)"),
        ToolParam("toCurrency", description="The currency to convert to (e.g. EUR, JPY)"),
    ],
)
async def get_exchange_rate(
    fromCurrency: str = "", toCurrency: str = "", api_key: str = "", **kwargs
) -> ToolResult:
    pair = f"{fromCurrency} to {toCurrency}"
    try:
        data = await alphavantage.query(
            "CURRENCY_EXCHANGE_RATE", api_key,
            from_currency=fromCurrency, to_currency=toCurrency,
        )
        quote = data.get("Realtime Currency Exchange Rate")
        if not quote:
            return ToolResult.error(f"Could not retrieve exchange rate for {pair}.")

        rate = quote.get("5. Exchange Rate")
        if rate is None:
            return ToolResult.error(f"Could not retrieve exchange rate for {pair}.")
    except Exception as e:
        logger.error(f"Exchange rate lookup for {pair} failed: {e}", exc_info=True)
        return ToolResult.error(f"Failed to get the exchange rate for {pair}. Error: {e}")

    return ToolResult.ok(f"The exchange rate from {fromCurrency} to {toCurrency} is {rate}")
