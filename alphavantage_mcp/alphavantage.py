"""Alpha Vantage HTTP client — one GET per call against the /query endpoint."""
import logging
from typing import Any, Dict, Optional

import httpx

from .config import settings

logger = logging.getLogger(__name__)

# Keys Alpha Vantage uses for errors, rate limits and premium notices (served with HTTP 200)
_ERROR_KEYS = ("Error Message", "Information", "Note")


class AlphaVantageError(Exception):
    """Upstream call failed: transport, status, body or an Alpha Vantage error payload."""


def _upstream_error(data: Dict[str, Any]) -> Optional[str]:
    for key in _ERROR_KEYS:
        if key in data and len(data) == 1:
            return str(data[key])
    return None


async def query(
    function: str,
    api_key: str,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    **params: Any,
) -> Dict[str, Any]:
    """GET ?function=<function>&apikey=<api_key>&<params> and return the JSON object."""
    request_params = {"function": function, **params, "apikey": api_key}
    try:
        async with httpx.AsyncClient(timeout=settings.http_timeout, transport=transport) as client:
            resp = await client.get(settings.alphavantage_base_url, params=request_params)
            resp.raise_for_status()
            data = resp.json()
    except httpx.HTTPStatusError as e:
        raise AlphaVantageError(f"HTTP {e.response.status_code} from Alpha Vantage") from e
    except httpx.HTTPError as e:
        raise AlphaVantageError(f"Request to Alpha Vantage failed: {e}") from e
    except ValueError as e:
        raise AlphaVantageError(f"Invalid JSON from Alpha Vantage: {e}") from e

    if not isinstance(data, dict):
        raise AlphaVantageError(f"Unexpected response from Alpha Vantage: {type(data).__name__}")

    message = _upstream_error(data)
    if message:
        raise AlphaVantageError(message)

    logger.debug(f"Alpha Vantage {function}: {len(data)} top-level keys")
    return data
