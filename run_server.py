#!/usr/bin/env python3
"""
Alpha Vantage MCP server launcher
Serves the market data tools over stdio (stdout carries the protocol, logs go to stderr)
"""
import asyncio
import logging
import sys

from alphavantage_mcp.config import settings, require_api_key, masked_key
from alphavantage_mcp.server import serve

logger = logging.getLogger(__name__)


def main():
    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )
    try:
        api_key = require_api_key()
    except SystemExit as e:
        logger.error(str(e))
        raise

    logger.info(f"Python {sys.version}, Alpha Vantage key={masked_key(api_key)}")
    try:
        asyncio.run(serve())
    except KeyboardInterrupt:
        logger.info("Server stopped")


if __name__ == "__main__":
    main()
