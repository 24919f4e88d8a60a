"""Auto-import builtin tool modules to trigger @register_tool decorators.

Import order is the order tools are listed in.
"""
from . import ohlcv
from . import dividends
from . import holdings
from . import exchange_rate
