"""
Services package for AI Market.

Exports the market state wiring and the services handlers depend on.
"""
from .recent_log import RecentLog
from .activation_service import ActivationService
from .brief_service import BriefService
from .order_service import OrderService
from .paypal_client import PayPalClient
from .state import MarketState, build_market_state, get_market_state

__all__ = [
    "RecentLog",
    "ActivationService",
    "BriefService",
    "OrderService",
    "PayPalClient",
    "MarketState",
    "build_market_state",
    "get_market_state",
]
