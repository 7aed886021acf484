"""
Market State

Process-wide context owned by the application: catalog, in-memory logs,
PayPal client and the services built on them. Handlers receive it through
the `get_market_state` dependency instead of reaching for module globals.
"""
from dataclasses import dataclass, field
from typing import List, Optional
import time

import httpx
from fastapi import Request

from ..config import Settings
from ..models.activations import Activation
from ..models.briefs import Brief
from ..models.modules import Module
from .activation_service import ActivationService
from .brief_service import BriefService
from .catalog import list_modules
from .order_service import OrderService
from .paypal_client import PayPalClient
from .recent_log import RecentLog


@dataclass
class MarketState:
    """Everything a request handler may touch."""
    settings: Settings
    catalog: List[Module]
    activation_log: RecentLog[Activation]
    brief_log: RecentLog[Brief]
    paypal: PayPalClient
    activations: ActivationService
    briefs: BriefService
    orders: OrderService
    started_at: float = field(default_factory=time.monotonic)

    @property
    def uptime(self) -> float:
        return time.monotonic() - self.started_at


def build_market_state(
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None
) -> MarketState:
    """
    Wire a fresh state with empty logs.

    Args:
        settings: Application settings
        transport: Optional PayPal transport override for tests
    """
    activation_log: RecentLog[Activation] = RecentLog(settings.activation_log_size)
    brief_log: RecentLog[Brief] = RecentLog(settings.brief_log_size)
    paypal = PayPalClient(settings, transport=transport)
    activations = ActivationService(activation_log, ttl_hours=settings.activation_ttl_hours)

    return MarketState(
        settings=settings,
        catalog=list_modules(),
        activation_log=activation_log,
        brief_log=brief_log,
        paypal=paypal,
        activations=activations,
        briefs=BriefService(brief_log),
        orders=OrderService(paypal, activations),
    )


def get_market_state(request: Request) -> MarketState:
    """FastAPI dependency returning the state attached to the running app."""
    return request.app.state.market
