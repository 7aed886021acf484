"""
Metrics API Endpoint
"""
from fastapi import APIRouter, Depends
from typing import Dict, Any

from ..services.metrics_service import compute_metrics
from ..services.state import MarketState, get_market_state

router = APIRouter()


@router.get("/metrics")
async def get_metrics_endpoint(
    state: MarketState = Depends(get_market_state)
) -> Dict[str, Any]:
    """
    Storefront counters derived from the catalog and in-memory logs.

    Returns:
        {
            "catalogCount": int,
            "activationCount": int,
            "briefCount": int,
            "lastActivation": str | null,
            "lastBrief": str | null
        }
    """
    return compute_metrics(state)
