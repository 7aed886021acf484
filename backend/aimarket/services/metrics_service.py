"""
Metrics Service

Derives storefront counters from the catalog and the in-memory logs.
Nothing is stored; every read recomputes.
"""
from typing import Any, Dict

from .state import MarketState


def compute_metrics(state: MarketState) -> Dict[str, Any]:
    """
    Compute metrics on read.

    Returns:
        {
            "catalogCount": int,
            "activationCount": int,
            "briefCount": int,
            "lastActivation": ISO timestamp | None,
            "lastBrief": ISO timestamp | None
        }
    """
    last_activation = state.activation_log.latest()
    last_brief = state.brief_log.latest()

    return {
        "catalogCount": len(state.catalog),
        "activationCount": len(state.activation_log),
        "briefCount": len(state.brief_log),
        "lastActivation": last_activation.to_json()["issuedAt"] if last_activation else None,
        "lastBrief": last_brief.to_json()["createdAt"] if last_brief else None,
    }
