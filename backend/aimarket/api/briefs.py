"""
Briefs API Endpoints
"""
from fastapi import APIRouter, Depends
from typing import Dict, Any, Optional
import logging

from ..models.briefs import BriefRequest
from ..services.state import MarketState, get_market_state

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/briefs")
async def list_briefs_endpoint(
    state: MarketState = Depends(get_market_state)
) -> Dict[str, Any]:
    """Recent briefs, newest first."""
    return {
        "items": [brief.to_json() for brief in state.brief_log.list()]
    }


@router.post("/briefs")
async def submit_brief_endpoint(
    body: Optional[BriefRequest] = None,
    state: MarketState = Depends(get_market_state)
) -> Dict[str, Any]:
    """
    Record a brief for a module.

    Request Body:
        {
            "module": str,
            "moduleName": str,     # optional, resolved from catalog
            "outputs": List[str],  # optional
            "context": str,        # optional
            "goals": str,          # optional
            "sources": List[str]   # optional
        }

    Returns:
        {"brief": Brief}

    Errors:
        400 {"error": "Missing module"}
    """
    body = body or BriefRequest()
    logger.info(f"Brief submitted for module: {body.module}")

    brief = state.briefs.submit(
        module=body.module,
        module_name=body.module_name,
        outputs=body.outputs,
        context=body.context,
        goals=body.goals,
        sources=body.sources,
    )

    return {"brief": brief.to_json()}
