"""
Activations API Endpoints

Recent activation history and demo activations (no payment involved).
"""
from fastapi import APIRouter, Depends
from typing import Dict, Any, Optional
import logging

from ..models.orders import DemoActivationRequest
from ..services.state import MarketState, get_market_state

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/activations")
async def list_activations_endpoint(
    state: MarketState = Depends(get_market_state)
) -> Dict[str, Any]:
    """
    Recent activations, newest first.

    Returns:
        {
            "items": List[Activation]
        }
    """
    return {
        "items": [activation.to_json() for activation in state.activation_log.list()]
    }


@router.post("/demo-activation")
async def demo_activation_endpoint(
    body: Optional[DemoActivationRequest] = None,
    state: MarketState = Depends(get_market_state)
) -> Dict[str, Any]:
    """
    Issue an activation token without payment.

    Request Body:
        {"moduleId": str}

    Returns:
        {
            "activation": Activation,  # mode "demo", orderId "demo-<epoch ms>"
            "demo": true
        }

    Errors:
        400 {"error": "Missing moduleId"}
    """
    body = body or DemoActivationRequest()
    logger.info(f"Demo activation requested for module: {body.module_id}")

    activation = state.activations.issue_demo(body.module_id)

    return {
        "activation": activation.to_json(),
        "demo": True,
    }
