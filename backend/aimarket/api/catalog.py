"""
Catalog API Endpoints

Read-only access to the module catalog.
"""
from fastapi import APIRouter, Depends
from typing import Dict, Any
import logging

from ..exceptions import NotFoundError
from ..services.state import MarketState, get_market_state

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/catalog")
async def get_catalog_endpoint(
    state: MarketState = Depends(get_market_state)
) -> Dict[str, Any]:
    """
    List all purchasable modules.

    Returns:
        {
            "items": List[Module]
        }

    Example:
        GET /api/catalog
    """
    return {
        "items": [module.model_dump(mode="json") for module in state.catalog]
    }


@router.get("/modules/{module_id}")
async def get_module_endpoint(
    module_id: str,
    state: MarketState = Depends(get_market_state)
) -> Dict[str, Any]:
    """
    Get specific module by ID.

    Path Parameters:
        module_id: Module identifier

    Returns:
        {"item": Module}, or 404 {"error": "Module not found"}

    Example:
        GET /api/modules/audit-agent
    """
    logger.debug(f"Get module: {module_id}")

    module = next((m for m in state.catalog if m.id == module_id), None)
    if module is None:
        raise NotFoundError("Module not found", details={"module_id": module_id})

    return {"item": module.model_dump(mode="json")}
