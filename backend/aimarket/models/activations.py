"""
Pydantic Activation Model

Activation token handed to the buyer after a captured payment or a demo request.
"""
from datetime import datetime
from typing import List, Literal
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class Activation(BaseModel):
    """
    Activation token bound to a module and an order (or demo) id.

    Created once, never mutated. Serialized with camelCase keys
    (orderId, moduleId, expiresAt, ...).
    """
    token: str = Field(pattern="^AIM-.+-[0-9A-F]{20}$")
    order_id: str
    module_id: str
    module_name: str
    issued_at: datetime
    expires_at: datetime
    next_steps: List[str]
    mode: Literal["demo", "paypal"]

    model_config = {
        "frozen": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }

    def to_json(self) -> dict:
        """JSON-ready dict with wire (camelCase) keys."""
        return self.model_dump(mode="json", by_alias=True)
