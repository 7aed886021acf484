"""
Pydantic Brief Models

A brief describes the business context, goals and sources a buyer submits
for a chosen module.
"""
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class Brief(BaseModel):
    """Recorded brief, serialized with camelCase keys."""
    id: str = Field(pattern="^BRF-[0-9A-Z]+$")
    module: str
    module_name: str
    outputs: List[str] = Field(default_factory=list)
    context: str = ""
    goals: str = ""
    sources: List[str] = Field(default_factory=list)
    created_at: datetime

    model_config = {
        "frozen": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class BriefRequest(BaseModel):
    """
    Body of POST /api/briefs.

    Every field is optional at the parsing layer so a missing `module`
    surfaces as the storefront's own 400 error rather than a schema error.
    """
    module: Optional[str] = None
    module_name: Optional[str] = None
    outputs: Optional[List[str]] = None
    context: Optional[str] = None
    goals: Optional[str] = None
    sources: Optional[List[str]] = None

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }
