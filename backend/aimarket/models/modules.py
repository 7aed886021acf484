"""
Pydantic Module Model

A catalog entry: one purchasable AI service.
"""
from typing import List
from pydantic import BaseModel, Field, field_validator


class Module(BaseModel):
    """
    Purchasable AI agent module.

    Immutable once seeded; `id` is the natural key referenced by
    activations, briefs and PayPal purchase units.
    """
    id: str = Field(pattern="^[a-z0-9-]+$")
    name: str
    description: str
    deliverable: str
    eta: str
    price: str = Field(pattern=r"^\d+\.\d{2}$")  # Decimal string, EUR
    tags: List[str] = Field(default_factory=list)
    inputs: List[str] = Field(default_factory=list)
    outputs: List[str] = Field(default_factory=list)

    model_config = {
        "frozen": True,
        "extra": "forbid",
        "json_schema_extra": {
            "example": {
                "id": "audit-agent",
                "name": "Audit IA",
                "description": "Audit automatique de vos données et recommandations actionnables.",
                "deliverable": "Rapport d'audit priorisé",
                "eta": "48h",
                "price": "49.00",
                "tags": ["audit", "data"],
                "inputs": ["Export CRM", "Tableaux de bord"],
                "outputs": ["Rapport PDF", "Plan d'action"]
            }
        }
    }

    @field_validator("tags")
    @classmethod
    def tags_unique(cls, v: List[str]):
        if len(set(v)) != len(v):
            raise ValueError("Module tags must be unique")
        return v
