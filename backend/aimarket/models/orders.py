"""
Pydantic Order Models

Request bodies for checkout endpoints and a typed view over the PayPal
capture response.
"""
from typing import Any, Dict, List, Optional, Union
from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel


# ============================================================================
# Request Bodies
# ============================================================================

class OrderRequest(BaseModel):
    """
    Body of POST /api/orders.

    Fields are optional here; presence is checked by the order service so the
    error message stays "Missing item data".
    """
    item_id: Optional[str] = None
    item_name: Optional[str] = None
    amount: Optional[str] = None

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }

    @field_validator("amount", mode="before")
    @classmethod
    def amount_as_string(cls, v: Union[str, int, float, None]):
        """Accept numeric amounts from clients that send `79` instead of `"79.00"`."""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return f"{v:.2f}"
        return v


class DemoActivationRequest(BaseModel):
    """Body of POST /api/demo-activation."""
    module_id: Optional[str] = None

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }


# ============================================================================
# PayPal Capture Response
# ============================================================================

def _scalar_or_none(v: Any) -> Optional[str]:
    """Strings pass, numbers become strings, anything else is treated as absent."""
    if isinstance(v, str):
        return v
    if isinstance(v, (int, float)) and not isinstance(v, bool):
        return str(v)
    return None


def _object_or_none(v: Any) -> Optional[dict]:
    return v if isinstance(v, dict) else None


def _objects(v: Any) -> List[dict]:
    """Keep only the JSON objects of a list; a non-list is an empty list."""
    if not isinstance(v, list):
        return []
    return [item for item in v if isinstance(item, dict)]


class _Capture(BaseModel):
    id: Optional[str] = None
    status: Optional[str] = None

    model_config = {"extra": "ignore"}

    read_scalars = field_validator("id", "status", mode="before")(_scalar_or_none)


class _Payments(BaseModel):
    captures: List[_Capture] = Field(default_factory=list)

    model_config = {"extra": "ignore"}

    read_lists = field_validator("captures", mode="before")(_objects)


class _PurchaseUnit(BaseModel):
    reference_id: Optional[str] = None
    payments: Optional[_Payments] = None

    model_config = {"extra": "ignore"}

    read_scalars = field_validator("reference_id", mode="before")(_scalar_or_none)
    read_objects = field_validator("payments", mode="before")(_object_or_none)


class _PayerName(BaseModel):
    given_name: Optional[str] = None
    surname: Optional[str] = None

    model_config = {"extra": "ignore"}

    read_scalars = field_validator("given_name", "surname", mode="before")(_scalar_or_none)


class _Payer(BaseModel):
    name: Optional[_PayerName] = None
    email_address: Optional[str] = None

    model_config = {"extra": "ignore"}

    read_scalars = field_validator("email_address", mode="before")(_scalar_or_none)
    read_objects = field_validator("name", mode="before")(_object_or_none)


class CaptureResult(BaseModel):
    """
    Typed view over a PayPal capture payload.

    Every nested field may be absent; accessors return None instead of raising,
    so callers branch on missing data explicitly. A badly typed field is read
    as absent without discarding its well-formed siblings.
    """
    id: Optional[str] = None
    status: Optional[str] = None
    payer: Optional[_Payer] = None
    purchase_units: List[_PurchaseUnit] = Field(default_factory=list)

    model_config = {"extra": "ignore"}

    read_scalars = field_validator("id", "status", mode="before")(_scalar_or_none)
    read_objects = field_validator("payer", mode="before")(_object_or_none)
    read_lists = field_validator("purchase_units", mode="before")(_objects)

    @classmethod
    def from_payload(cls, payload: Any) -> "CaptureResult":
        """Parse a raw provider payload; an unexpected shape yields an empty result."""
        if not isinstance(payload, dict):
            return cls()
        try:
            return cls.model_validate(payload)
        except PydanticValidationError:
            return cls(id=payload.get("id") if isinstance(payload.get("id"), str) else None)

    @property
    def first_unit(self) -> Optional[_PurchaseUnit]:
        return self.purchase_units[0] if self.purchase_units else None

    @property
    def reference_id(self) -> Optional[str]:
        unit = self.first_unit
        return unit.reference_id if unit else None

    @property
    def capture_id(self) -> Optional[str]:
        unit = self.first_unit
        if unit is None or unit.payments is None or not unit.payments.captures:
            return None
        return unit.payments.captures[0].id

    @property
    def payer_name(self) -> Optional[str]:
        if self.payer is None or self.payer.name is None:
            return None
        return self.payer.name.given_name

    def summary(self) -> Dict[str, Optional[str]]:
        """Flat dict for log lines."""
        return {
            "order_id": self.id,
            "status": self.status,
            "reference_id": self.reference_id,
            "capture_id": self.capture_id,
        }
