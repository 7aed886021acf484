"""
Order Service

Creates and captures PayPal orders for catalog modules and issues an
activation once a capture succeeds.

Known gaps, kept deliberately simple:
- No retries; transient and permanent provider failures are not distinguished
- No idempotency guard: capturing the same order twice issues two activations
- If the process stops between capture and activation, the token is lost
"""
from typing import Any, Dict, Optional, Tuple
import logging

import httpx

from ..exceptions import ValidationError, ExternalProviderError, ExternalCaptureError
from ..models.orders import CaptureResult
from .activation_service import ActivationService
from .paypal_client import PayPalClient

logger = logging.getLogger(__name__)

CURRENCY = "EUR"


def build_order_body(module_id: str, module_name: Optional[str], amount: str) -> Dict[str, Any]:
    """CAPTURE-intent order with a single purchase unit for one module."""
    return {
        "intent": "CAPTURE",
        "purchase_units": [
            {
                "reference_id": module_id,
                "description": module_name,
                "amount": {
                    "currency_code": CURRENCY,
                    "value": amount,
                },
            }
        ],
    }


class OrderService:
    """Order orchestrator over the PayPal client and the activation issuer."""

    def __init__(self, paypal: PayPalClient, activations: ActivationService):
        self.paypal = paypal
        self.activations = activations

    async def create_order(
        self,
        module_id: Optional[str],
        module_name: Optional[str],
        amount: Optional[str]
    ) -> Tuple[int, Any]:
        """
        Create a PayPal order for a module.

        Args:
            module_id: Catalog module id, sent as the purchase unit reference_id
            module_name: Purchase unit description
            amount: Decimal string in EUR

        Returns:
            (provider status, provider JSON), forwarded verbatim

        Raises:
            ValidationError: module_id or amount missing
            ExternalAuthError: Token exchange failed
            ExternalProviderError: Provider unreachable or response not JSON
        """
        if not module_id or not amount:
            raise ValidationError("Missing item data")

        access_token = await self.paypal.fetch_access_token()

        try:
            status, payload = await self.paypal.create_order(
                access_token, build_order_body(module_id, module_name, amount)
            )
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"PayPal order creation failed for {module_id}: {e}")
            raise ExternalProviderError(f"PayPal order error: {e}")

        order_id = payload.get("id") if isinstance(payload, dict) else None
        logger.info(f"Created PayPal order: id={order_id}, module={module_id}, status={status}")
        return status, payload

    async def capture_order(self, order_id: str) -> Tuple[int, Any]:
        """
        Capture an approved order and issue its activation.

        On a 2xx provider response an activation (mode "paypal") is issued for
        the first purchase unit's reference_id, recorded, and merged into the
        payload under `activation`.

        Returns:
            (provider status, provider JSON [+ activation])

        Raises:
            ExternalAuthError: Token exchange failed
            ExternalCaptureError: Provider unreachable or response not JSON
        """
        access_token = await self.paypal.fetch_access_token()

        try:
            status, payload = await self.paypal.capture_order(access_token, order_id)
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"PayPal capture failed for order {order_id}: {e}")
            raise ExternalCaptureError(f"PayPal capture error: {e}")

        if not 200 <= status < 300:
            logger.warning(f"PayPal capture for order {order_id} returned HTTP {status}")
            return status, payload

        capture = CaptureResult.from_payload(payload)
        if capture.reference_id is None:
            logger.warning(f"Capture for order {order_id} carries no reference_id")

        activation = self.activations.issue(order_id, capture.reference_id, mode="paypal")
        logger.info(f"Captured PayPal order: {capture.summary()}")

        if isinstance(payload, dict):
            payload = {**payload, "activation": activation.to_json()}
        else:
            payload = {"result": payload, "activation": activation.to_json()}
        return status, payload
