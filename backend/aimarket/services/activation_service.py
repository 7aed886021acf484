"""
Activation Service

Issues activation tokens after a captured PayPal payment or a demo request,
and records them in the activation log.

Token format: AIM-<MODULE_ID_UPPER>-<10 random bytes as uppercase hex>
"""
import secrets
import time
from datetime import datetime, timedelta, timezone
from typing import List, Literal, Optional
import logging

from ..exceptions import ValidationError
from ..models.activations import Activation
from .catalog import resolve_module_name
from .recent_log import RecentLog

logger = logging.getLogger(__name__)

TOKEN_PREFIX = "AIM"
TOKEN_RANDOM_BYTES = 10

# Instructions returned with every activation, in order
NEXT_STEPS: List[str] = [
    "Copiez le jeton d'activation dans votre outil d'orchestration (n8n, Make, Zapier).",
    "Envoyez un brief avec le contexte, les objectifs et les sources de données du module.",
    "Recevez le livrable dans le délai annoncé et planifiez le suivi avec l'opérateur.",
]


def build_token(module_id: Optional[str]) -> str:
    """Mint a token string for `module_id`; unknown or empty ids use `MODULE`."""
    segment = (module_id or "module").upper()
    random_part = secrets.token_hex(TOKEN_RANDOM_BYTES).upper()
    return f"{TOKEN_PREFIX}-{segment}-{random_part}"


class ActivationService:
    """
    Activation issuer bound to one activation log.

    Tokens are unique with overwhelming probability (80 random bits);
    uniqueness is not enforced.
    """

    def __init__(self, activation_log: RecentLog[Activation], ttl_hours: int = 72):
        self.activation_log = activation_log
        self.ttl = timedelta(hours=ttl_hours)

    def issue(
        self,
        order_id: str,
        reference_id: Optional[str],
        mode: Literal["demo", "paypal"] = "paypal"
    ) -> Activation:
        """
        Issue and record an activation for an order.

        Args:
            order_id: PayPal order id, or `demo-<epoch ms>` for demo requests
            reference_id: Module id carried by the purchase unit (may be absent)
            mode: "paypal" after a capture, "demo" otherwise

        Returns:
            The recorded Activation
        """
        issued_at = datetime.now(timezone.utc)
        activation = Activation(
            token=build_token(reference_id),
            order_id=order_id,
            module_id=reference_id or "",
            module_name=resolve_module_name(reference_id),
            issued_at=issued_at,
            expires_at=issued_at + self.ttl,
            next_steps=list(NEXT_STEPS),
            mode=mode,
        )
        self.activation_log.record(activation)

        logger.info(
            f"Issued activation: module={activation.module_id or '-'}, "
            f"order={order_id}, mode={mode}"
        )
        return activation

    def issue_demo(self, module_id: Optional[str]) -> Activation:
        """
        Issue a demo activation without any provider interaction.

        Raises:
            ValidationError: If module_id is missing (nothing is recorded)
        """
        if not module_id:
            raise ValidationError("Missing moduleId")

        order_id = f"demo-{int(time.time() * 1000)}"
        return self.issue(order_id, module_id, mode="demo")
