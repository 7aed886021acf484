"""
PayPal REST Client

Thin async wrapper over the three PayPal endpoints the checkout uses:
OAuth token exchange, order creation and order capture.

No token caching: every orchestrator call fetches a fresh bearer token.
"""
from typing import Any, Dict, Optional, Tuple
from urllib.parse import quote
import logging

import httpx

from ..config import Settings
from ..exceptions import ExternalAuthError

logger = logging.getLogger(__name__)

TOKEN_PATH = "/v1/oauth2/token"
ORDERS_PATH = "/v2/checkout/orders"


def order_path_segment(order_id: str) -> str:
    """
    Percent-encode an order id as a single path segment.

    Dots are encoded too so `.` and `..` ids are not collapsed as dot segments.
    """
    return quote(order_id, safe="").replace(".", "%2E")


class PayPalClient:
    """
    PayPal API client bound to one set of credentials.

    Responses are returned as (status, payload) pairs so callers can forward
    provider statuses verbatim. Transport errors propagate as httpx errors.
    """

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize the HTTP client for the configured API base.

        Args:
            settings: Resolved credentials and API base
            transport: Optional transport override (tests use httpx.MockTransport)
        """
        self.settings = settings
        self._client = httpx.AsyncClient(
            base_url=settings.paypal_api_base,
            transport=transport,
        )
        logger.info(
            f"PayPal client initialized: api_base={settings.paypal_api_base}, "
            f"live={settings.is_live}"
        )

    @property
    def is_configured(self) -> bool:
        return self.settings.is_live

    async def fetch_access_token(self) -> str:
        """
        Exchange client credentials for a bearer token.

        Returns:
            access_token string

        Raises:
            ExternalAuthError: Credentials missing, non-2xx response (raw body in
                the message), or no access_token in the response
        """
        if not self.is_configured:
            raise ExternalAuthError("PayPal token error: PayPal credentials are not configured")

        try:
            response = await self._client.post(
                TOKEN_PATH,
                auth=(self.settings.paypal_client_id, self.settings.paypal_client_secret),
                data={"grant_type": "client_credentials"},
                headers={"Accept": "application/json"},
            )
        except httpx.HTTPError as e:
            raise ExternalAuthError(f"PayPal token error: {e}")

        if not response.is_success:
            logger.error(f"PayPal token request failed: HTTP {response.status_code}")
            raise ExternalAuthError(
                f"PayPal token error: {response.text}",
                details={"status_code": response.status_code}
            )

        try:
            access_token = response.json().get("access_token")
        except (ValueError, AttributeError):
            access_token = None
        if not access_token:
            raise ExternalAuthError("PayPal token error: no access_token in response")

        return access_token

    async def create_order(
        self,
        access_token: str,
        order: Dict[str, Any]
    ) -> Tuple[int, Any]:
        """POST a new order; returns (provider status, provider JSON)."""
        response = await self._client.post(
            ORDERS_PATH,
            json=order,
            headers=self._bearer(access_token),
        )
        return response.status_code, response.json()

    async def capture_order(self, access_token: str, order_id: str) -> Tuple[int, Any]:
        """Capture an approved order; returns (provider status, provider JSON)."""
        response = await self._client.post(
            f"{ORDERS_PATH}/{order_path_segment(order_id)}/capture",
            headers=self._bearer(access_token),
        )
        return response.status_code, response.json()

    async def aclose(self) -> None:
        await self._client.aclose()

    @staticmethod
    def _bearer(access_token: str) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {access_token}",
            "Content-Type": "application/json",
        }
