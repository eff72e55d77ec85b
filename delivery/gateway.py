"""
Messaging gateway client.

Submits messages to the CRM/messaging provider's conversations endpoint
over an authenticated HTTP POST. One attempt per call: no retries.
"""

from typing import Any, Optional

import requests

from core.errors import DeliveryFailure
from utils.config import Config


MESSAGES_PATH = "/conversations/messages"


class GatewayClient:
    """
    Thin client for the messaging gateway.

    Features:
    - Bearer-token authentication
    - API version header
    - Location id injected into every payload
    - Every failure surfaces as DeliveryFailure
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        session: Optional[requests.Session] = None,
    ):
        self.config = config or Config.load()
        self._session = session or requests.Session()
        self._session.headers.update({
            "Authorization": f"Bearer {self.config.gateway_api_key or ''}",
            "Content-Type": "application/json",
            "Accept": "application/json",
            "Version": self.config.gateway_api_version,
        })

    @property
    def is_configured(self) -> bool:
        return self.config.gateway_configured

    @property
    def messages_url(self) -> str:
        return f"{self.config.gateway_base_url.rstrip('/')}{MESSAGES_PATH}"

    def post_message(self, payload: dict[str, Any]) -> dict[str, Any]:
        """
        Submit one message.

        Args:
            payload: Message body (type, contactId, message/html, ...)

        Returns:
            Decoded JSON response (empty dict if the body is not JSON)

        Raises:
            DeliveryFailure: On missing configuration, transport error,
                or a non-2xx response.
        """
        if not self.is_configured:
            raise DeliveryFailure("Messaging gateway is not configured")

        body = {"locationId": self.config.gateway_location_id, **payload}

        try:
            response = self._session.post(
                self.messages_url,
                json=body,
                timeout=self.config.request_timeout,
            )
        except (requests.RequestException, OSError, UnicodeError) as exc:
            # UnicodeError: header values http.client cannot encode as latin-1
            raise DeliveryFailure(f"Gateway transport error: {exc}") from exc

        if not response.ok:
            raise DeliveryFailure(
                f"Gateway returned HTTP {response.status_code}",
                status_code=response.status_code,
                response_text=response.text,
            )

        try:
            return response.json()
        except ValueError:
            return {}
