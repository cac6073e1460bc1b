"""
Paystack gateway client.

The service builds one client at startup from PAYSTACK_API_KEY and keeps it
on the application state. Payment creation does not call it yet; payments
stay ``pending`` until a settlement flow exists.
"""
import logging
from typing import Any, Dict, Optional

import httpx
from tenacity import (
    Retrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from payment_api.config import PAYSTACK_BASE_URL
from payment_api.errors import GatewayError

logger = logging.getLogger("payment-service")

INVALID_RESPONSE_MESSAGE = "Payment gateway returned an invalid response"


class PaystackClient:
    def __init__(
        self,
        api_key: str,
        base_url: str = PAYSTACK_BASE_URL,
        timeout: float = 10.0,
        max_attempts: int = 3,
        backoff: float = 1.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url
        self._client = httpx.Client(
            base_url=base_url,
            headers={"Authorization": f"Bearer {api_key}"},
            timeout=timeout,
            transport=transport,
        )
        # Only connection-level failures are retried; HTTP error statuses are final
        self._retrying = Retrying(
            stop=stop_after_attempt(max_attempts),
            wait=wait_exponential(multiplier=backoff, min=0, max=10),
            retry=retry_if_exception_type(httpx.TransportError),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        )

    def _request(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        try:
            response = self._retrying(self._client.request, method, path, **kwargs)
        except httpx.TransportError as e:
            logger.error(f"[PAYSTACK] {method} {path} failed: {e}")
            raise GatewayError(f"Payment gateway unreachable: {e}") from e

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"[PAYSTACK] {method} {path} returned {response.status_code}")
            raise GatewayError(
                f"Payment gateway returned {response.status_code}: {response.text}"
            ) from e

        try:
            body = response.json()
        except ValueError as e:
            logger.error(f"[PAYSTACK] {method} {path} returned a non-JSON body")
            raise GatewayError(INVALID_RESPONSE_MESSAGE) from e
        if not isinstance(body, dict):
            logger.error(f"[PAYSTACK] {method} {path} returned a non-object body")
            raise GatewayError(INVALID_RESPONSE_MESSAGE)
        if not body.get("status"):
            raise GatewayError(body.get("message") or "Payment gateway request was not successful")
        logger.debug(f"[PAYSTACK] {method} {path} ok")
        return body.get("data") or {}

    def initialize_transaction(self, email: str, amount: float, reference: str) -> Dict[str, Any]:
        """
        Start a Paystack transaction for a payment.

        ``amount`` is in the major currency unit and is sent in the minor unit
        Paystack expects. Returns the ``data`` object, which carries
        ``authorization_url``, ``access_code`` and ``reference``.
        """
        payload = {
            "email": email,
            "amount": int(round(float(amount) * 100)),
            "reference": reference,
        }
        return self._request("POST", "/transaction/initialize", json=payload)

    def verify_transaction(self, reference: str) -> Dict[str, Any]:
        return self._request("GET", f"/transaction/verify/{reference}")

    def close(self):
        self._client.close()

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
