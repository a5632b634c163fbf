import logging
from typing import Optional

import httpx

from storefront.core.config import PAYMENT_GATEWAY_URL, PAYMENT_SECRET_KEY, PAYMENT_GATEWAY_TIMEOUT

logger = logging.getLogger(__name__)


class PaymentGatewayError(Exception):
    """The gateway refused the call or could not be reached.

    ``message`` is the gateway's own message when its error body carried one.
    """

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message or "payment gateway error")
        self.message = message
        self.status_code = status_code


class PaymentGateway:
    """Client for the third-party payment confirmation API."""

    def __init__(
        self,
        base_url: str = PAYMENT_GATEWAY_URL,
        secret_key: str = PAYMENT_SECRET_KEY,
        timeout: float = PAYMENT_GATEWAY_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.secret_key = secret_key
        self.timeout = timeout
        self.transport = transport

    def _post(self, path: str, payload: dict) -> dict:
        url = f"{self.base_url}/{path}"
        with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
            try:
                # secret key as the basic auth user, empty password
                res = client.post(url, json=payload, auth=(self.secret_key, ""))
            except httpx.HTTPError as e:
                logger.error(f"Payment gateway unreachable ({url}): {e}")
                raise PaymentGatewayError() from e

        if res.is_error:
            message = None
            try:
                body = res.json()
                if isinstance(body, dict):
                    message = body.get("message")
            except ValueError:
                pass
            logger.error(f"Payment gateway error {res.status_code} ({url}): {res.text}")
            raise PaymentGatewayError(message, status_code=res.status_code)

        try:
            return res.json()
        except ValueError:
            return {}

    def confirm(self, payment_key: str, order_id: int, amount: int) -> dict:
        return self._post("confirm", {"paymentKey": payment_key, "orderId": order_id, "amount": amount})

    def cancel(self, payment_key: str, reason: str) -> dict:
        return self._post(f"{payment_key}/cancel", {"cancelReason": reason})


_gateway: Optional[PaymentGateway] = None


def get_payment_gateway() -> PaymentGateway:
    global _gateway
    if _gateway is None:
        _gateway = PaymentGateway()
    return _gateway
