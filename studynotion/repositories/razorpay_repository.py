import logging
from typing import Any, Dict, Optional

import httpx

from studynotion.config import settings

logger = logging.getLogger(__name__)


class RazorpayRepository:
    """
    Thin client for the Razorpay Orders API.
    Only order creation is needed; payment capture happens on Razorpay's side.
    """

    def __init__(
        self,
        key_id: Optional[str] = None,
        key_secret: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.key_id = key_id or settings.RAZORPAY_KEY
        self.key_secret = key_secret or settings.RAZORPAY_SECRET
        self.base_url = (base_url or settings.RAZORPAY_BASE_URL).rstrip("/")
        self.timeout = timeout or settings.RAZORPAY_TIMEOUT
        self.transport = transport

    def create_order(self, options: Dict[str, Any]) -> Dict[str, Any]:
        """
        POST /orders with ``{amount, currency, receipt}``.
        Returns the order as Razorpay sends it (id, entity, amount, status, ...).
        Raises httpx.HTTPStatusError on a non-2xx answer.
        """
        if not self.key_id or not self.key_secret:
            raise RuntimeError("Razorpay credentials are not configured")

        with httpx.Client(
            base_url=self.base_url,
            auth=(self.key_id, self.key_secret),
            timeout=self.timeout,
            transport=self.transport,
        ) as client:
            res = client.post("/orders", json=options)
            res.raise_for_status()
            order = res.json()

        logger.info(f"[razorpay] order {order.get('id')} created for receipt {options.get('receipt')}")
        return order
