"""
Sends a sample WooCommerce order to the webhook endpoint, for development.
"""
import logging
import random
from datetime import datetime
from typing import Any, Dict

import requests

from webhook_api.core.clock import to_iso

logger = logging.getLogger(__name__)


def build_sample_order(now: datetime) -> Dict[str, Any]:
    """Sample order payload shaped like a WooCommerce order webhook."""
    return {
        "id": random.randint(0, 9999),
        "status": "processing",
        "currency": "USD",
        "payment_method": "paytiko_test",
        "transaction_id": f"txn_{int(now.timestamp() * 1000)}",
        "date_created": to_iso(now),
        "total": "297.00",
        "line_items": [
            {
                "id": 1,
                "name": "WeFund 25K Challenge",
                "product_id": 101,
                "quantity": 1,
                "total": "297.00"
            }
        ],
        "billing": {
            "first_name": "John",
            "last_name": "Doe",
            "email": "john.doe@email.com",
            "country": "PH"
        }
    }


def send_sample_webhook(webhook_url: str, payload: Dict[str, Any], timeout: float = 10.0) -> Any:
    """
    POST a payload to the webhook URL and return the decoded JSON reply.

    Raises:
        requests.RequestException: On connection errors or a non-JSON reply
    """
    logger.info(f"🧪 Sending test webhook for order #{payload.get('id')} to {webhook_url}")
    response = requests.post(webhook_url, json=payload, timeout=timeout)
    logger.info(f"🧪 Webhook endpoint answered {response.status_code}")
    return response.json()
