"""
Validation and normalization of WooCommerce order webhooks.
"""
import logging
from datetime import datetime
from typing import Any, Dict, Mapping, Optional, Sequence

from webhook_api.core.clock import to_iso
from webhook_api.core.errors import ValidationError
from webhook_api.services.woocommerce.schemas import Customer, OrderSummary, Product

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("id", "status", "total", "transaction_id")
DEFAULT_CURRENCY = "USD"


def _is_missing(payload: Mapping[str, Any], field: str, legacy_truthy: bool) -> bool:
    if field not in payload:
        return True
    value = payload[field]
    if legacy_truthy:
        return not value
    return value is None or value == ""


def validate(
    payload: Any,
    required_fields: Sequence[str] = REQUIRED_FIELDS,
    legacy_truthy: bool = False,
) -> None:
    """
    Check that every required field is present in the payload.

    All missing fields are reported at once, in declared order.

    Args:
        payload: Decoded webhook body
        required_fields: Field names that must be present
        legacy_truthy: Count any falsy value (0, "", [], ...) as missing instead
            of only absent keys, None and empty strings

    Raises:
        ValidationError: If the payload is not an object or fields are missing
    """
    if not isinstance(payload, Mapping):
        raise ValidationError("Webhook payload must be a JSON object")

    missing = [field for field in required_fields if _is_missing(payload, field, legacy_truthy)]
    if missing:
        raise ValidationError.for_missing(missing)


def _customer_from_billing(billing: Any) -> Optional[Customer]:
    if not isinstance(billing, Mapping):
        return None
    first_name = billing.get("first_name")
    last_name = billing.get("last_name")
    # A missing part leaves the separating space in place
    name = f"{first_name if first_name is not None else ''} {last_name if last_name is not None else ''}"
    return Customer(name=name, email=billing.get("email"), country=billing.get("country"))


def _product_from_line_items(line_items: Any) -> Optional[Product]:
    # Only the first line item is summarized
    if not isinstance(line_items, list) or not line_items:
        return None
    item = line_items[0] if isinstance(line_items[0], Mapping) else {}
    return Product(
        name=item.get("name"),
        quantity=item.get("quantity"),
        product_id=item.get("product_id"),
    )


def normalize(payload: Dict[str, Any], now: datetime) -> OrderSummary:
    """
    Build an OrderSummary from a payload that already passed validate().

    The result depends only on the payload and ``now``.
    """
    return OrderSummary(
        id=payload.get("id"),
        status=payload.get("status"),
        total=payload.get("total"),
        currency=payload.get("currency") or DEFAULT_CURRENCY,
        transaction_id=payload.get("transaction_id"),
        payment_method=payload.get("payment_method"),
        date_created=payload.get("date_created") or to_iso(now),
        customer=_customer_from_billing(payload.get("billing")),
        product=_product_from_line_items(payload.get("line_items")),
        raw_data=payload,
    )
