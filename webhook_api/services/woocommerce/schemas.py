"""
Pydantic schemas for WooCommerce webhook summaries and API responses.
"""
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional


class Customer(BaseModel):
    """Customer data taken from the order's billing block."""
    name: str = Field(..., description="First name and last name joined by a space")
    email: Optional[Any] = None
    country: Optional[Any] = None


class Product(BaseModel):
    """First line item of the order."""
    name: Optional[Any] = None
    quantity: Optional[Any] = None
    product_id: Optional[Any] = None


class OrderSummary(BaseModel):
    """Normalized order record kept in the recent-webhook store."""
    id: Any = Field(..., description="WooCommerce order id, preserved as sent")
    status: Any
    total: Any = Field(..., description="Order total, string or number as sent")
    currency: Any = "USD"
    transaction_id: Any
    payment_method: Optional[Any] = None
    date_created: Any
    customer: Optional[Customer] = None
    product: Optional[Product] = None
    raw_data: Dict[str, Any] = Field(..., description="Original webhook payload")
    received_at: Optional[str] = None
    processed_at: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "id": 1234,
                "status": "processing",
                "total": "297.00",
                "currency": "USD",
                "transaction_id": "txn_1700000000000",
                "payment_method": "paytiko_test",
                "date_created": "2026-01-01T10:00:00.000Z",
                "customer": {"name": "John Doe", "email": "john.doe@email.com", "country": "PH"},
                "product": {"name": "WeFund 25K Challenge", "quantity": 1, "product_id": 101},
                "raw_data": {"id": 1234, "status": "processing"},
                "received_at": "2026-01-01T10:00:01.000Z",
                "processed_at": "2026-01-01T10:00:01.000Z"
            }
        }


class WebhookAccepted(BaseModel):
    """Response sent back to WooCommerce for a processed webhook."""
    success: bool = True
    message: str = "Webhook received and processed"
    order_id: Any
    processed_at: str


class WebhookRejected(BaseModel):
    """Response for a webhook that failed validation."""
    success: bool = False
    error: str
    received_at: str


class RecentWebhooksResponse(BaseModel):
    success: bool = True
    count: int
    webhooks: List[OrderSummary]


class LatestWebhookResponse(BaseModel):
    success: bool = True
    webhook: OrderSummary


class NoWebhooksResponse(BaseModel):
    success: bool = False
    message: str = "No webhooks received yet"


class SimulationResponse(BaseModel):
    """Result of sending a sample order to the webhook endpoint."""
    success: bool = True
    message: str = "Test webhook sent"
    sample_data: Dict[str, Any]
    webhook_response: Any
