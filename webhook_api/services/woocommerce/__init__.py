"""
WooCommerce order webhook service: validation, normalization and recent-webhook store.
"""
from .store import RecentWebhookStore
from .validator import REQUIRED_FIELDS, normalize, validate

__all__ = ["RecentWebhookStore", "REQUIRED_FIELDS", "normalize", "validate"]
