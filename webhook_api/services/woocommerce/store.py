"""
In-memory store for the most recent webhook summaries.
"""
import logging
from collections import deque
from datetime import datetime
from typing import List, Optional

from fastapi import Request

from webhook_api.core.clock import to_iso
from webhook_api.services.woocommerce.schemas import OrderSummary

logger = logging.getLogger(__name__)


class RecentWebhookStore:
    """
    Newest-first, fixed-capacity list of order summaries.

    Lives only as long as the process. Each application instance owns one
    store, so several uvicorn workers do not share their history.
    """

    def __init__(self, capacity: int = 10):
        if not isinstance(capacity, int) or isinstance(capacity, bool) or capacity < 1:
            raise ValueError(f"capacity must be a positive integer, got {capacity!r}")
        self._capacity = capacity
        self._items: deque = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def insert(self, summary: OrderSummary, now: datetime) -> OrderSummary:
        """Stamp the summary with the receive time and put it in front; the oldest entry drops off when full."""
        stamp = to_iso(now)
        stored = summary.model_copy(update={"received_at": stamp, "processed_at": stamp}, deep=True)
        if len(self._items) == self._capacity:
            logger.debug(f"🗑️ Store full, dropping order #{self._items[-1].id}")
        self._items.appendleft(stored)
        return stored.model_copy(deep=True)

    def list_recent(self) -> List[OrderSummary]:
        """Snapshot of stored summaries, newest first."""
        return [item.model_copy(deep=True) for item in self._items]

    def latest(self) -> Optional[OrderSummary]:
        """Most recent summary, or None when nothing was received yet."""
        if not self._items:
            return None
        return self._items[0].model_copy(deep=True)


def get_store(request: Request) -> RecentWebhookStore:
    """FastAPI dependency returning the store owned by the running app."""
    return request.app.state.webhook_store
