"""Unit tests for the in-memory recent-webhook store."""

from datetime import timedelta

import pytest

from tests.conftest import FIXED_ISO, FIXED_NOW
from webhook_api.services.woocommerce.schemas import OrderSummary
from webhook_api.services.woocommerce.store import RecentWebhookStore


def _summary(order_id) -> OrderSummary:
    return OrderSummary(
        id=order_id,
        status="processing",
        total="10.00",
        transaction_id=f"txn_{order_id}",
        date_created=FIXED_ISO,
        raw_data={"id": order_id},
    )


@pytest.fixture
def store() -> RecentWebhookStore:
    return RecentWebhookStore(capacity=10)


class TestCapacity:
    """Tests for store construction."""

    def test_default_capacity_is_ten(self):
        assert RecentWebhookStore().capacity == 10

    @pytest.mark.parametrize("capacity", [0, -1, 2.5, True])
    def test_rejects_invalid_capacity(self, capacity):
        with pytest.raises(ValueError):
            RecentWebhookStore(capacity=capacity)


class TestInsert:
    """Tests for insert() and list_recent()."""

    def test_new_store_is_empty(self, store):
        assert len(store) == 0
        assert store.list_recent() == []

    def test_stamps_received_and_processed_at(self, store):
        stored = store.insert(_summary(1), FIXED_NOW)

        assert stored.received_at == FIXED_ISO
        assert stored.processed_at == FIXED_ISO
        assert store.list_recent()[0].received_at == FIXED_ISO

    def test_does_not_modify_the_given_summary(self, store):
        summary = _summary(1)

        store.insert(summary, FIXED_NOW)

        assert summary.received_at is None

    def test_lists_newest_first(self, store):
        for order_id in range(1, 6):
            store.insert(_summary(order_id), FIXED_NOW + timedelta(seconds=order_id))

        assert [item.id for item in store.list_recent()] == [5, 4, 3, 2, 1]
        assert len(store) == 5

    def test_keeps_only_the_last_capacity_entries(self, store):
        for order_id in range(1, 14):
            store.insert(_summary(order_id), FIXED_NOW)

        recent = store.list_recent()

        assert len(recent) == 10
        assert [item.id for item in recent] == list(range(13, 3, -1))

    def test_small_capacity_evicts_oldest(self):
        store = RecentWebhookStore(capacity=2)
        for order_id in ("a", "b", "c"):
            store.insert(_summary(order_id), FIXED_NOW)

        assert [item.id for item in store.list_recent()] == ["c", "b"]


class TestSnapshots:
    """Returned records must not give access to the store's state."""

    def test_changing_the_returned_list_does_not_change_the_store(self, store):
        store.insert(_summary(1), FIXED_NOW)

        snapshot = store.list_recent()
        snapshot.clear()

        assert len(store.list_recent()) == 1

    def test_changing_a_returned_record_does_not_change_the_store(self, store):
        store.insert(_summary(1), FIXED_NOW)

        snapshot = store.list_recent()
        snapshot[0].status = "cancelled"
        snapshot[0].raw_data["id"] = 999

        stored = store.list_recent()[0]
        assert stored.status == "processing"
        assert stored.raw_data == {"id": 1}

    def test_changing_latest_does_not_change_the_store(self, store):
        store.insert(_summary(1), FIXED_NOW)

        store.latest().status = "cancelled"

        assert store.latest().status == "processing"


class TestLatest:
    """Tests for latest()."""

    def test_empty_store_returns_none(self, store):
        assert store.latest() is None

    def test_returns_the_inserted_summary(self, store):
        stored = store.insert(_summary(1), FIXED_NOW)

        assert store.latest() == stored

    def test_returns_the_newest_summary(self, store):
        store.insert(_summary(1), FIXED_NOW)
        store.insert(_summary(2), FIXED_NOW)

        assert store.latest().id == 2
