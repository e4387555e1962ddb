from sqlalchemy.exc import OperationalError

from backend.app.api.deps import get_material_order_store
from backend.app.db.store import MaterialOrderStore, StoreErrorKind, StoreResult
from backend.app.main import app

BASE = "/v1/material-orders"

FIELDS = {
    "material_id": "MAT-300",
    "item_description": "Copper wire 2.5mm",
    "supplier": "Moana Electric",
    "quantity": 2.0,
    "unit_of_measurement": "roll",
    "unit_price": 45.5,
    "total_price": 91.0,
    "order_date": "2026-02-10",
    "status": "Pending",
}


def test_store_create_and_find(db_session):
    store = MaterialOrderStore(db_session)

    created = store.create(dict(FIELDS))
    assert created.ok
    assert len(created.value.id) == 32

    found = store.find_by_id(created.value.id)
    assert found.ok
    assert found.value.supplier == "Moana Electric"
    assert found.value.items is None

    listed = store.find_all()
    assert [o.id for o in listed.value] == [created.value.id]


def test_store_missing_record(db_session):
    store = MaterialOrderStore(db_session)

    for result in (
        store.find_by_id("nope"),
        store.find_by_id_and_update("nope", {"status": "Shipped"}),
        store.find_by_id_and_delete("nope"),
    ):
        assert not result.ok
        assert result.error == StoreErrorKind.not_found


def test_store_update_merges_fields(db_session):
    store = MaterialOrderStore(db_session)
    order_id = store.create(dict(FIELDS)).value.id

    updated = store.find_by_id_and_update(order_id, {"status": "Approved"})

    assert updated.ok
    assert updated.value.status == "Approved"
    assert updated.value.quantity == 2.0
    assert updated.value.order_date == "2026-02-10"


def test_store_delete(db_session):
    store = MaterialOrderStore(db_session)
    order_id = store.create(dict(FIELDS)).value.id

    deleted = store.find_by_id_and_delete(order_id)

    assert deleted.ok
    assert deleted.value == order_id
    assert store.find_by_id(order_id).error == StoreErrorKind.not_found


def test_store_constraint_violation_is_a_failure(db_session):
    store = MaterialOrderStore(db_session)
    fields = dict(FIELDS)
    fields.pop("supplier")

    result = store.create(fields)

    assert result.error == StoreErrorKind.failure
    assert "IntegrityError" in result.detail
    # session is usable again after the rollback
    assert store.find_all().ok


# ---------- HTTP mapping of storage failures ----------
class BrokenStore:
    def _failed(self, *args, **kwargs):
        return StoreResult.failed(OperationalError("SELECT 1", {}, Exception("connection refused")))

    create = find_all = find_by_id = find_by_id_and_update = find_by_id_and_delete = _failed


def _use_broken_store():
    app.dependency_overrides[get_material_order_store] = lambda: BrokenStore()


def test_create_storage_failure(client, order_payload):
    _use_broken_store()

    r = client.post(f"{BASE}/", json=order_payload)

    assert r.status_code == 500
    assert r.json() == {"message": "Server error. Please try again later."}


def test_list_storage_failure(client):
    _use_broken_store()

    r = client.get(f"{BASE}/allList")

    assert r.status_code == 500
    assert r.json() == {"message": "Server error"}


def test_get_storage_failure(client):
    _use_broken_store()

    r = client.get(f"{BASE}/some-id")

    assert r.status_code == 500
    assert r.json() == {"message": "Server error"}


def test_update_storage_failure(client):
    _use_broken_store()

    r = client.put(f"{BASE}/some-id", json={"status": "Shipped"})

    assert r.status_code == 500
    assert r.json() == {"message": "Server error. Please try again later."}


def test_delete_storage_failure_hides_detail(client):
    _use_broken_store()

    r = client.delete(f"{BASE}/some-id")

    assert r.status_code == 500
    assert "connection refused" not in r.text
    assert r.json() == {"message": "Server error"}
