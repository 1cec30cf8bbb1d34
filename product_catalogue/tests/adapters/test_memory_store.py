import pytest

from product_catalogue.adapters.memory_store import InMemoryProductStore
from product_catalogue.models import Product

@pytest.fixture
def store() -> InMemoryProductStore:
    return InMemoryProductStore()

@pytest.fixture
def widget() -> Product:
    return Product.create("PN-001", "Standard Widget", 1000, 50, 10.50)

def test_add_and_get(store: InMemoryProductStore, widget: Product):
    store.add(widget)
    assert store.get("PN-001") == widget
    assert "PN-001" in store
    assert len(store) == 1

def test_get_missing_returns_none(store: InMemoryProductStore):
    assert store.get("PN-404") is None
    assert "PN-404" not in store

def test_add_replaces_same_id(store: InMemoryProductStore, widget: Product):
    store.add(widget)
    replacement = widget.model_copy(update={"name": "Premium Widget"})
    store.add(replacement)
    assert len(store) == 1
    assert store.get("PN-001").name == "Premium Widget"

def test_remove(store: InMemoryProductStore, widget: Product):
    store.add(widget)
    assert store.remove("PN-001") == widget
    assert store.remove("PN-001") is None
    assert len(store) == 0

def test_ids_and_all_preserve_insertion_order(store: InMemoryProductStore):
    for pid in ("PN-003", "PN-001", "PN-002"):
        store.add(Product.create(pid, f"part {pid}", 1, 0, 1.0))
    assert store.ids() == {"PN-001", "PN-002", "PN-003"}
    assert [p.id for p in store.all()] == ["PN-003", "PN-001", "PN-002"]

def test_ids_is_a_snapshot(store: InMemoryProductStore, widget: Product):
    store.add(widget)
    ids = store.ids()
    store.remove("PN-001")
    assert ids == {"PN-001"}
