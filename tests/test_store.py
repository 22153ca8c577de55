# tests/test_store.py
import threading

import pytest
from pydantic import ValidationError

from pos.database import AppState, CatalogStore, OrderStore, get_initial_products
from pos.models import Order, OrderItem, Product


def _order(pid, qty, total):
    return Order(items=[OrderItem(product_id=pid, quantity=qty)], total=total)


def test_catalog_is_seeded_with_four_products():
    products = CatalogStore().list_products()
    assert [(p.id, p.name, p.price) for p in products] == [
        (1, "Classic Burger", 15.50),
        (2, "Cheese Burger", 17.50),
        (3, "Fries", 6.00),
        (4, "Soda", 4.50),
    ]


def test_catalog_snapshot_is_a_copy():
    catalog = CatalogStore()
    snapshot = catalog.list_products()
    snapshot.clear()
    assert len(catalog) == 4
    assert catalog.list_products() == get_initial_products()


def test_empty_catalog_lists_nothing():
    assert CatalogStore(products=[]).list_products() == []


def test_append_returns_stored_copy():
    store = OrderStore()
    order = _order(1, 2, 31.0)
    created = store.append_order(order)
    assert created == order
    assert created is not order

    # mutating what the caller holds never reaches the stored value
    order.items.append(OrderItem(product_id=9, quantity=9))
    created.total = 0.0
    assert store.list_orders() == [_order(1, 2, 31.0)]


def test_orders_keep_arrival_order():
    store = OrderStore()
    first = store.append_order(_order(1, 1, 15.5))
    second = store.append_order(_order(3, 2, 12.0))
    assert store.list_orders() == [first, second]
    assert len(store) == 2


def test_unknown_product_id_is_accepted():
    store = OrderStore()
    store.append_order(_order(999, 1, 1.0))
    assert len(store) == 1


def test_concurrent_appends_are_not_lost():
    store = OrderStore()
    n_threads, per_thread = 8, 250
    barrier = threading.Barrier(n_threads)
    mismatches = []

    def worker(tid):
        barrier.wait()
        for i in range(per_thread):
            created = store.append_order(_order(tid, i, float(i)))
            if (created.items[0].product_id, created.items[0].quantity) != (tid, i):
                mismatches.append((tid, i, created))

    threads = [threading.Thread(target=worker, args=(t,)) for t in range(n_threads)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert mismatches == []
    orders = store.list_orders()
    assert len(orders) == n_threads * per_thread
    # each thread's orders appear in the order that thread appended them
    for tid in range(n_threads):
        quantities = [o.items[0].quantity for o in orders if o.items[0].product_id == tid]
        assert quantities == list(range(per_thread))


def test_app_states_are_independent():
    a, b = AppState(), AppState()
    a.orders.append_order(_order(1, 1, 15.5))
    assert len(a.orders) == 1
    assert len(b.orders) == 0


def test_product_is_immutable():
    p = Product(id=1, name="Fries", price=6.0)
    with pytest.raises(ValidationError):
        p.price = 0.0
    assert p.price == 6.0
