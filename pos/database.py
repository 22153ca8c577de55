import threading
from typing import List, Optional, Sequence

from .models import Order, Product

# This file holds the in-memory stores and the locks that guard them.
# Nothing is persisted: everything here is lost when the process exits.


def get_initial_products() -> List[Product]:
    return [
        Product(id=1, name="Classic Burger", price=15.50),
        Product(id=2, name="Cheese Burger", price=17.50),
        Product(id=3, name="Fries", price=6.00),
        Product(id=4, name="Soda", price=4.50),
    ]


class CatalogStore:
    """Fixed list of sellable products, read-only after construction."""

    def __init__(self, products: Optional[Sequence[Product]] = None):
        self._lock = threading.Lock()
        seed = get_initial_products() if products is None else products
        self._products: List[Product] = list(seed)

    def list_products(self) -> List[Product]:
        # Product is frozen, so a shallow copy of the list is a full snapshot
        with self._lock:
            return list(self._products)

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)


class OrderStore:
    """Append-only sequence of submitted orders."""

    def __init__(self):
        self._lock = threading.Lock()
        self._orders: List[Order] = []

    def append_order(self, order: Order) -> Order:
        """
        Store a copy of ``order`` at the tail and return a copy of what was
        stored. Both happen under the same lock, so the returned value is
        always the element this call appended.
        """
        stored = order.model_copy(deep=True)
        with self._lock:
            self._orders.append(stored)
            created = self._orders[-1].model_copy(deep=True)
        return created

    def list_orders(self) -> List[Order]:
        with self._lock:
            return [o.model_copy(deep=True) for o in self._orders]

    def __len__(self) -> int:
        with self._lock:
            return len(self._orders)


class AppState:
    """Everything the request handlers share. One instance per application."""

    def __init__(self, products: Optional[Sequence[Product]] = None):
        self.catalog = CatalogStore(products)
        self.orders = OrderStore()
