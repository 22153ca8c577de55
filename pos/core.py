import logging
from typing import List

from .database import AppState
from .models import Order, Product

logger = logging.getLogger(__name__)

# This file contains the logic behind the API endpoints.
# Locks are taken inside the stores; nothing here holds one across I/O.


# Product endpoints
def list_products_logic(state: AppState) -> List[Product]:
    return state.catalog.list_products()


# Order endpoints
def create_order_logic(state: AppState, order: Order) -> Order:
    created = state.orders.append_order(order)
    logger.info(
        "Received new order: %d item(s), total %.2f",
        len(created.items),
        created.total,
    )
    return created
