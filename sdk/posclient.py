# sdk/posclient.py
import httpx
import requests
from typing import Any, Dict, List, Mapping, Optional

DEFAULT_BASE_URL = "http://localhost:3000"


def make_items(cart: Mapping[int, int]) -> List[Dict[str, int]]:
    """Turn a {product_id: quantity} cart into the order "items" payload."""
    return [{"product_id": int(pid), "quantity": int(qty)} for pid, qty in cart.items()]


def cart_total(products: List[Dict[str, Any]], cart: Mapping[int, int]) -> float:
    # the server never prices orders; the client sends the total it computed
    prices = {p["id"]: p["price"] for p in products}
    total = 0.0
    for pid, qty in cart.items():
        if pid not in prices:
            raise KeyError(f"unknown product id: {pid}")
        total += prices[pid] * qty
    return round(total, 2)


class PosClient:
    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout: int = 10, session=None):
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    # Catalog
    def list_products(self) -> List[Dict[str, Any]]:
        r = self.session.get(f"{self.base_url}/api/products", timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    # Orders
    def create_order(self, items: List[Dict[str, int]], total: float) -> Dict[str, Any]:
        r = self.session.post(
            f"{self.base_url}/api/orders",
            json={"items": items, "total": total},
            timeout=self.timeout,
        )
        r.raise_for_status()
        return r.json()

    async def create_order_async(
        self,
        items: List[Dict[str, int]],
        total: float,
        client: Optional[httpx.AsyncClient] = None,
    ) -> httpx.Response:
        # do not raise_for_status() here; concurrent callers tally status codes
        payload = {"items": items, "total": total}
        if client is not None:
            return await client.post(f"{self.base_url}/api/orders", json=payload)
        async with httpx.AsyncClient(timeout=self.timeout) as ac:
            return await ac.post(f"{self.base_url}/api/orders", json=payload)


if __name__ == "__main__":
    import argparse
    import json

    parser = argparse.ArgumentParser(description="fastfood-pos client")
    parser.add_argument("--base-url", default=DEFAULT_BASE_URL)
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list-products", help="List the catalog")

    co = subparsers.add_parser("create-order", help="Submit an order")
    co.add_argument(
        "--item", action="append", required=True, metavar="PRODUCT_ID:QTY",
        help="Order line, repeatable (e.g. --item 1:2 --item 3:1)",
    )
    co.add_argument("--total", type=float, help="Order total (priced from the catalog if omitted)")

    args = parser.parse_args()
    c = PosClient(base_url=args.base_url)

    if args.command == "list-products":
        print(json.dumps(c.list_products(), indent=2))

    elif args.command == "create-order":
        cart: Dict[int, int] = {}
        for raw in args.item:
            pid, _, qty = raw.partition(":")
            cart[int(pid)] = cart.get(int(pid), 0) + int(qty or 1)
        total = args.total if args.total is not None else cart_total(c.list_products(), cart)
        print(json.dumps(c.create_order(make_items(cart), total), indent=2))
