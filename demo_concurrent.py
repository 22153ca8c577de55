import asyncio
import sys

import httpx

from sdk.posclient import DEFAULT_BASE_URL, PosClient, cart_total, make_items

N_ORDERS = 50


async def submit(client: PosClient, ac: httpx.AsyncClient, n: int, products):
    # vary the basket so every stored order is distinguishable
    cart = {products[n % len(products)]["id"]: n % 3 + 1}
    total = cart_total(products, cart)
    try:
        r = await client.create_order_async(make_items(cart), total, client=ac)
    except httpx.HTTPError as e:
        print(f"❌ order #{n} failed: {e}")
        return None
    if r.status_code != 201:
        print(f"⚠️  order #{n} rejected with {r.status_code}: {r.text}")
    return r.status_code


async def main(base_url: str = DEFAULT_BASE_URL, n_orders: int = N_ORDERS, session=None, transport=None) -> int:
    c = PosClient(base_url=base_url, session=session)
    products = c.list_products()
    print(f"\n🍔 Catalog: {[p['name'] for p in products]}")

    print(f"\n⚡ Submitting {n_orders} orders concurrently...")
    async with httpx.AsyncClient(timeout=c.timeout, transport=transport) as ac:
        statuses = await asyncio.gather(*(submit(c, ac, i, products) for i in range(n_orders)))

    created = sum(1 for s in statuses if s == 201)
    print(f"\n✅ {created}/{n_orders} orders created")

    # the catalog must come back unchanged no matter how many orders went in
    if c.list_products() != products:
        print("❌ catalog changed under load")
        return 1
    print("📦 Catalog unchanged")
    return 0 if created == n_orders else 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main(*sys.argv[1:2])))
