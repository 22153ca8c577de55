# tests/test_demo_concurrent.py
import asyncio

import httpx

import demo_concurrent
from pos.database import get_initial_products


def _run(app, client, n_orders):
    transport = httpx.ASGITransport(app=app)
    return asyncio.run(demo_concurrent.main(
        "http://testserver", n_orders, session=client, transport=transport,
    ))


def test_demo_succeeds(app, client, state, capsys):
    assert _run(app, client, 20) == 0
    assert len(state.orders) == 20
    assert "20/20 orders created" in capsys.readouterr().out


def test_demo_fails_when_catalog_changes(app, client, state, monkeypatch, capsys):
    snapshots = iter([get_initial_products(), get_initial_products()[:2]])
    monkeypatch.setattr(state.catalog, "list_products", lambda: next(snapshots))

    assert _run(app, client, 5) == 1
    assert "catalog changed under load" in capsys.readouterr().out