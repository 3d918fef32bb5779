# tests/test_live_http.py
# Smoke test against a running instance (docker/CI). Skipped unless CATALOG_BASE_URL is set.
import os
import uuid

import pytest
import requests

BASE_URL = os.getenv("CATALOG_BASE_URL", "").strip().rstrip("/")

pytestmark = pytest.mark.skipif(not BASE_URL, reason="CATALOG_BASE_URL not set")


def test_health_ok():
    r = requests.get(f"{BASE_URL}/health", timeout=10)
    assert r.status_code == 200, r.text


def test_create_list_delete_cycle():
    sku = f"SMOKE-{uuid.uuid4().hex[:8]}"
    payload = {"sku": sku, "name": "Smoke DVD", "price": 1.5, "type": "dvd", "size": 100}

    r = requests.post(f"{BASE_URL}/products", json=payload, timeout=10)
    assert r.status_code == 201, r.text
    product_id = r.json()["id"]

    r = requests.post(f"{BASE_URL}/products", json=payload, timeout=10)
    assert r.status_code == 409, r.text

    r = requests.get(f"{BASE_URL}/products", timeout=10)
    assert any(p["sku"] == sku and p["specific_attribute"] == "Size: 100 MB" for p in r.json())

    r = requests.delete(f"{BASE_URL}/products", json={"ids": [product_id]}, timeout=10)
    assert r.status_code == 200, r.text
    assert r.json()["deleted"] == 1
