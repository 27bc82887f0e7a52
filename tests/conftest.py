"""
Shared fixtures: a client wired to a mocked ``requests.Session`` and
factories for realistic API payloads.
"""

from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock

import pytest
import requests

from stripe_resources import Client, ClientConfig


def make_response(
    body: Any = None,
    *,
    status_code: int = 200,
    headers: Optional[Dict[str, str]] = None,
    text: Optional[str] = None,
) -> MagicMock:
    """Build a stand-in for ``requests.Response``."""
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.headers = headers or {"Request-Id": "req_test"}
    if body is None:
        response.json.side_effect = ValueError("No JSON object could be decoded")
        response.text = text or ""
    else:
        response.json.return_value = body
        response.text = text or str(body)
    return response


def refund_payload(refund_id: str = "re_1", **fields: Any) -> Dict[str, Any]:
    payload = {
        "id": refund_id,
        "object": "refund",
        "amount": 500,
        "balance_transaction": "txn_1",
        "charge": "ch_123",
        "created": 1700000000,
        "currency": "usd",
        "metadata": {},
        "reason": None,
        "receipt_number": None,
        "status": "succeeded",
    }
    payload.update(fields)
    return payload


def charge_payload(charge_id: str = "ch_123", **fields: Any) -> Dict[str, Any]:
    payload = {
        "id": charge_id,
        "object": "charge",
        "amount": 2000,
        "amount_refunded": 500,
        "captured": True,
        "created": 1699990000,
        "currency": "usd",
        "customer": "cus_1",
        "livemode": False,
        "metadata": {"order_id": "6735"},
        "paid": True,
        "refunded": False,
        "status": "succeeded",
    }
    payload.update(fields)
    return payload


def customer_payload(customer_id: str = "cus_1", **fields: Any) -> Dict[str, Any]:
    payload = {
        "id": customer_id,
        "object": "customer",
        "balance": 0,
        "created": 1690000000,
        "currency": "usd",
        "default_source": None,
        "delinquent": False,
        "description": "Test customer",
        "email": "jenny@example.com",
        "livemode": False,
        "metadata": {},
        "name": "Jenny Rosen",
    }
    payload.update(fields)
    return payload


def plan_payload(plan_id: str = "gold", **fields: Any) -> Dict[str, Any]:
    payload = {
        "id": plan_id,
        "object": "plan",
        "active": True,
        "amount": 2000,
        "created": 1680000000,
        "currency": "usd",
        "interval": "month",
        "interval_count": 1,
        "livemode": False,
        "metadata": {},
        "product": "prod_1",
    }
    payload.update(fields)
    return payload


def list_payload(
    items: List[Dict[str, Any]],
    *,
    url: str,
    has_more: bool = False,
) -> Dict[str, Any]:
    return {"object": "list", "data": items, "has_more": has_more, "url": url}


def subscription_payload(subscription_id: str = "sub_1", **fields: Any) -> Dict[str, Any]:
    payload = {
        "id": subscription_id,
        "object": "subscription",
        "billing_cycle_anchor": 1690000000,
        "cancel_at_period_end": False,
        "canceled_at": None,
        "collection_method": "charge_automatically",
        "created": 1690000000,
        "current_period_end": 1692678400,
        "current_period_start": 1690000000,
        "customer": "cus_1",
        "items": list_payload(
            [
                {
                    "id": "si_1",
                    "object": "subscription_item",
                    "created": 1690000000,
                    "metadata": {},
                    "plan": plan_payload(),
                    "quantity": 1,
                    "subscription": subscription_id,
                }
            ],
            url=f"/v1/subscription_items?subscription={subscription_id}",
        ),
        "livemode": False,
        "metadata": {"tier": "gold"},
        "plan": plan_payload(),
        "quantity": 1,
        "status": "active",
    }
    payload.update(fields)
    return payload


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(api_key="sk_test_123")


@pytest.fixture
def session() -> MagicMock:
    return MagicMock(spec=requests.Session)


@pytest.fixture
def client(config: ClientConfig, session: MagicMock) -> Client:
    return Client(config, session=session)
