"""
Tests for the identity contract and immutability shared by every resource.
"""

import pytest
from pydantic import ValidationError

from conftest import (
    charge_payload,
    customer_payload,
    list_payload,
    plan_payload,
    refund_payload,
    subscription_payload,
)
from stripe_resources.core.errors import ParseError
from stripe_resources.core.objects import Deleted
from stripe_resources.core.pagination import PaginatedList
from stripe_resources.resources import (
    BalanceTransaction,
    BankAccount,
    Card,
    Charge,
    Coupon,
    Customer,
    Plan,
    Refund,
    Source,
    Subscription,
    SubscriptionItem,
    TransferReversal,
)

PAYLOADS = {
    BalanceTransaction: {
        "id": "txn_1",
        "object": "balance_transaction",
        "amount": -500,
        "available_on": 1700000000,
        "created": 1700000000,
        "currency": "usd",
        "net": -500,
        "status": "available",
        "type": "refund",
    },
    BankAccount: {
        "id": "ba_1",
        "object": "bank_account",
        "country": "US",
        "currency": "usd",
        "last4": "6789",
        "status": "new",
    },
    Card: {
        "id": "card_1",
        "object": "card",
        "brand": "Visa",
        "exp_month": 8,
        "exp_year": 2030,
        "funding": "credit",
        "last4": "4242",
    },
    Charge: charge_payload(),
    Coupon: {
        "id": "25OFF",
        "object": "coupon",
        "created": 1690000000,
        "duration": "once",
        "livemode": False,
        "percent_off": 25.0,
    },
    Customer: customer_payload(),
    Plan: plan_payload(),
    Refund: refund_payload(),
    Source: {
        "id": "src_1",
        "object": "source",
        "client_secret": "src_client_secret_abc",
        "created": 1700000000,
        "flow": "none",
        "livemode": False,
        "status": "chargeable",
        "type": "card",
    },
    Subscription: subscription_payload(),
    SubscriptionItem: subscription_payload()["items"]["data"][0],
    TransferReversal: {
        "id": "trr_1",
        "object": "transfer_reversal",
        "amount": 100,
        "created": 1700000000,
        "currency": "usd",
    },
}


class TestObjectTags:
    @pytest.mark.parametrize("resource", list(PAYLOADS), ids=lambda cls: cls.__name__)
    def test_instance_tag_matches_class_tag(self, resource):
        instance = resource.parse(PAYLOADS[resource])

        assert resource.object_tag() == resource.OBJECT_TAG
        assert instance.object == resource.object_tag()
        assert instance.model_dump()["object"] == resource.object_tag()

    def test_tags_are_distinct(self):
        tags = [resource.object_tag() for resource in PAYLOADS]

        assert len(set(tags)) == len(tags)
        assert PaginatedList.OBJECT_TAG not in tags

    @pytest.mark.parametrize("resource", list(PAYLOADS), ids=lambda cls: cls.__name__)
    def test_every_other_tag_is_rejected(self, resource):
        for other in PAYLOADS:
            if other is resource:
                continue
            payload = dict(PAYLOADS[resource], object=other.object_tag())
            with pytest.raises(ParseError):
                resource.parse(payload)


class TestImmutability:
    def test_metadata_is_read_only(self):
        charge = Charge.parse(charge_payload(metadata={"order_id": "6735"}))

        with pytest.raises(TypeError):
            charge.metadata["order_id"] = "changed"

        assert charge.metadata == {"order_id": "6735"}

    def test_defaulted_metadata_is_read_only(self):
        payload = refund_payload()
        del payload["metadata"]
        refund = Refund.parse(payload)

        with pytest.raises(TypeError):
            refund.metadata["new"] = "value"

    def test_parsing_copies_the_payload(self):
        payload = charge_payload(metadata={"order_id": "6735"})
        charge = Charge.parse(payload)

        payload["metadata"]["order_id"] = "changed"

        assert charge.metadata["order_id"] == "6735"

    def test_metadata_dumps_as_plain_dict(self):
        charge = Charge.parse(charge_payload(metadata={"order_id": "6735"}))

        assert charge.model_dump()["metadata"] == {"order_id": "6735"}
        assert type(charge.model_dump()["metadata"]) is dict
        assert '"metadata":{"order_id":"6735"}' in charge.model_dump_json()

    def test_page_items_cannot_change(self):
        page = PaginatedList[Refund].parse(
            list_payload([refund_payload("re_1")], url="/v1/refunds")
        )

        assert isinstance(page.data, tuple)
        with pytest.raises(AttributeError):
            page.data.append(Refund.parse(refund_payload("re_2")))
        with pytest.raises(ValidationError):
            page.has_more = True

    def test_resources_are_hashable(self):
        first = Customer.parse(customer_payload(metadata={"tier": "gold"}))
        again = Customer.parse(customer_payload(metadata={"tier": "gold"}))

        assert hash(first) == hash(again)
        assert len({first, again}) == 1

    def test_pages_are_hashable(self):
        page = PaginatedList[Refund].parse(
            list_payload([refund_payload("re_1")], url="/v1/refunds")
        )

        assert isinstance(hash(page), int)


class TestDeleted:
    def test_delete_marker(self):
        deleted = Deleted.parse({"id": "cus_1", "object": "customer", "deleted": True})

        assert deleted.deleted is True

    @pytest.mark.parametrize(
        "payload",
        [
            customer_payload(),
            {"id": "cus_1", "object": "customer"},
            {"id": "cus_1", "object": "customer", "deleted": False},
        ],
    )
    def test_anything_but_a_delete_marker_fails(self, payload):
        with pytest.raises(ParseError):
            Deleted.parse(payload)
