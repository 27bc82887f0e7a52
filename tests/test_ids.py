"""
Tests for the per-resource identifier types.
"""

import pytest
from pydantic import BaseModel, ValidationError

from stripe_resources.core.errors import InvalidIdError
from stripe_resources.core.ids import (
    BankAccountId,
    CardId,
    ChargeId,
    CouponId,
    CustomerId,
    PaymentSourceId,
    PlanId,
    RefundId,
    SourceId,
    StripeId,
)


class TestConstruction:
    def test_accepts_matching_prefix(self):
        refund_id = RefundId("re_123")

        assert refund_id == "re_123"
        assert str(refund_id) == "re_123"
        assert isinstance(refund_id, str)

    def test_accepts_any_listed_prefix(self):
        assert ChargeId("py_1") == "py_1"
        assert PaymentSourceId("card_1") == "card_1"
        assert PaymentSourceId("src_1") == "src_1"

    def test_rejects_wrong_prefix(self):
        with pytest.raises(InvalidIdError, match="not a valid RefundId"):
            RefundId("ch_123")

    def test_rejects_empty_string(self):
        with pytest.raises(InvalidIdError, match="must not be empty"):
            PlanId("")

    def test_rejects_non_string(self):
        with pytest.raises(InvalidIdError):
            CustomerId(123)

    def test_prefixless_kinds_accept_any_token(self):
        assert PlanId("gold-monthly") == "gold-monthly"
        assert CouponId("25OFF") == "25OFF"

    def test_cannot_convert_between_kinds(self):
        with pytest.raises(InvalidIdError, match="cannot be used as a CouponId"):
            CouponId(PlanId("gold"))

    def test_narrowing_and_widening_related_kinds(self):
        assert type(CardId(StripeId("card_1"))) is CardId
        assert type(PaymentSourceId(CardId("card_1"))) is PaymentSourceId

        with pytest.raises(InvalidIdError):
            CardId(SourceId("src_1"))

    def test_invalid_id_error_is_a_value_error(self):
        assert issubclass(InvalidIdError, ValueError)


class TestIdentity:
    def test_same_kind_same_token_is_equal(self):
        assert CustomerId("cus_1") == CustomerId("cus_1")
        assert hash(CustomerId("cus_1")) == hash(CustomerId("cus_1"))

    def test_unrelated_kinds_are_never_equal(self):
        assert PlanId("shared") != CouponId("shared")
        assert not (PlanId("shared") == CouponId("shared"))

    def test_untyped_id_matches_every_kind(self):
        assert StripeId("card_1") == CardId("card_1")
        assert CardId("card_1") == StripeId("card_1")

    def test_payment_source_id_matches_its_member_kinds(self):
        assert PaymentSourceId("card_1") == CardId("card_1")
        assert PaymentSourceId("src_1") == SourceId("src_1")
        assert PaymentSourceId("ba_1") == BankAccountId("ba_1")

    def test_sibling_source_kinds_stay_apart(self):
        assert CardId("card_1") != SourceId("src_1")
        assert CouponId("x") != PlanId("x")

    def test_compares_with_plain_string(self):
        assert RefundId("re_1") == "re_1"
        assert "re_1" == RefundId("re_1")

    def test_usable_as_dict_key(self):
        lookup = {CustomerId("cus_1"): "jenny"}

        assert lookup[CustomerId("cus_1")] == "jenny"
        assert lookup["cus_1"] == "jenny"

    def test_repr_names_the_kind(self):
        assert repr(StripeId("tok")) == "StripeId('tok')"
        assert repr(RefundId("re_1")) == "RefundId('re_1')"

    def test_token_is_plain_str(self):
        token = RefundId("re_1").token

        assert type(token) is str
        assert token == "re_1"


class _Holder(BaseModel):
    refund: RefundId


class TestPydanticIntegration:
    def test_validates_into_typed_id(self):
        holder = _Holder.model_validate({"refund": "re_9"})

        assert type(holder.refund) is RefundId

    def test_wrong_prefix_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            _Holder.model_validate({"refund": "ch_9"})

    def test_serialises_as_plain_string(self):
        holder = _Holder(refund="re_9")

        assert holder.model_dump() == {"refund": "re_9"}
        assert holder.model_dump_json() == '{"refund":"re_9"}'
