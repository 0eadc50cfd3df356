"""Unit tests for CatalogEntry."""

import pytest

from shop.domain.exceptions import NullPolicyError, ValidationError
from shop.domain.model.catalog_entry import CatalogEntry
from shop.domain.model.discount import CallableDiscount, FlatDiscount, PercentageDiscount
from shop.domain.model.value_objects import Money


def _laptop() -> CatalogEntry:
    return CatalogEntry("1", "Laptop", Money.of("1200"))


class TestCatalogEntryCreation:

    def test_fields(self):
        entry = _laptop()
        assert entry.id == "1"
        assert entry.name == "Laptop"
        assert entry.price == Money.of("1200")
        assert entry.discount is None
        assert not entry.has_discount

    def test_blank_id_rejected(self):
        with pytest.raises(ValidationError, match="ID is required"):
            CatalogEntry(" ", "Laptop", Money.of("1"))

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            CatalogEntry("1", "", Money.of("1"))

    def test_non_money_price_rejected(self):
        with pytest.raises(ValidationError, match="must be Money"):
            CatalogEntry("1", "Laptop", 1200)

    def test_identity_is_read_only(self):
        entry = _laptop()
        with pytest.raises(AttributeError):
            entry.id = "2"

    def test_discount_at_construction(self):
        entry = CatalogEntry("1", "Laptop", Money.of("1200"), PercentageDiscount(10))
        assert entry.effective_price == Money.of("1080.00")

    def test_str(self):
        assert str(_laptop()) == "Laptop - $1200.00"


class TestEffectivePrice:

    def test_no_discount_means_base_price(self):
        assert _laptop().effective_price == Money.of("1200")

    def test_ten_percent_off(self):
        entry = _laptop()
        entry.attach_discount(PercentageDiscount(10))
        assert entry.effective_price == Money.of("1080.00")
        assert str(entry.effective_price) == "$1080.00"

    def test_reattaching_replaces_policy(self):
        entry = _laptop()
        entry.attach_discount(PercentageDiscount(10))
        entry.attach_discount(FlatDiscount(Money.of("200")))
        assert entry.effective_price == Money.of("1000")

    def test_base_price_unaffected_by_discount(self):
        entry = _laptop()
        entry.attach_discount(PercentageDiscount(50))
        assert entry.price == Money.of("1200")


class TestAttachDiscount:

    def test_none_rejected(self):
        with pytest.raises(NullPolicyError, match="cannot be None"):
            _laptop().attach_discount(None)

    def test_non_policy_rejected(self):
        with pytest.raises(NullPolicyError, match="must be a DiscountPolicy"):
            _laptop().attach_discount(lambda price: price)

    def test_sign_inverting_policy_rejected_at_attach(self):
        entry = _laptop()
        with pytest.raises(ValidationError, match="cannot be negative"):
            entry.attach_discount(CallableDiscount(lambda price: -price.amount))
        assert entry.discount is None
        assert entry.effective_price == Money.of("1200")
