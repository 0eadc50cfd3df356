"""CatalogEntry: a purchasable product in the catalog.

Identity, name and base price are fixed at creation. The only
mutation an entry supports is attaching a discount policy.
"""

from __future__ import annotations

from shop.domain.exceptions import NullPolicyError, ValidationError
from shop.domain.model.discount import DiscountPolicy
from shop.domain.model.value_objects import Money


class CatalogEntry:
    """A product in the catalog.

    ``discount`` is ``None`` when no policy is attached, in which case
    the effective price is the base price.
    """

    def __init__(
        self,
        id: str,
        name: str,
        price: Money,
        discount: DiscountPolicy | None = None,
    ) -> None:
        if not id or not id.strip():
            raise ValidationError("Product ID is required")
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if not isinstance(price, Money):
            raise ValidationError(
                f"Product price must be Money, got {type(price).__name__}"
            )
        self._id = id.strip()
        self._name = name.strip()
        self._price = price
        self._discount: DiscountPolicy | None = None
        if discount is not None:
            self.attach_discount(discount)

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def price(self) -> Money:
        return self._price

    @property
    def discount(self) -> DiscountPolicy | None:
        return self._discount

    @property
    def has_discount(self) -> bool:
        return self._discount is not None

    @property
    def effective_price(self) -> Money:
        if self._discount is None:
            return self._price
        return self._discount.apply(self._price)

    def attach_discount(self, policy: DiscountPolicy) -> None:
        """Attach (or replace) the discount policy.

        The policy is evaluated once against the base price so a policy
        that cannot price this entry is rejected here rather than at
        checkout.
        """
        if policy is None:
            raise NullPolicyError("Discount policy cannot be None")
        if not isinstance(policy, DiscountPolicy):
            raise NullPolicyError(
                f"Discount policy must be a DiscountPolicy, got {type(policy).__name__}"
            )
        policy.apply(self._price)
        self._discount = policy

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CatalogEntry):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"CatalogEntry(id={self._id!r}, name={self._name!r}, "
            f"price={self._price!r}, discount={self._discount!r})"
        )

    def __str__(self) -> str:
        return f"{self._name} - {self._price}"
