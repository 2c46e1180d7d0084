"""Rider selection state for the trip request panel."""

import logging
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from rideplan.catalog import (
    DEFAULT_PAYMENT_METHOD_ID,
    PAYMENT_METHODS,
    TIP_OPTIONS,
    VEHICLE_TIERS,
    PaymentMethodCatalog,
    TierCatalog,
    TipCatalog,
)
from rideplan.core.exceptions import PreconditionError
from rideplan.plan_logging import log_context

logger = logging.getLogger(__name__)


class TripSelection(BaseModel):
    """Rider choices checked against the catalogs they were made from.

    The select_* and set_* methods validate before mutating, so a failed
    call leaves the state exactly as it was and raises a PlanningError.
    Direct construction or assignment is validated too and raises pydantic's
    ValidationError.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, validate_assignment=True)

    selected_tier_id: str
    payment_method_id: str = Field(default=DEFAULT_PAYMENT_METHOD_ID)
    meter_enabled: bool = False
    tip_enabled: bool = False
    tip_amount: float | None = None

    tiers: TierCatalog = Field(default_factory=lambda: VEHICLE_TIERS, exclude=True, repr=False)
    payment_methods: PaymentMethodCatalog = Field(
        default_factory=lambda: PAYMENT_METHODS, exclude=True, repr=False
    )
    tip_options: TipCatalog = Field(default_factory=lambda: TIP_OPTIONS, exclude=True, repr=False)

    @model_validator(mode="after")
    def validate_against_catalogs(self) -> Self:
        if self.selected_tier_id not in self.tiers:
            raise ValueError(f"Unknown tier: {self.selected_tier_id}")
        if self.payment_method_id not in self.payment_methods:
            raise ValueError(f"Unknown payment method: {self.payment_method_id}")
        if self.tip_amount is not None:
            if not self.tip_enabled:
                raise ValueError("tip_amount requires tip_enabled")
            if self.tip_amount not in [o.amount for o in self.tip_options]:
                raise ValueError(f"Unknown tip amount: {self.tip_amount}")
        return self

    @classmethod
    def create(
        cls,
        tiers: TierCatalog = VEHICLE_TIERS,
        payment_methods: PaymentMethodCatalog = PAYMENT_METHODS,
        tip_options: TipCatalog = TIP_OPTIONS,
    ) -> "TripSelection":
        """Defaults at screen mount: first tier, cash, both toggles off."""
        payment_method_id = (
            DEFAULT_PAYMENT_METHOD_ID
            if DEFAULT_PAYMENT_METHOD_ID in payment_methods
            else payment_methods.first().id
        )
        return cls(
            selected_tier_id=tiers.first().id,
            payment_method_id=payment_method_id,
            tiers=tiers,
            payment_methods=payment_methods,
            tip_options=tip_options,
        )

    def select_tier(self, tier_id: str) -> None:
        self.tiers.get(tier_id)
        self.selected_tier_id = tier_id
        with log_context(tier_id=tier_id, payment_method_id=self.payment_method_id):
            logger.debug("Selected tier")

    def select_payment_method(self, method_id: str) -> None:
        self.payment_methods.get(method_id)
        self.payment_method_id = method_id
        with log_context(tier_id=self.selected_tier_id, payment_method_id=method_id):
            logger.debug("Selected payment method")

    def set_meter_enabled(self, enabled: bool) -> None:
        self.meter_enabled = enabled

    def set_tip_enabled(self, enabled: bool) -> None:
        """Toggle tipping; disabling also drops any chosen amount."""
        # Amount first, so every intermediate state passes validation.
        if not enabled:
            self.tip_amount = None
        self.tip_enabled = enabled

    def select_tip_amount(self, amount: float) -> None:
        """Pick a tip amount, or clear it when the same amount is picked again."""
        if not self.tip_enabled:
            raise PreconditionError(
                "Tipping is disabled",
                details={"amount": amount},
            )
        self.tip_options.get_amount(amount)

        if self.tip_amount == amount:
            self.tip_amount = None
        else:
            self.tip_amount = amount
        logger.debug("Tip amount is now %s", self.tip_amount)

    @property
    def tip_label(self) -> str:
        """Suffix for the call button, empty when no tip is chosen."""
        if self.tip_amount is None:
            return ""
        return f" (+{self.tip_amount:g} TL Bahşiş)"
