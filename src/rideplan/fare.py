import math

from pydantic import BaseModel, ConfigDict

from rideplan.catalog import VEHICLE_TIERS, TierCatalog, VehicleTier
from rideplan.core.exceptions import InvalidDistance


class FareQuote(BaseModel):
    """Estimated price for one tier; price is None until a route exists."""

    model_config = ConfigDict(frozen=True)

    tier_id: str
    price: float | None


class FareEstimator:
    """Estimates fares for each vehicle tier from the route distance."""

    def __init__(self, catalog: TierCatalog = VEHICLE_TIERS) -> None:
        self.catalog = catalog

    def estimate(self, tier: VehicleTier, distance_km: float | None) -> float | None:
        """
        Estimate the fare for a tier.

        Returns None when there is no distance yet or the tier is not part of
        this catalog. The result is not rounded; rounding belongs to display.
        """
        if distance_km is not None and (not math.isfinite(distance_km) or distance_km < 0):
            raise InvalidDistance(
                "Distance must be a finite non-negative number",
                details={"distance_km": distance_km, "tier_id": tier.id},
            )
        if distance_km is None or self.catalog.find(tier.id) != tier:
            return None

        fare = tier.base_price + distance_km * tier.price_per_km
        return max(fare, tier.min_price)

    def quotes(self, distance_km: float | None) -> list[FareQuote]:
        """Quote every tier in catalog order."""
        return [
            FareQuote(tier_id=tier.id, price=self.estimate(tier, distance_km))
            for tier in self.catalog
        ]


def format_price(amount: float, currency_symbol: str = "₺") -> str:
    return f"{currency_symbol}{amount:.2f}"


def price_label(
    estimator: FareEstimator,
    tier: VehicleTier,
    distance_km: float | None,
    currency_symbol: str = "₺",
) -> str:
    """Label for a tier button: the estimate, or the tier floor price before a route exists."""
    price = estimator.estimate(tier, distance_km)
    if price is None:
        price = tier.min_price
    return format_price(price, currency_symbol)
