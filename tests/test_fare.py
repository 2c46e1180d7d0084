import pytest

from rideplan.catalog import VEHICLE_TIERS, TierCatalog, VehicleTier
from rideplan.core.exceptions import InvalidDistance
from rideplan.fare import FareEstimator, FareQuote, format_price, price_label


@pytest.mark.unit
class TestFareEstimator:
    @pytest.fixture
    def estimator(self) -> FareEstimator:
        return FareEstimator()

    def test_zero_distance_charges_floor(self, estimator, sari_tier):
        assert estimator.estimate(sari_tier, 0) == pytest.approx(135.00)

    def test_distance_above_floor(self, estimator, sari_tier):
        assert estimator.estimate(sari_tier, 10) == pytest.approx(322.00)

    def test_short_trip_uses_floor(self, estimator, sari_tier):
        # 42 + 2 * 28 = 98 < 135
        assert estimator.estimate(sari_tier, 2) == pytest.approx(135.00)

    def test_floor_boundary(self, estimator, sari_tier):
        # 42 + 3.25 * 28 = 133, 42 + 3.5 * 28 = 140
        assert estimator.estimate(sari_tier, 3.25) == pytest.approx(135.00)
        assert estimator.estimate(sari_tier, 3.5) == pytest.approx(140.00)

    def test_never_below_min_price(self, estimator):
        for tier in VEHICLE_TIERS:
            for distance in (0.0, 0.5, 1.0, 2.5, 5.0, 12.345, 80.0):
                assert estimator.estimate(tier, distance) >= tier.min_price

    def test_not_rounded(self, estimator):
        tier = VEHICLE_TIERS.get("turkuaz")

        price = estimator.estimate(tier, 12.345)

        assert price == pytest.approx(46.58 + 12.345 * 31.05)
        assert price != round(price, 2)

    def test_no_distance_returns_none(self, estimator, sari_tier):
        assert estimator.estimate(sari_tier, None) is None

    def test_tier_outside_catalog_returns_none(self, estimator):
        tier = VehicleTier(
            id="moto", display_name="Moto", base_price=10.0, price_per_km=5.0, min_price=20.0
        )

        assert estimator.estimate(tier, 5.0) is None

    def test_changed_tier_with_known_id_returns_none(self, estimator):
        tier = VehicleTier(
            id="sari", display_name="Sarı Taksi", base_price=1.0, price_per_km=1.0, min_price=1.0
        )

        assert estimator.estimate(tier, 5.0) is None

    def test_negative_distance_raises(self, estimator, sari_tier):
        with pytest.raises(InvalidDistance) as exc_info:
            estimator.estimate(sari_tier, -1)

        assert exc_info.value.details["distance_km"] == -1

    @pytest.mark.parametrize("distance_km", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_distance_raises(self, estimator, sari_tier, distance_km):
        with pytest.raises(InvalidDistance):
            estimator.estimate(sari_tier, distance_km)

    def test_non_finite_distance_raises_for_quotes(self, estimator):
        with pytest.raises(InvalidDistance):
            estimator.quotes(float("nan"))

    def test_deterministic(self, estimator, sari_tier):
        assert estimator.estimate(sari_tier, 7.5) == estimator.estimate(sari_tier, 7.5)


@pytest.mark.unit
class TestFareQuotes:
    def test_quotes_follow_catalog_order(self):
        quotes = FareEstimator().quotes(10.0)

        assert [q.tier_id for q in quotes] == ["sari", "turkuaz", "vip", "xl"]
        assert all(isinstance(q, FareQuote) for q in quotes)
        assert quotes[0].price == pytest.approx(322.00)
        assert quotes[2].price == pytest.approx(68.85 + 459.0)

    def test_quotes_without_distance(self):
        quotes = FareEstimator().quotes(None)

        assert all(q.price is None for q in quotes)

    def test_quotes_recomputed_for_new_distance(self):
        estimator = FareEstimator()

        first = estimator.quotes(10.0)
        second = estimator.quotes(20.0)

        assert second[0].price > first[0].price

    def test_custom_catalog(self):
        catalog = TierCatalog(
            (VehicleTier(id="eco", display_name="Eco", base_price=5.0, price_per_km=2.0, min_price=9.0),)
        )

        quotes = FareEstimator(catalog).quotes(3.0)

        assert quotes == [FareQuote(tier_id="eco", price=11.0)]


@pytest.mark.unit
class TestPriceDisplay:
    def test_format_price(self):
        assert format_price(135) == "₺135.00"
        assert format_price(322.004) == "₺322.00"
        assert format_price(99.5, "TL ") == "TL 99.50"

    def test_label_uses_estimate(self, sari_tier):
        assert price_label(FareEstimator(), sari_tier, 10.0) == "₺322.00"

    def test_label_falls_back_to_min_price(self, sari_tier):
        assert price_label(FareEstimator(), sari_tier, None) == "₺135.00"
