"""Tests for the exception hierarchy and rider notices."""

import pytest

from rideplan.core.exceptions import (
    DEFAULT_NOTICE,
    ConfigurationError,
    DecodeError,
    InvalidDistance,
    NoRouteFound,
    NotFoundError,
    PermanentError,
    PlaceNotFound,
    PlanningError,
    PreconditionError,
    StaleRouteResponse,
    StateError,
    UnknownPaymentMethod,
    UnknownTier,
    UnknownTipOption,
    ValidationError,
    rider_notice,
)


class TestExceptionHierarchy:
    def test_permanent_errors_inherit_from_planning_error(self):
        assert issubclass(PermanentError, PlanningError)
        assert issubclass(ValidationError, PermanentError)
        assert issubclass(NotFoundError, PermanentError)
        assert issubclass(StateError, PermanentError)
        assert issubclass(ConfigurationError, PermanentError)

    def test_domain_errors(self):
        assert issubclass(DecodeError, ValidationError)
        assert issubclass(InvalidDistance, ValidationError)
        assert issubclass(UnknownTier, NotFoundError)
        assert issubclass(UnknownPaymentMethod, NotFoundError)
        assert issubclass(UnknownTipOption, NotFoundError)
        assert issubclass(NoRouteFound, NotFoundError)
        assert issubclass(PlaceNotFound, NotFoundError)
        assert issubclass(PreconditionError, StateError)
        assert issubclass(StaleRouteResponse, StateError)


class TestExceptionAttributes:
    def test_stores_message(self):
        err = PlanningError("test message")
        assert err.message == "test message"
        assert str(err) == "test message"

    def test_default_details_is_empty_dict(self):
        assert PlanningError("test").details == {}

    def test_subclass_keeps_details(self):
        err = DecodeError("bad polyline", details={"position": 4})
        assert err.message == "bad polyline"
        assert err.details == {"position": 4}

    def test_catchable_as_base(self):
        with pytest.raises(PlanningError):
            raise NoRouteFound("no route")


@pytest.mark.unit
class TestRiderNotice:
    @pytest.mark.parametrize(
        "error_type",
        [DecodeError, NoRouteFound, PlaceNotFound, UnknownTier, PreconditionError, InvalidDistance],
    )
    def test_known_errors_have_specific_notice(self, error_type):
        notice = rider_notice(error_type("boom"))

        assert notice
        assert notice != DEFAULT_NOTICE

    def test_no_route_notice(self):
        assert rider_notice(NoRouteFound("x")) == "Bu adres için rota bulunamadı."

    def test_unmapped_error_gets_default(self):
        assert rider_notice(ConfigurationError("x")) == DEFAULT_NOTICE

    def test_stale_response_is_silent(self):
        assert rider_notice(StaleRouteResponse("x")) is None
