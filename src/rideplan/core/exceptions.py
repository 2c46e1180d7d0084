"""Standardized exception hierarchy for the trip-planning core."""

from typing import Any


class PlanningError(Exception):
    """Base exception for all trip-planning errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class PermanentError(PlanningError):
    """Errors that will not succeed on retry."""

    pass


class ValidationError(PermanentError):
    """Invalid input or data format."""

    pass


class NotFoundError(PermanentError):
    """Requested entity does not exist."""

    pass


class StateError(PermanentError):
    """Operation not allowed in the current state."""

    pass


class ConfigurationError(PermanentError):
    """Missing or invalid configuration."""

    pass


class DecodeError(ValidationError):
    """Encoded polyline string is malformed."""

    pass


class InvalidDistance(ValidationError):
    """Negative distance passed to the fare estimator."""

    pass


class UnknownTier(NotFoundError):
    """Vehicle tier id is not in the catalog."""

    pass


class UnknownPaymentMethod(NotFoundError):
    """Payment method id is not in the catalog."""

    pass


class UnknownTipOption(NotFoundError):
    """Tip amount is not one of the offered options."""

    pass


class NoRouteFound(NotFoundError):
    """Directions response contained no usable route."""

    pass


class PlaceNotFound(NotFoundError):
    """Place details response has no location."""

    pass


class PreconditionError(StateError):
    """Action requires a state the selection or planner is not in."""

    pass


class StaleRouteResponse(StateError):
    """Directions response belongs to a superseded request."""

    pass


_RIDER_NOTICES: dict[type[PlanningError], str] = {
    DecodeError: "Rota çizilemedi. Lütfen tekrar deneyin.",
    NoRouteFound: "Bu adres için rota bulunamadı.",
    PlaceNotFound: "Seçilen adres bulunamadı.",
    InvalidDistance: "Ücret hesaplanamadı.",
    UnknownTier: "Seçilen taksi tipi geçerli değil.",
    UnknownPaymentMethod: "Seçilen ödeme yöntemi geçerli değil.",
    UnknownTipOption: "Seçilen bahşiş tutarı geçerli değil.",
    PreconditionError: "Bu işlem şu anda yapılamıyor.",
}

DEFAULT_NOTICE = "Bir hata oluştu. Lütfen tekrar deneyin."


def rider_notice(error: PlanningError) -> str | None:
    """Map an error to the non-fatal message shown to the rider.

    Stale route responses are dropped silently, so they map to None.
    """
    if isinstance(error, StaleRouteResponse):
        return None
    for error_type in type(error).__mro__:
        notice = _RIDER_NOTICES.get(error_type)
        if notice is not None:
            return notice
    return DEFAULT_NOTICE
