from pydantic import BaseModel, ConfigDict, Field

from rideplan.geo.models import GeoPoint


class DispatchRequest(BaseModel):
    """Trip request payload assembled when the rider confirms."""

    model_config = ConfigDict(frozen=True)

    tier_id: str
    payment_method_id: str
    meter_enabled: bool
    tip_amount: float | None = None
    distance_km: float = Field(ge=0)
    origin: GeoPoint
    destination: GeoPoint
