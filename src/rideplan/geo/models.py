from pydantic import BaseModel, ConfigDict, Field


class GeoPoint(BaseModel):
    """Immutable geographic coordinate in degrees."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)

    def as_tuple(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)


class Destination(GeoPoint):
    """Selected place with the label shown in the search box."""

    label: str

    def to_point(self) -> GeoPoint:
        return GeoPoint(latitude=self.latitude, longitude=self.longitude)
