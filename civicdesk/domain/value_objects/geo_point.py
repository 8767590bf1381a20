"""GeoPoint value object — immutable (lat, lon) pair reported with a complaint."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float

    def is_valid(self) -> bool:
        """True when both coordinates fall inside the WGS84 ranges."""
        return -90.0 <= self.latitude <= 90.0 and -180.0 <= self.longitude <= 180.0

    @classmethod
    def from_optional(cls, latitude: float | None, longitude: float | None) -> "GeoPoint | None":
        """Build a point only when both coordinates are present."""
        if latitude is None or longitude is None:
            return None
        return cls(latitude=float(latitude), longitude=float(longitude))
