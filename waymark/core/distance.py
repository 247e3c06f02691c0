"""
Great-circle distance and its display text.

Distances are computed with the haversine formula and rendered in the
configured unit system:

- metric: "850 m", "1.2 km", "42 km"
- imperial: "300 ft", "1.4 mi", "17 mi"
"""

from __future__ import annotations

from dataclasses import dataclass

import math

from waymark.model import Position


EARTH_RADIUS_M = 6371000.0

_M_PER_KM = 1000.0
_M_PER_MILE = 1609.344
_FT_PER_M = 3.28084


def haversine_m(a: Position, b: Position) -> float:
    """Great-circle distance between two positions, in meters."""
    phi1 = math.radians(a.lat)
    phi2 = math.radians(b.lat)
    dphi = math.radians(b.lat - a.lat)
    dl = math.radians(b.lon - a.lon)
    h = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dl / 2) ** 2
    # Rounding can push h just past 1.0 for antipodal points.
    h = min(1.0, max(0.0, h))
    return 2 * EARTH_RADIUS_M * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def _fmt(value: float, decimals: int) -> str:
    if decimals == 0:
        return str(int(round(value)))
    return f"{value:.{decimals}f}"


@dataclass(frozen=True)
class Distance:
    """A distance value ready for display."""

    meters: float
    value: str
    unit: str

    @property
    def text(self) -> str:
        return f"{self.value} {self.unit}"

    def __str__(self) -> str:
        return self.text

    @classmethod
    def from_meters(cls, meters: float, *, units: str = "metric") -> "Distance":
        meters = max(0.0, float(meters))
        if units == "imperial":
            miles = meters / _M_PER_MILE
            if miles < 0.1:
                return cls(meters, _fmt(meters * _FT_PER_M, 0), "ft")
            if miles < 10:
                return cls(meters, _fmt(miles, 1), "mi")
            return cls(meters, _fmt(miles, 0), "mi")

        if meters < _M_PER_KM:
            # 999.6 m would round up to "1000 m"; show it as kilometers instead.
            if int(round(meters)) < 1000:
                return cls(meters, _fmt(meters, 0), "m")
        km = meters / _M_PER_KM
        if km < 10 and round(km, 1) < 10:
            return cls(meters, _fmt(km, 1), "km")
        return cls(meters, _fmt(km, 0), "km")


def distance_between(here: Position, there: Position, *, units: str = "metric") -> Distance:
    return Distance.from_meters(haversine_m(here, there), units=units)
