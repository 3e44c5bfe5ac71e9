"""Geohash encoding used for proximity bucketing of stored locations."""

from __future__ import annotations

from ..models.domain import GeoPoint

BASE32 = "0123456789bcdefghjkmnpqrstuvwxyz"
BITS_PER_CHAR = 5


def encode_geohash(point: GeoPoint, precision: int = 5) -> str:
    """Encode a coordinate into a ``precision``-character geohash.

    Longitude and latitude ranges are bisected alternately, longitude first;
    a bit is set when the coordinate lies strictly above the midpoint. Range
    checking is the caller's job.
    """

    lat_range = [-90.0, 90.0]
    lng_range = [-180.0, 180.0]
    chars: list[str] = []
    index = 0
    bit = 0
    even_bit = True

    while len(chars) < precision:
        value, bounds = (point.lng, lng_range) if even_bit else (point.lat, lat_range)
        mid = (bounds[0] + bounds[1]) / 2
        if value > mid:
            index = (index << 1) | 1
            bounds[0] = mid
        else:
            index <<= 1
            bounds[1] = mid
        even_bit = not even_bit

        bit += 1
        if bit == BITS_PER_CHAR:
            chars.append(BASE32[index])
            bit = 0
            index = 0

    return "".join(chars)


def common_prefix_length(first: str, second: str) -> int:
    """Number of leading characters two geohashes share."""

    length = 0
    for left, right in zip(first, second):
        if left != right:
            break
        length += 1
    return length
