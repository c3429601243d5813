import math

MILES_PER_DEGREE = 69.1
# Approximate degrees-per-radian; kept as-is so distances match previously published values
DEGREES_PER_RADIAN = 57.3


def distance(lat1, lon1, lat2, lon2):
    """
    Planar approximation of the distance between two points, in miles.

    Not symmetric: the longitude term is scaled by cos(lat1), so callers
    must pass the stored entity as (lat1, lon1) and the query point as
    (lat2, lon2).
    """
    dy = MILES_PER_DEGREE * (lat1 - lat2)
    dx = MILES_PER_DEGREE * (lon2 - lon1) * math.cos(lat1 / DEGREES_PER_RADIAN)
    return math.sqrt(dy * dy + dx * dx)


def round_distance(value):
    """Round to 2 decimals, halves away from zero (distances are never negative)."""
    return math.floor(value * 100 + 0.5) / 100


def parse_location(raw):
    """Parse a "lat,lon" string into floats. Raises ValueError if malformed or out of range."""
    parts = (raw or '').split(',')
    if len(parts) != 2:
        raise ValueError(f"Expected 'latitude,longitude', got {raw!r}")

    lat = float(parts[0].strip())
    lon = float(parts[1].strip())
    if not (math.isfinite(lat) and math.isfinite(lon)):
        raise ValueError('Coordinates must be finite numbers')
    if not -90 <= lat <= 90:
        raise ValueError(f'Latitude out of range: {lat}')
    if not -180 <= lon <= 180:
        raise ValueError(f'Longitude out of range: {lon}')
    return lat, lon


def parse_radius(raw, default):
    """Parse an optional radius query value. Blank means default."""
    if raw is None or str(raw).strip() == '':
        return float(default)
    value = float(str(raw).strip())
    if not math.isfinite(value) or value < 0:
        raise ValueError(f'Invalid radius: {raw!r}')
    return value
