import logging
from envmeasure.errors import InvalidLocation, InvalidRadius, InvalidTimeRange, MissingParameters
from envmeasure.services.measurement_store import MeasurementStore
from envmeasure.utils.geo import parse_location, parse_radius, round_distance
from envmeasure.utils.timeparse import isoformat_utc, parse_iso8601

logger = logging.getLogger(__name__)

DEFAULT_RADIUS = 5
DEFAULT_INTERVAL = '1m'


def build_cache_key(lat, lon, radius, start_time, end_time, interval):
    """
    Deterministic key for a measurement query. Numbers are rendered from their
    parsed float values, so "5" and "5.0" share a key; times are used verbatim.
    """
    return f"measurements_{float(lat)}_{float(lon)}_{float(radius)}_{start_time}_{end_time}_{interval}"


def shape_measurement(measurement, provider, dist):
    return {
        'timestamp': isoformat_utc(measurement.timestamp),
        **measurement.readings(),
        'provider': {
            'id': provider.id,
            'name': provider.name,
            'distance': round_distance(dist),
        },
    }


class QueryService:
    def __init__(self, cache, store=None):
        self.cache = cache
        self.store = store or MeasurementStore()

    def find_measurements(self, location=None, radius=None, start_time=None,
                          end_time=None, interval=None):
        """
        Measurements near `location` within [start_time, end_time].

        All parameter checks run before the cache or the store is touched.
        Responses are cached for the cache's TTL; later ingestion is not
        visible through a cached key until it expires.
        """
        if not location or not start_time or not end_time:
            raise MissingParameters()

        try:
            lat, lon = parse_location(location)
        except ValueError:
            raise InvalidLocation()

        try:
            radius = parse_radius(radius, DEFAULT_RADIUS)
        except ValueError:
            raise InvalidRadius()

        try:
            start = parse_iso8601(start_time)
            end = parse_iso8601(end_time)
        except ValueError:
            raise InvalidTimeRange()
        if start > end:
            raise InvalidTimeRange('start_time must not be after end_time')

        interval = interval or DEFAULT_INTERVAL

        cache_key = build_cache_key(lat, lon, radius, start_time, end_time, interval)
        cached = self.cache.get(cache_key)
        if cached is not None:
            logger.debug(f"Cache hit: {cache_key}")
            return cached
        logger.debug(f"Cache miss: {cache_key}")

        rows = self.store.find_within(lat, lon, radius, start, end)
        measurements = [shape_measurement(m, p, d) for m, p, d in rows]
        providers_count = len({p.id for _, p, _ in rows})

        response = {
            'status': 'success',
            'data': {
                'location': {'latitude': lat, 'longitude': lon, 'radius': radius},
                'period': {'start': start_time, 'end': end_time, 'interval': interval},
                'measurements': measurements,
                'total_records': len(measurements),
                'providers_count': providers_count,
            },
        }

        self.cache.set(cache_key, response)
        return response
