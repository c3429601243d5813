import logging
from sqlalchemy.exc import SQLAlchemyError
from envmeasure.extensions import db
from envmeasure.models.measurement import Measurement, READING_FIELDS
from envmeasure.models.provider import Provider
from envmeasure.utils.geo import distance

logger = logging.getLogger(__name__)


class MeasurementStore:
    """Persistence for measurement records and the radius/time-window lookup."""

    def insert_batch(self, provider_id, latitude, longitude, readings):
        """
        Insert every reading in one transaction. Either all rows commit or,
        on any database error, the session is rolled back and the error re-raised.
        readings: iterable of dicts with 'timestamp' and optional reading fields.
        """
        rows = [
            Measurement(
                provider_id=provider_id,
                timestamp=reading['timestamp'],
                latitude=latitude,
                longitude=longitude,
                **{field: reading.get(field) for field in READING_FIELDS},
            )
            for reading in readings
        ]
        try:
            db.session.add_all(rows)
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            logger.exception(f"Batch insert of {len(rows)} measurements rolled back for provider {provider_id}")
            raise
        return len(rows)

    def find_within(self, latitude, longitude, radius, start, end):
        """
        Measurements with start <= timestamp <= end whose provider lies within
        radius of (latitude, longitude). Returns (measurement, provider, distance)
        tuples ordered by timestamp ascending.
        """
        # Deactivated providers keep their history visible to queries
        nearby = {}
        for provider in Provider.query.all():
            dist = distance(provider.latitude, provider.longitude, latitude, longitude)
            if dist <= radius:
                nearby[provider.id] = (provider, dist)
        if not nearby:
            return []

        measurements = Measurement.query.filter(
            Measurement.provider_id.in_(list(nearby)),
            Measurement.timestamp >= start,
            Measurement.timestamp <= end,
        ).order_by(Measurement.timestamp.asc(), Measurement.id.asc()).all()

        return [(m, *nearby[m.provider_id]) for m in measurements]

    def count(self):
        return db.session.query(db.func.count(Measurement.id)).scalar()
