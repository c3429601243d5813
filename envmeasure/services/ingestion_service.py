import logging
from sqlalchemy.exc import SQLAlchemyError
from envmeasure.errors import InternalError
from envmeasure.models.measurement import READING_FIELDS
from envmeasure.schemas import MeasurementBatchIn, validate_payload
from envmeasure.services.measurement_store import MeasurementStore

logger = logging.getLogger(__name__)


class IngestionService:
    def __init__(self, store=None):
        self.store = store or MeasurementStore()

    def record_measurements(self, provider, payload):
        """
        Validate and persist a batch for an already-authenticated provider.

        Every reading takes the request-level location. The batch is rejected
        as a whole on the first invalid field, and persisted all-or-nothing.
        """
        batch = validate_payload(MeasurementBatchIn, payload)

        readings = [
            {
                'timestamp': m.timestamp,
                **{field: getattr(m, field) for field in READING_FIELDS},
            }
            for m in batch.measurements
        ]

        try:
            count = self.store.insert_batch(
                provider.id,
                batch.location.latitude,
                batch.location.longitude,
                readings,
            )
        except SQLAlchemyError:
            raise InternalError('Failed to record measurements')

        logger.info(f"Recorded {count} measurements for provider {provider.id}")
        return {
            'message': f'{count} measurements recorded',
            'recorded_count': count,
            'provider': provider.name,
        }
