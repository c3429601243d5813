import logging
from envmeasure.extensions import db
from envmeasure.models.metric import Metric

logger = logging.getLogger(__name__)

DEFAULT_METRICS = [
    {'name': 'temperature', 'unit': '°C', 'description': 'Air temperature'},
    {'name': 'humidity', 'unit': '%', 'description': 'Relative humidity'},
    {'name': 'pressure', 'unit': 'hPa', 'description': 'Atmospheric pressure'},
    {'name': 'wind_speed', 'unit': 'm/s', 'description': 'Wind speed'},
    {'name': 'wind_direction', 'unit': 'degrees', 'description': 'Wind direction'},
]


class MetricService:
    def list_metrics(self):
        metrics = Metric.query.filter_by(is_active=True).order_by(Metric.id).all()
        return [m.to_dict() for m in metrics]

    def seed_defaults(self):
        """Insert any missing default metric definitions. Idempotent."""
        existing = {name for (name,) in db.session.query(Metric.name).all()}
        added = 0
        for definition in DEFAULT_METRICS:
            if definition['name'] in existing:
                continue
            db.session.add(Metric(**definition))
            added += 1
        db.session.commit()
        if added:
            logger.info(f"Seeded {added} metric definitions")
        return added
