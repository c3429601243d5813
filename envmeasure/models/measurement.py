from envmeasure.extensions import db
from sqlalchemy import func

READING_FIELDS = ('temperature', 'humidity', 'pressure', 'wind_speed', 'wind_direction')


class Measurement(db.Model):
    __tablename__ = 'measurements'

    id = db.Column(db.Integer, primary_key=True)
    provider_id = db.Column(db.String(36), db.ForeignKey('providers.id'), nullable=False)
    timestamp = db.Column(db.DateTime(timezone=True), nullable=False)
    latitude = db.Column(db.Float, nullable=False)
    longitude = db.Column(db.Float, nullable=False)
    temperature = db.Column(db.Float)      # °C
    humidity = db.Column(db.Float)         # %
    pressure = db.Column(db.Float)         # hPa
    wind_speed = db.Column(db.Float)       # m/s
    wind_direction = db.Column(db.Float)   # degrees
    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now())

    provider = db.relationship('Provider', back_populates='measurements')

    __table_args__ = (
        db.Index('ix_measurements_timestamp', 'timestamp'),
        db.Index('ix_measurements_provider_timestamp', 'provider_id', 'timestamp'),
    )

    def readings(self):
        return {field: getattr(self, field) for field in READING_FIELDS}
