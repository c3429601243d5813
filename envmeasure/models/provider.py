import uuid
from envmeasure.extensions import db
from sqlalchemy import func


def _new_provider_id():
    return str(uuid.uuid4())


class Provider(db.Model):
    __tablename__ = 'providers'

    id = db.Column(db.String(36), primary_key=True, default=_new_provider_id)
    name = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text)
    latitude = db.Column(db.Float, nullable=False)
    longitude = db.Column(db.Float, nullable=False)
    address = db.Column(db.String(512))
    contact_email = db.Column(db.String(320))
    api_key_hash = db.Column(db.String(64), nullable=False, unique=True)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now())

    measurements = db.relationship('Measurement', back_populates='provider', lazy='dynamic')

    __table_args__ = (
        db.Index('ix_providers_active', 'is_active'),
    )

    def location_dict(self):
        return {
            'latitude': self.latitude,
            'longitude': self.longitude,
            'address': self.address,
        }

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'location': self.location_dict(),
            'contact_email': self.contact_email,
            'is_active': self.is_active,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }
