"""Request body models for the write endpoints."""
from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationError, field_validator

from envmeasure.errors import ValidationFailed
from envmeasure.utils.timeparse import parse_iso8601


class _StrictModel(BaseModel):
    # Unknown keys are rejected, as the public API always has
    model_config = ConfigDict(extra='forbid', allow_inf_nan=False)


def _reject_bool(v):
    # JSON true/false would otherwise coerce to 1.0/0.0
    if isinstance(v, bool):
        raise ValueError('must be a number')
    return v


class LocationIn(_StrictModel):
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    address: str | None = None

    @field_validator('latitude', 'longitude', mode='before')
    @classmethod
    def coords_are_numbers(cls, v):
        return _reject_bool(v)


class MeasurementIn(_StrictModel):
    timestamp: datetime
    temperature: float | None = None
    humidity: float | None = Field(None, ge=0, le=100)
    pressure: float | None = None
    wind_speed: float | None = Field(None, ge=0)
    wind_direction: float | None = Field(None, ge=0, le=360)

    @field_validator(
        'temperature', 'humidity', 'pressure', 'wind_speed', 'wind_direction', mode='before',
    )
    @classmethod
    def readings_are_numbers(cls, v):
        return _reject_bool(v)

    @field_validator('timestamp', mode='before')
    @classmethod
    def timestamp_is_iso8601(cls, v):
        try:
            return parse_iso8601(v)
        except ValueError:
            raise ValueError('must be a valid ISO-8601 date string')


class ProviderRef(_StrictModel):
    id: str
    name: str


class MeasurementBatchIn(_StrictModel):
    location: LocationIn
    measurements: list[MeasurementIn] = Field(min_length=1)
    # Accepted for compatibility; attribution always comes from the API key
    provider: ProviderRef | None = None


class ProviderRegistrationIn(_StrictModel):
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    location: LocationIn
    contact: EmailStr | None = None

    @field_validator('name')
    @classmethod
    def name_not_blank(cls, v):
        if not v.strip():
            raise ValueError('must not be blank')
        return v.strip()


def _format_error(err):
    path = '.'.join(str(part) for part in err['loc'])
    msg = err['msg']
    if msg.startswith('Value error, '):
        msg = msg[len('Value error, '):]
    return f"{path}: {msg}" if path else msg


def validate_payload(model, payload):
    """Validate a decoded JSON body. Raises ValidationFailed naming the first bad field."""
    if not isinstance(payload, dict):
        raise ValidationFailed('JSON object body required')
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise ValidationFailed(_format_error(e.errors()[0]))
