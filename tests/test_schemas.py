from datetime import datetime, timezone
import pytest
from envmeasure.errors import ValidationFailed
from envmeasure.schemas import MeasurementBatchIn, MeasurementIn, ProviderRegistrationIn, validate_payload


class TestMeasurementIn:
    def test_parses_timestamp_to_utc(self):
        m = MeasurementIn(timestamp='2024-01-01T09:00:00+09:00', temperature=20.5)
        assert m.timestamp == datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert m.humidity is None

    def test_numeric_strings_coerced(self):
        m = MeasurementIn(timestamp='2024-01-01T00:00:00Z', humidity='45.5')
        assert m.humidity == 45.5

    def test_boolean_reading_rejected(self):
        with pytest.raises(ValidationFailed) as exc:
            validate_payload(MeasurementIn, {'timestamp': '2024-01-01T00:00:00Z', 'humidity': True})
        assert exc.value.message == 'humidity: must be a number'

    def test_nan_rejected(self):
        with pytest.raises(ValidationFailed) as exc:
            validate_payload(MeasurementIn, {'timestamp': '2024-01-01T00:00:00Z', 'temperature': float('nan')})
        assert exc.value.message.startswith('temperature')

    def test_unix_timestamp_rejected(self):
        with pytest.raises(ValidationFailed) as exc:
            validate_payload(MeasurementIn, {'timestamp': 1704067200})
        assert 'ISO-8601' in exc.value.message


class TestValidatePayload:
    def test_returns_model(self):
        batch = validate_payload(MeasurementBatchIn, {
            'location': {'latitude': 1, 'longitude': 2, 'address': 'Somewhere'},
            'measurements': [{'timestamp': '2024-01-01T00:00:00Z'}],
        })
        assert batch.location.address == 'Somewhere'
        assert batch.provider is None
        assert len(batch.measurements) == 1

    def test_message_names_nested_field(self):
        with pytest.raises(ValidationFailed) as exc:
            validate_payload(ProviderRegistrationIn, {
                'name': 'Station',
                'location': {'latitude': 'north', 'longitude': 0},
            })
        assert exc.value.message.startswith('location.latitude: ')
        assert exc.value.status_code == 400

    def test_rejects_non_dict(self):
        with pytest.raises(ValidationFailed):
            validate_payload(MeasurementBatchIn, 'measurements')
