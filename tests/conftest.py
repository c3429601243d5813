import pytest

from envmeasure import create_app
from envmeasure.extensions import db as _db, get_response_cache
from envmeasure.models.provider import Provider
from envmeasure.services.metric_service import MetricService
from envmeasure.utils.hashing import hash_api_key
from config import TestConfig

TOKYO_KEY = 'test-key-tokyo'
OSAKA_KEY = 'test-key-osaka'
RETIRED_KEY = 'test-key-retired'


class FakeClock:
    """Monotonic clock the tests can move forward by hand."""

    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture(scope='session')
def app():
    """Create app with test config."""
    app = create_app(TestConfig)
    return app


@pytest.fixture(autouse=True)
def setup_db(app):
    """Create tables and empty the response cache before each test, drop after."""
    with app.app_context():
        _db.create_all()
        get_response_cache().clear()
        yield
        _db.session.rollback()
        _db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def db_session(app):
    with app.app_context():
        yield _db.session


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def sample_providers(db_session):
    """Tokyo and Osaka stations plus one deactivated provider next to Tokyo."""
    providers = [
        Provider(
            id='provider-tokyo',
            name='Tokyo Sensor Station',
            latitude=35.6762,
            longitude=139.6503,
            address='Shinjuku, Tokyo',
            api_key_hash=hash_api_key(TOKYO_KEY),
        ),
        Provider(
            id='provider-osaka',
            name='Osaka Observatory',
            latitude=34.6937,
            longitude=135.5023,
            address='Chuo-ku, Osaka',
            api_key_hash=hash_api_key(OSAKA_KEY),
        ),
        Provider(
            id='provider-retired',
            name='Retired Rooftop',
            latitude=35.6800,
            longitude=139.6550,
            api_key_hash=hash_api_key(RETIRED_KEY),
            is_active=False,
        ),
    ]
    db_session.add_all(providers)
    db_session.commit()
    return providers


@pytest.fixture
def tokyo(sample_providers):
    return sample_providers[0]


@pytest.fixture
def auth_headers():
    return {'Authorization': f'Bearer {TOKYO_KEY}'}


@pytest.fixture
def seeded_metrics(db_session):
    MetricService().seed_defaults()


def batch_payload(readings, latitude=35.6762, longitude=139.6503):
    return {
        'location': {'latitude': latitude, 'longitude': longitude},
        'measurements': readings,
    }
