import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL', 'postgresql://localhost:5432/measurement_api')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Persistence calls sit on the request path, so bound them server-side
    DB_STATEMENT_TIMEOUT_MS = int(os.getenv('DB_STATEMENT_TIMEOUT_MS', '5000'))
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
        'pool_size': 5,
        'connect_args': {'options': f'-c statement_timeout={DB_STATEMENT_TIMEOUT_MS}'},
    }

    # Response cache
    CACHE_TTL_SECONDS = int(os.getenv('CACHE_TTL_SECONDS', '300'))
    CACHE_SWEEP_INTERVAL_SECONDS = int(os.getenv('CACHE_SWEEP_INTERVAL_SECONDS', '60'))

    # Scheduler
    SCHEDULER_ENABLED = os.getenv('SCHEDULER_ENABLED', 'true').lower() == 'true'
    SCHEDULER_API_ENABLED = False

    # Location search (OpenWeatherMap)
    OPENWEATHER_API_KEY = os.getenv('OPENWEATHER_API_KEY')
    OPENWEATHER_BASE_URL = os.getenv('OPENWEATHER_BASE_URL', 'https://api.openweathermap.org/data/2.5')
    OUTBOUND_TIMEOUT_SECONDS = float(os.getenv('OUTBOUND_TIMEOUT_SECONDS', '10'))

    # Logging
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_ENGINE_OPTIONS = {}  # SQLite doesn't support pool_size or statement_timeout
    SCHEDULER_ENABLED = False
    CACHE_TTL_SECONDS = 300
    OPENWEATHER_API_KEY = 'test-weather-key'
