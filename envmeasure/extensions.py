from flask import current_app
from flask_apscheduler import APScheduler
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy

from envmeasure.cache import ResponseCache

db = SQLAlchemy()
migrate = Migrate()
scheduler = APScheduler()

RESPONSE_CACHE_KEY = 'response_cache'


def init_response_cache(app, cache=None):
    """Attach the app-owned response cache. Tests may pass their own instance."""
    cache = cache or ResponseCache(ttl_seconds=app.config.get('CACHE_TTL_SECONDS', 300))
    app.extensions[RESPONSE_CACHE_KEY] = cache
    return cache


def get_response_cache():
    return current_app.extensions[RESPONSE_CACHE_KEY]
