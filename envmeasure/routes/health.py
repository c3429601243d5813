import logging
from flask import Blueprint, jsonify
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from envmeasure.extensions import db
from envmeasure.models.provider import Provider
from envmeasure.services.measurement_store import MeasurementStore
from envmeasure.utils.timeparse import isoformat_utc, utcnow

logger = logging.getLogger(__name__)

health_bp = Blueprint('health', __name__)


@health_bp.route('/health')
def health():
    """Liveness. Counts are best-effort and null when the database is unreachable."""
    try:
        providers_count = Provider.query.count()
        measurements_count = MeasurementStore().count()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.warning(f"Health counts unavailable: {e}")
        providers_count = measurements_count = None

    return jsonify({
        'status': 'ok',
        'timestamp': isoformat_utc(utcnow()),
        'providers_count': providers_count,
        'measurements_count': measurements_count,
    })


@health_bp.route('/ready')
def ready():
    try:
        db.session.execute(text('SELECT 1'))
        db_ok = True
    except Exception:
        db.session.rollback()
        db_ok = False

    status = 'ready' if db_ok else 'not_ready'
    code = 200 if db_ok else 503
    return jsonify({'status': status, 'db': db_ok}), code
