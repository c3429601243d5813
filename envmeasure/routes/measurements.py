from functools import wraps
from flask import Blueprint, g, jsonify, request
from envmeasure.extensions import get_response_cache
from envmeasure.routes import success
from envmeasure.services.ingestion_service import IngestionService
from envmeasure.services.provider_service import ProviderService
from envmeasure.services.query_service import QueryService

measurements_bp = Blueprint('measurements', __name__)
ingestion_service = IngestionService()
provider_service = ProviderService()


def _extract_bearer_token():
    auth_header = request.headers.get('Authorization', '')
    if not auth_header.lower().startswith('bearer '):
        return None
    return auth_header.split(' ', 1)[1].strip() or None


def require_provider_key(func):
    """Resolve the bearer token to an active provider before the view runs."""
    @wraps(func)
    def wrapper(*args, **kwargs):
        g.provider = provider_service.authenticate(_extract_bearer_token())
        return func(*args, **kwargs)

    return wrapper


@measurements_bp.route('/measurements', methods=['POST'])
@require_provider_key
def record_measurements():
    """Ingest a batch of measurements for the authenticated provider."""
    payload = request.get_json(silent=True)
    result = ingestion_service.record_measurements(g.provider, payload)
    return success(result, 201)


@measurements_bp.route('/measurements', methods=['GET'])
def find_measurements():
    """Measurements within a radius of a point over a time window."""
    service = QueryService(cache=get_response_cache())
    response = service.find_measurements(
        location=request.args.get('location'),
        radius=request.args.get('radius'),
        start_time=request.args.get('start_time'),
        end_time=request.args.get('end_time'),
        interval=request.args.get('interval'),
    )
    return jsonify(response)
