from flask import Blueprint, request
from envmeasure.routes import success
from envmeasure.services.provider_service import ProviderService

providers_bp = Blueprint('providers', __name__)
provider_service = ProviderService()


@providers_bp.route('/providers', methods=['POST'])
def register_provider():
    """Register a data provider. The API key is only shown in this response."""
    payload = request.get_json(silent=True)
    return success(provider_service.register(payload), 201)


@providers_bp.route('/providers/nearby')
def nearby_providers():
    providers = provider_service.find_nearby(
        location=request.args.get('location'),
        radius=request.args.get('radius'),
    )
    return success({'providers': providers})
