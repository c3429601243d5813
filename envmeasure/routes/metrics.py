from flask import Blueprint
from envmeasure.routes import success
from envmeasure.services.metric_service import MetricService

metrics_bp = Blueprint('metrics', __name__)
metric_service = MetricService()


@metrics_bp.route('/metrics')
def list_metrics():
    return success({'available_metrics': metric_service.list_metrics()})
