from flask import jsonify

API_PREFIX = '/api/v1'


def success(data, status_code=200):
    return jsonify({'status': 'success', 'data': data}), status_code


def register_blueprints(app):
    from envmeasure.routes.health import health_bp
    from envmeasure.routes.measurements import measurements_bp
    from envmeasure.routes.providers import providers_bp
    from envmeasure.routes.metrics import metrics_bp
    from envmeasure.routes.locations import locations_bp

    app.register_blueprint(health_bp, url_prefix=API_PREFIX)
    app.register_blueprint(measurements_bp, url_prefix=API_PREFIX)
    app.register_blueprint(providers_bp, url_prefix=API_PREFIX)
    app.register_blueprint(metrics_bp, url_prefix=API_PREFIX)
    app.register_blueprint(locations_bp, url_prefix=API_PREFIX)
