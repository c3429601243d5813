import logging
from flask import Flask
from config import Config


def create_app(config_class=None):
    app = Flask(__name__)
    app.config.from_object(config_class or Config)

    # Heroku/Railway style DATABASE_URL (postgres:// -> postgresql://)
    db_uri = app.config.get('SQLALCHEMY_DATABASE_URI', '')
    if db_uri.startswith('postgres://'):
        app.config['SQLALCHEMY_DATABASE_URI'] = db_uri.replace('postgres://', 'postgresql://', 1)

    # Logging
    logging.basicConfig(
        level=getattr(logging, app.config.get('LOG_LEVEL', 'INFO')),
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    )

    # Extensions
    from envmeasure.extensions import db, migrate, scheduler, init_response_cache
    db.init_app(app)
    migrate.init_app(app, db)
    init_response_cache(app)

    # Error envelopes
    from envmeasure.errors import register_error_handlers
    register_error_handlers(app)

    # Register blueprints
    from envmeasure.routes import register_blueprints
    register_blueprints(app)

    # Scheduler
    if app.config.get('SCHEDULER_ENABLED') and not app.config.get('TESTING'):
        scheduler.init_app(app)
        from envmeasure.jobs.scheduled import register_jobs
        register_jobs(scheduler, app)
        scheduler.start()

    return app
