import logging

logger = logging.getLogger(__name__)


def _cache_sweep_job(app):
    with app.app_context():
        from envmeasure.extensions import get_response_cache
        removed = get_response_cache().purge_expired()
        if removed:
            logger.info(f"[Job] Cache sweep: {removed} expired entries removed")


def _upsert_job(scheduler, **kwargs):
    scheduler.add_job(replace_existing=True, **kwargs)


def register_jobs(scheduler, app):
    """Register all scheduled jobs."""
    _upsert_job(
        scheduler,
        id='cache_sweep',
        func=_cache_sweep_job,
        trigger='interval',
        args=[app],
        seconds=app.config.get('CACHE_SWEEP_INTERVAL_SECONDS', 60),
        coalesce=True,
        max_instances=1,
    )

    logger.info("All scheduled jobs registered")
