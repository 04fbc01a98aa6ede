"""Periodic background jobs.

The invitation expiry sweep runs inside the API process on an
APScheduler interval trigger. ``scripts/run_sweeper.py`` runs a single
pass for deployments that prefer an external cron.
"""

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger
from dishka import AsyncContainer
import logfire

from roster.config import Settings
from roster.domain.service import ExpirySweeper

SWEEP_JOB_ID = "invitation-expiry-sweep"


async def run_expiry_sweep(container: AsyncContainer) -> int:
    """Run one expiry pass in its own request scope.

    Args:
        container: Application-scoped DI container

    Returns:
        Number of invitations moved to EXPIRED
    """
    with logfire.span("worker.run_expiry_sweep"):
        try:
            async with container() as request_container:
                sweeper = await request_container.get(ExpirySweeper)
                return await sweeper.sweep()
        except Exception as e:
            logfire.error(
                "Invitation expiry sweep failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            raise


def create_sweep_scheduler(
    container: AsyncContainer, settings: Settings
) -> AsyncIOScheduler:
    """Build a scheduler carrying the expiry sweep job (not started)."""
    scheduler = AsyncIOScheduler(timezone="UTC")
    scheduler.add_job(
        run_expiry_sweep,
        trigger=IntervalTrigger(minutes=settings.invitations.sweep_interval_minutes),
        args=[container],
        id=SWEEP_JOB_ID,
        name="Expire stale invitations",
        max_instances=1,
        coalesce=True,
        replace_existing=True,
    )
    return scheduler
