#!/usr/bin/env python3
"""Run a single invitation expiry pass (for cron-style deployments)."""

import asyncio
import sys

import logfire

from roster.config import Settings
from roster.interface.worker.scheduler import run_expiry_sweep
from roster.util.di.container import create_container
from roster.util.logging import setup_logging
from roster.util.observability import configure_logfire


async def _run() -> int:
    container = create_container()
    try:
        return await run_expiry_sweep(container)
    finally:
        await container.close()


def main() -> int:
    """Expire overdue invitations once and exit."""
    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    expired = asyncio.run(_run())
    logfire.info("Expiry pass finished", expired=expired)
    return 0


if __name__ == "__main__":
    sys.exit(main())
