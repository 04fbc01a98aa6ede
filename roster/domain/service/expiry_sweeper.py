"""Expiry sweeper.

Periodically moves invitations whose deadline has passed from PENDING to
EXPIRED. Validity never depends on the sweeper having run; it only makes
the stored status catch up with time.
"""

from datetime import datetime

import logfire

from roster.domain.repository import InvitationRepository, TransactionManager
from roster.domain.value import InvitationStatus

from .base import Service
from .clock import Clock


class ExpirySweeper(Service):
    """Domain service expiring overdue invitations."""

    def __init__(
        self,
        invitation_repository: InvitationRepository,
        transactions: TransactionManager,
        clock: Clock,
    ) -> None:
        self.invitation_repository = invitation_repository
        self.transactions = transactions
        self.clock = clock

    async def sweep(self, now: datetime | None = None) -> int:
        """Expire every PENDING invitation whose deadline is before ``now``.

        Each invitation is expired in its own unit of work with a
        compare-and-set, so an invitation accepted or cancelled in the
        meantime is left alone. A failure on one invitation is logged and
        the sweep continues.

        Args:
            now: Reference time, defaults to the clock

        Returns:
            Number of invitations moved to EXPIRED
        """
        now = now or self.clock.now()
        with logfire.span("expiry_sweeper.sweep", now=now.isoformat()):
            candidates = await self.invitation_repository.find_expired_pending(now)

            expired = 0
            for invitation in candidates:
                try:
                    async with self.transactions.atomic():
                        updated = await self.invitation_repository.transition_status(
                            invitation.id,
                            InvitationStatus.PENDING,
                            InvitationStatus.EXPIRED,
                        )
                except Exception as e:
                    logfire.error(
                        "Failed to expire invitation",
                        invitation_id=str(invitation.id),
                        error=str(e),
                        error_type=type(e).__name__,
                    )
                    continue

                if updated is None:
                    logfire.info(
                        "Invitation left alone, no longer pending",
                        invitation_id=str(invitation.id),
                    )
                    continue
                expired += 1

            logfire.info(
                "Expiry sweep finished",
                candidates=len(candidates),
                expired=expired,
            )
            return expired
