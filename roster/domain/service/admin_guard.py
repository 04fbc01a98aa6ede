"""Admin-invariant guard.

An organization must keep at least one administrator. Every path that
takes administrative power away from a user (removal, demotion,
deactivation) asks this guard first, with the administrator count read
before the change is applied.
"""


def can_remove_admin_status(current_admin_count: int) -> bool:
    """Decide whether one administrator may lose administrative power.

    Args:
        current_admin_count: Administrators in the organization right now,
            including the one about to be removed, demoted or deactivated

    Returns:
        True only if at least one other administrator would remain.
        Counts of zero or below are answered with False.
    """
    return current_admin_count > 1
