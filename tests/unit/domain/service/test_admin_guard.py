"""Unit tests for the last-administrator guard."""

import pytest

from roster.domain.service import can_remove_admin_status


class TestCanRemoveAdminStatus:
    """Tests for can_remove_admin_status."""

    @pytest.mark.parametrize(
        "admin_count, expected",
        [(0, False), (1, False), (2, True), (5, True)],
    )
    def test_requires_another_administrator(self, admin_count, expected):
        """Removal is allowed only when another administrator remains."""
        assert can_remove_admin_status(admin_count) is expected
