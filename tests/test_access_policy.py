import pytest

from app.models.user import UserRole
from app.services.access_policy import has_any_role, has_role, role_rank


def test_admin_outranks_viewer():
    assert has_role(UserRole.ADMIN, UserRole.VIEWER) is True


def test_viewer_cannot_act_as_manager():
    assert has_role(UserRole.VIEWER, UserRole.MANAGER) is False


@pytest.mark.parametrize("role", list(UserRole))
def test_every_role_satisfies_itself(role):
    assert has_role(role, role) is True


def test_rank_is_a_total_order():
    assert role_rank(UserRole.VIEWER) < role_rank(UserRole.MANAGER) < role_rank(UserRole.ADMIN)


def test_plain_strings_are_accepted():
    assert has_role("manager", "viewer") is True
    assert has_role("manager", "admin") is False


def test_has_any_role():
    assert has_any_role(UserRole.MANAGER, [UserRole.MANAGER, UserRole.ADMIN]) is True
    assert has_any_role(UserRole.VIEWER, [UserRole.MANAGER, UserRole.ADMIN]) is False
    assert has_any_role(UserRole.ADMIN, [UserRole.VIEWER]) is True
    assert has_any_role(UserRole.ADMIN, []) is False
