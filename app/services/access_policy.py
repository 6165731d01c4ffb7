from collections.abc import Iterable

from app.models.user import UserRole

ROLE_RANK = {
    UserRole.VIEWER: 1,
    UserRole.MANAGER: 2,
    UserRole.ADMIN: 3,
}


def role_rank(role: UserRole | str) -> int:
    return ROLE_RANK[UserRole(role)]


def has_role(actual: UserRole | str, required: UserRole | str) -> bool:
    """True if `actual` is at least as privileged as `required`."""
    return role_rank(actual) >= role_rank(required)


def has_any_role(actual: UserRole | str, required: Iterable[UserRole | str]) -> bool:
    return any(has_role(actual, r) for r in required)
