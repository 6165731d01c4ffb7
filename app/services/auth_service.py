import logging
import re
from datetime import datetime, timedelta, timezone

import bcrypt
import jwt

from app.config import settings
from app.errors import ConflictError, UnauthenticatedError
from app.models.user import User, UserRole
from app.store import InventoryStore

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
# At least 8 characters, 1 uppercase, 1 lowercase, 1 number
PASSWORD_RE = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)[a-zA-Z\d@$!%*?&]{8,}$")

ACCESS = "access"
REFRESH = "refresh"


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)).decode()


def verify_password(password: str, hashed: str) -> bool:
    return bcrypt.checkpw(password.encode(), hashed.encode())


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_RE.match(email))


def is_valid_password(password: str) -> bool:
    return bool(PASSWORD_RE.match(password))


def _encode(user: User, token_type: str, lifetime: timedelta, secret: str) -> str:
    role = user.role.value if isinstance(user.role, UserRole) else user.role
    payload = {
        "sub": user.id,
        "email": user.email,
        "role": role,
        "type": token_type,
        "exp": datetime.now(timezone.utc) + lifetime,
    }
    return jwt.encode(payload, secret, algorithm="HS256")


def create_access_token(user: User) -> str:
    return _encode(user, ACCESS, timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES), settings.JWT_SECRET)


def create_refresh_token(user: User) -> str:
    return _encode(user, REFRESH, timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS), settings.JWT_REFRESH_SECRET)


def create_tokens(user: User) -> dict:
    return {"access_token": create_access_token(user), "refresh_token": create_refresh_token(user)}


def decode_token(token: str, token_type: str = ACCESS) -> dict | None:
    secret = settings.JWT_SECRET if token_type == ACCESS else settings.JWT_REFRESH_SECRET
    try:
        payload = jwt.decode(token, secret, algorithms=["HS256"])
    except (jwt.ExpiredSignatureError, jwt.InvalidTokenError):
        return None
    if payload.get("type") != token_type:
        return None
    return payload


def authenticate(store: InventoryStore, email: str, password: str) -> User:
    user = store.users.find_by_email(email)
    if not user or not verify_password(password, user.password_hash):
        raise UnauthenticatedError("Invalid credentials")
    if not user.is_active:
        raise UnauthenticatedError("Account is deactivated")
    logger.info("User logged in: %s (%s)", user.email, user.id)
    return user


def refresh_tokens(store: InventoryStore, refresh_token: str) -> dict:
    payload = decode_token(refresh_token, REFRESH)
    if not payload:
        raise UnauthenticatedError("Invalid refresh token")
    user_id = payload.get("sub")
    user = store.users.get(user_id) if user_id else None
    if not user or not user.is_active:
        raise UnauthenticatedError("Invalid refresh token")
    logger.info("Token refreshed for %s", user.id)
    return create_tokens(user)


def get_user_by_id(store: InventoryStore, user_id: str) -> User | None:
    return store.users.get(user_id)


def register_user(
    store: InventoryStore,
    email: str,
    password: str,
    name: str,
    role: UserRole = UserRole.VIEWER,
    created_by: str | None = None,
) -> User:
    if store.users.find_by_email(email):
        raise ConflictError("User already exists with this email")
    user = store.users.create(
        email=email,
        name=name,
        password_hash=hash_password(password),
        role=UserRole(role),
        is_active=True,
    )
    logger.info("User registered: %s (%s) by %s", user.email, user.id, created_by)
    return user
