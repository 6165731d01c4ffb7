from fastapi import APIRouter, Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.errors import ForbiddenError, NotFoundError, UnauthenticatedError, ValidationError
from app.limits import api_limit, auth_limit
from app.models.user import User, UserRole
from app.schemas.auth import LoginData, LoginRequest, ProfileOut, RefreshRequest, RegisterRequest, TokenPair, UserOut
from app.schemas.common import ApiResponse
from app.services import auth_service
from app.services.access_policy import has_any_role
from app.store import InventoryStore, get_store

router = APIRouter(prefix="/auth", tags=["Auth"], dependencies=[Depends(api_limit), Depends(auth_limit)])

bearer = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer),
    store: InventoryStore = Depends(get_store),
) -> User:
    """Dependency: resolve the Bearer token to an active user."""
    if not credentials or credentials.scheme.lower() != "bearer":
        raise UnauthenticatedError("Access token required")
    payload = auth_service.decode_token(credentials.credentials)
    if not payload:
        raise UnauthenticatedError("Invalid or expired token")
    user_id = payload.get("sub")
    user = auth_service.get_user_by_id(store, user_id) if user_id else None
    if not user or not user.is_active:
        raise UnauthenticatedError("Invalid or expired token")
    return user


def require_role(*roles: UserRole):
    """Dependency factory: current user must hold at least one of `roles` (higher roles included)."""

    def checker(user: User = Depends(get_current_user)) -> User:
        if not has_any_role(user.role, roles):
            raise ForbiddenError("Insufficient permissions")
        return user

    return checker


require_admin = require_role(UserRole.ADMIN)
require_manager = require_role(UserRole.MANAGER, UserRole.ADMIN)
require_viewer = require_role(UserRole.VIEWER, UserRole.MANAGER, UserRole.ADMIN)


@router.post("/login", response_model=ApiResponse[LoginData])
def login(data: LoginRequest, store: InventoryStore = Depends(get_store)):
    user = auth_service.authenticate(store, data.email, data.password)
    tokens = auth_service.create_tokens(user)
    return ApiResponse[LoginData](
        message="Login successful",
        data=LoginData(**tokens, user=UserOut.model_validate(user)),
    )


@router.post("/register", response_model=ApiResponse[UserOut], status_code=201)
def register(
    data: RegisterRequest,
    user: User = Depends(require_admin),
    store: InventoryStore = Depends(get_store),
):
    new_user = auth_service.register_user(
        store,
        email=data.email,
        password=data.password,
        name=data.name,
        role=data.role or UserRole.VIEWER,
        created_by=user.id,
    )
    return ApiResponse[UserOut](message="User registered successfully", data=new_user)


@router.post("/refresh", response_model=ApiResponse[TokenPair])
def refresh(data: RefreshRequest, store: InventoryStore = Depends(get_store)):
    if not data.refresh_token:
        raise ValidationError("Refresh token required")
    tokens = auth_service.refresh_tokens(store, data.refresh_token)
    return ApiResponse[TokenPair](message="Token refreshed successfully", data=TokenPair(**tokens))


@router.get("/profile", response_model=ApiResponse[ProfileOut])
def profile(user: User = Depends(get_current_user), store: InventoryStore = Depends(get_store)):
    current = auth_service.get_user_by_id(store, user.id)
    if not current:
        raise NotFoundError("User not found")
    return ApiResponse[ProfileOut](message="Profile retrieved successfully", data=current)
