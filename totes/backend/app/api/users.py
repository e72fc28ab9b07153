"""
User management API routes, plus user state types and user logs
"""
from typing import List

from fastapi import APIRouter, Depends, Query, status

from app.dependencies import AuditContext, require_permission
from app.models import UserStateType
from app.permission_config import (
    PERMISSION_CREATE_USER,
    PERMISSION_GET_ALL_LOGS_FROM_USER,
    PERMISSION_GET_ALL_USER_STATE_TYPES,
    PERMISSION_GET_ALL_USERS,
    PERMISSION_GET_USER_BY_ID,
    PERMISSION_GET_USER_STATE_TYPE_BY_ID,
    PERMISSION_SEARCH_USER_BY_ID,
    PERMISSION_SEARCH_USERS_BY_EMAIL,
    PERMISSION_UPDATE_USER,
    PERMISSION_UPDATE_USER_STATE,
    PERMISSION_USER_HAS_PERMISSION,
)
from app.schemas.user import (
    HasPermissionResponse,
    UserCreate,
    UserLogResponse,
    UserResponse,
    UserStateTypeResponse,
    UserStateUpdate,
    UserUpdate,
)
from app.services.catalog_service import CatalogService
from app.services.log_service import LogService
from app.services.permission_service import PermissionService
from app.services.user_service import UserService

router = APIRouter()
user_state_types_router = APIRouter()
user_logs_router = APIRouter()


@router.get("/", response_model=List[UserResponse])
def get_all_users(
    audit: AuditContext = Depends(require_permission(PERMISSION_GET_ALL_USERS, "GetAllUsers")),
):
    users = UserService.get_all(audit.db)
    audit.log("Users retrieved")
    return users


@router.get("/search-by-id", response_model=List[UserResponse])
def search_users_by_id(
    query: str = Query("", alias="id"),
    audit: AuditContext = Depends(require_permission(PERMISSION_SEARCH_USER_BY_ID, "SearchUserByID")),
):
    users = UserService.search_by_id(audit.db, query)
    audit.log(f"Users searched by id '{query}'")
    return users


@router.get("/search-by-email", response_model=List[UserResponse])
def search_users_by_email(
    email: str = Query(""),
    audit: AuditContext = Depends(require_permission(PERMISSION_SEARCH_USERS_BY_EMAIL, "SearchUsersByEmail")),
):
    users = UserService.search_by_email(audit.db, email)
    audit.log(f"Users searched by email '{email}'")
    return users


@router.post("/", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    body: UserCreate,
    audit: AuditContext = Depends(require_permission(PERMISSION_CREATE_USER, "CreateUser")),
):
    """Create a login user. The password is stored as a bcrypt hash only."""
    try:
        user = UserService.create(
            audit.db, body.email, body.password, body.user_type_id, body.user_state_type_id
        )
    except ValueError as e:
        raise audit.service_error(e)
    audit.log(f"User {user.id} ({user.email}) created")
    return user


@router.get("/{user_id}/permissions/{permission_id}", response_model=HasPermissionResponse)
def user_has_permission(
    user_id: int,
    permission_id: int,
    audit: AuditContext = Depends(require_permission(PERMISSION_USER_HAS_PERMISSION, "UserHasPermission")),
):
    user = UserService.get_by_id(audit.db, user_id)
    if not user:
        raise audit.fail(404, "User not found")
    has_permission = PermissionService.user_has_permission(audit.db, user, permission_id)
    audit.log(f"Checked permission {permission_id} for user {user_id}: {has_permission}")
    return HasPermissionResponse(user_id=user_id, permission_id=permission_id, has_permission=has_permission)


@router.patch("/{user_id}/state", response_model=UserResponse)
def update_user_state(
    user_id: int,
    body: UserStateUpdate,
    audit: AuditContext = Depends(require_permission(PERMISSION_UPDATE_USER_STATE, "UpdateUserState")),
):
    try:
        user = UserService.update_state(audit.db, user_id, body.user_state_type_id)
    except ValueError as e:
        raise audit.service_error(e)
    audit.log(f"User {user_id} state set to {body.user_state_type_id}")
    return user


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: int,
    body: UserUpdate,
    audit: AuditContext = Depends(require_permission(PERMISSION_UPDATE_USER, "UpdateUser")),
):
    try:
        user = UserService.update(audit.db, user_id, body.email, body.user_type_id, body.password)
    except ValueError as e:
        raise audit.service_error(e)
    audit.log(f"User {user_id} updated")
    return user


@router.get("/{user_id}", response_model=UserResponse)
def get_user(
    user_id: int,
    audit: AuditContext = Depends(require_permission(PERMISSION_GET_USER_BY_ID, "GetUserByID")),
):
    user = UserService.get_by_id(audit.db, user_id)
    if not user:
        raise audit.fail(404, "User not found")
    audit.log(f"User {user_id} retrieved")
    return user


# =====================================================
# User state types
# =====================================================

@user_state_types_router.get("/", response_model=List[UserStateTypeResponse])
def get_all_user_state_types(
    audit: AuditContext = Depends(require_permission(PERMISSION_GET_ALL_USER_STATE_TYPES, "GetAllUserStateTypes")),
):
    states = CatalogService.get_all(audit.db, UserStateType)
    audit.log("User state types retrieved")
    return states


@user_state_types_router.get("/{state_id}", response_model=UserStateTypeResponse)
def get_user_state_type(
    state_id: int,
    audit: AuditContext = Depends(require_permission(PERMISSION_GET_USER_STATE_TYPE_BY_ID, "GetUserStateTypeByID")),
):
    state = CatalogService.get_by_id(audit.db, UserStateType, state_id)
    if not state:
        raise audit.fail(404, "User state type not found")
    audit.log(f"User state type {state_id} retrieved")
    return state


# =====================================================
# User logs
# =====================================================

@user_logs_router.get("/{email}", response_model=List[UserLogResponse])
def get_logs_for_user(
    email: str,
    audit: AuditContext = Depends(require_permission(PERMISSION_GET_ALL_LOGS_FROM_USER, "GetAllLogsFromUser")),
):
    """All audit entries of a user, newest first."""
    logs = [UserLogResponse.model_validate(entry) for entry in LogService.get_logs_for_user(audit.db, email.strip().lower())]
    audit.log(f"Logs of {email} retrieved")
    return logs
