"""
Permissions, roles and user types API routes (read-only; seeded at startup)
"""
from typing import List

from fastapi import APIRouter, Depends, Query

from app.dependencies import AuditContext, require_permission
from app.permission_config import (
    PERMISSION_EXIST_ROLE,
    PERMISSION_EXIST_USER_TYPE,
    PERMISSION_GET_ALL_PERMISSIONS,
    PERMISSION_GET_ALL_PERMISSIONS_OF_ROLE,
    PERMISSION_GET_ALL_ROLES,
    PERMISSION_GET_ALL_USER_TYPES,
    PERMISSION_GET_PERMISSION_BY_ID,
    PERMISSION_GET_ROLE_BY_ID,
    PERMISSION_GET_USER_TYPE_BY_ID,
    PERMISSION_SEARCH_PERMISSION_BY_ID,
    PERMISSION_SEARCH_PERMISSION_BY_NAME,
    PERMISSION_SEARCH_ROLE_BY_ID,
    PERMISSION_SEARCH_ROLE_BY_NAME,
    PERMISSION_SEARCH_USER_TYPES_BY_ID,
    PERMISSION_SEARCH_USER_TYPES_BY_NAME,
)
from app.schemas.user import ExistsResponse, PermissionResponse, RoleResponse, UserTypeResponse
from app.services.permission_service import PermissionService, RoleService, UserTypeService

router = APIRouter()
roles_router = APIRouter()
user_types_router = APIRouter()


# =====================================================
# Permissions
# =====================================================

@router.get("/", response_model=List[PermissionResponse])
def get_all_permissions(
    audit: AuditContext = Depends(require_permission(PERMISSION_GET_ALL_PERMISSIONS, "GetAllPermissions")),
):
    permissions = PermissionService.get_all(audit.db)
    audit.log("Permissions retrieved")
    return permissions


@router.get("/search-by-id", response_model=List[PermissionResponse])
def search_permissions_by_id(
    query: str = Query("", alias="id"),
    audit: AuditContext = Depends(require_permission(PERMISSION_SEARCH_PERMISSION_BY_ID, "SearchPermissionByID")),
):
    permissions = PermissionService.search_by_id(audit.db, query)
    audit.log(f"Permissions searched by id '{query}'")
    return permissions


@router.get("/search-by-name", response_model=List[PermissionResponse])
def search_permissions_by_name(
    name: str = Query(""),
    audit: AuditContext = Depends(require_permission(PERMISSION_SEARCH_PERMISSION_BY_NAME, "SearchPermissionByName")),
):
    permissions = PermissionService.search_by_name(audit.db, name)
    audit.log(f"Permissions searched by name '{name}'")
    return permissions


@router.get("/{permission_id}", response_model=PermissionResponse)
def get_permission(
    permission_id: int,
    audit: AuditContext = Depends(require_permission(PERMISSION_GET_PERMISSION_BY_ID, "GetPermissionByID")),
):
    permission = PermissionService.get_by_id(audit.db, permission_id)
    if not permission:
        raise audit.fail(404, "Permission not found")
    audit.log(f"Permission {permission_id} retrieved")
    return permission


# =====================================================
# Roles
# =====================================================

@roles_router.get("/", response_model=List[RoleResponse])
def get_all_roles(
    audit: AuditContext = Depends(require_permission(PERMISSION_GET_ALL_ROLES, "GetAllRoles")),
):
    roles = [RoleResponse.from_model(r) for r in RoleService.get_all(audit.db)]
    audit.log("Roles retrieved")
    return roles


@roles_router.get("/search-by-id", response_model=List[RoleResponse])
def search_roles_by_id(
    query: str = Query("", alias="id"),
    audit: AuditContext = Depends(require_permission(PERMISSION_SEARCH_ROLE_BY_ID, "SearchRoleByID")),
):
    roles = [RoleResponse.from_model(r) for r in RoleService.search_by_id(audit.db, query)]
    audit.log(f"Roles searched by id '{query}'")
    return roles


@roles_router.get("/search-by-name", response_model=List[RoleResponse])
def search_roles_by_name(
    name: str = Query(""),
    audit: AuditContext = Depends(require_permission(PERMISSION_SEARCH_ROLE_BY_NAME, "SearchRoleByName")),
):
    roles = [RoleResponse.from_model(r) for r in RoleService.search_by_name(audit.db, name)]
    audit.log(f"Roles searched by name '{name}'")
    return roles


@roles_router.get("/{role_id}/permissions", response_model=List[PermissionResponse])
def get_role_permissions(
    role_id: int,
    audit: AuditContext = Depends(require_permission(PERMISSION_GET_ALL_PERMISSIONS_OF_ROLE, "GetAllPermissionsOfRole")),
):
    role = RoleService.get_by_id(audit.db, role_id)
    if not role:
        raise audit.fail(404, "Role not found")
    permissions = [PermissionResponse.model_validate(p) for p in sorted(role.permissions, key=lambda p: p.id)]
    audit.log(f"Permissions of role {role_id} retrieved")
    return permissions


@roles_router.get("/{role_id}/exists", response_model=ExistsResponse)
def role_exists(
    role_id: int,
    audit: AuditContext = Depends(require_permission(PERMISSION_EXIST_ROLE, "ExistRole")),
):
    exists = RoleService.exists(audit.db, role_id)
    audit.log(f"Role {role_id} exists: {exists}")
    return ExistsResponse(exists=exists)


@roles_router.get("/{role_id}", response_model=RoleResponse)
def get_role(
    role_id: int,
    audit: AuditContext = Depends(require_permission(PERMISSION_GET_ROLE_BY_ID, "GetRoleByID")),
):
    role = RoleService.get_by_id(audit.db, role_id)
    if not role:
        raise audit.fail(404, "Role not found")
    response = RoleResponse.from_model(role)
    audit.log(f"Role {role_id} retrieved")
    return response


# =====================================================
# User types
# =====================================================

@user_types_router.get("/", response_model=List[UserTypeResponse])
def get_all_user_types(
    audit: AuditContext = Depends(require_permission(PERMISSION_GET_ALL_USER_TYPES, "GetAllUserTypes")),
):
    user_types = [UserTypeResponse.from_model(t) for t in UserTypeService.get_all(audit.db)]
    audit.log("User types retrieved")
    return user_types


@user_types_router.get("/search-by-id", response_model=List[UserTypeResponse])
def search_user_types_by_id(
    query: str = Query("", alias="id"),
    audit: AuditContext = Depends(require_permission(PERMISSION_SEARCH_USER_TYPES_BY_ID, "SearchUserTypesByID")),
):
    user_types = [UserTypeResponse.from_model(t) for t in UserTypeService.search_by_id(audit.db, query)]
    audit.log(f"User types searched by id '{query}'")
    return user_types


@user_types_router.get("/search-by-name", response_model=List[UserTypeResponse])
def search_user_types_by_name(
    name: str = Query(""),
    audit: AuditContext = Depends(require_permission(PERMISSION_SEARCH_USER_TYPES_BY_NAME, "SearchUserTypesByName")),
):
    user_types = [UserTypeResponse.from_model(t) for t in UserTypeService.search_by_name(audit.db, name)]
    audit.log(f"User types searched by name '{name}'")
    return user_types


@user_types_router.get("/{user_type_id}/exists", response_model=ExistsResponse)
def user_type_exists(
    user_type_id: int,
    audit: AuditContext = Depends(require_permission(PERMISSION_EXIST_USER_TYPE, "ExistUserType")),
):
    exists = UserTypeService.exists(audit.db, user_type_id)
    audit.log(f"User type {user_type_id} exists: {exists}")
    return ExistsResponse(exists=exists)


@user_types_router.get("/{user_type_id}", response_model=UserTypeResponse)
def get_user_type(
    user_type_id: int,
    audit: AuditContext = Depends(require_permission(PERMISSION_GET_USER_TYPE_BY_ID, "GetUserTypeByID")),
):
    user_type = UserTypeService.get_by_id(audit.db, user_type_id)
    if not user_type:
        raise audit.fail(404, "User type not found")
    response = UserTypeResponse.from_model(user_type)
    audit.log(f"User type {user_type_id} retrieved")
    return response
