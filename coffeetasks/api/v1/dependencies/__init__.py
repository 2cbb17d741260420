"""API v1 dependencies: store, caller identity, services.

Routes import from here only; repositories and services are never built in
endpoint bodies.
"""

from coffeetasks.api.v1.dependencies.auth import (
    get_admin_coffeeshop_id,
    get_authorization_service,
    get_caller_coffeeshop_id,
    get_caller_uid,
    get_current_profile,
    get_profile_service,
    get_token_verifier,
    require_admin,
    require_member,
    require_role,
    require_superadmin,
    security,
)
from coffeetasks.api.v1.dependencies.services import (
    get_account_service,
    get_coffeeshop_service,
    get_fanout_use_case,
    get_task_result_service,
    get_task_service,
    verify_scheduler_secret,
)
from coffeetasks.api.v1.dependencies.store import (
    get_auth_client,
    get_coffeeshop_repo,
    get_firestore_client,
    get_task_repo,
    get_task_result_repo,
    get_user_profile_repo,
)

__all__ = [
    "get_account_service",
    "get_admin_coffeeshop_id",
    "get_auth_client",
    "get_authorization_service",
    "get_caller_coffeeshop_id",
    "get_caller_uid",
    "get_coffeeshop_repo",
    "get_coffeeshop_service",
    "get_current_profile",
    "get_fanout_use_case",
    "get_firestore_client",
    "get_profile_service",
    "get_task_repo",
    "get_task_result_repo",
    "get_task_result_service",
    "get_task_service",
    "get_token_verifier",
    "get_user_profile_repo",
    "require_admin",
    "require_member",
    "require_role",
    "require_superadmin",
    "security",
    "verify_scheduler_secret",
]
