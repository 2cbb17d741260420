"""Application services."""

from coffeetasks.application.services.account_service import AccountService
from coffeetasks.application.services.authorization_service import AuthorizationService
from coffeetasks.application.services.coffeeshop_service import CoffeeshopService
from coffeetasks.application.services.profile_service import ProfileService
from coffeetasks.application.services.task_result_service import TaskResultService
from coffeetasks.application.services.task_service import TaskDefinitionService

__all__ = [
    "AccountService",
    "AuthorizationService",
    "CoffeeshopService",
    "ProfileService",
    "TaskDefinitionService",
    "TaskResultService",
]
