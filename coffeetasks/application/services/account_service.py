"""Account service: privileged creation of a login + profile pair."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import EmailStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from coffeetasks.application.dtos.user import AccountCreate, AccountCreationResult
from coffeetasks.domain.enums import Role
from coffeetasks.domain.exceptions import ResourceNotFoundException, ValidationException
from coffeetasks.shared.utils.datetime import utc_now

if TYPE_CHECKING:
    from coffeetasks.application.interfaces.repositories import (
        IAuthProvider,
        ICoffeeshopRepository,
        IUserProfileRepository,
    )
    from coffeetasks.application.services.authorization_service import (
        AuthorizationService,
    )

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6
CREATE_ACCOUNT_ROLE = Role.SUPERADMIN
_EMAIL_ADAPTER = TypeAdapter(EmailStr)


def validate_account_input(data: AccountCreate) -> Role:
    """Check fields before anything is created. Returns the parsed role.

    Raises:
        ValidationException: Missing or invalid field.
    """
    try:
        _EMAIL_ADAPTER.validate_python((data.email or "").strip())
    except PydanticValidationError:
        raise ValidationException("A valid email is required", field="email") from None
    if not data.password or len(data.password) < MIN_PASSWORD_LENGTH:
        raise ValidationException(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters",
            field="password",
        )
    if not data.name or not data.name.strip():
        raise ValidationException("Name is required", field="name")
    try:
        role = Role(str(data.role).strip().lower())
    except ValueError:
        raise ValidationException(
            f"Role must be one of {', '.join(Role.values())}", field="role"
        ) from None
    if role != Role.SUPERADMIN and not data.coffeeshop_id:
        raise ValidationException(
            "coffeeshop_id is required for admin and staff accounts",
            field="coffeeshop_id",
        )
    return role


class AccountService:
    """Creates accounts on behalf of a superadmin caller.

    Order: authorize caller → validate input → create login → write profile.
    Nothing is created when authorization or validation fails; a failed
    profile write deletes the login it just created.
    """

    def __init__(
        self,
        user_repo: "IUserProfileRepository",
        coffeeshop_repo: "ICoffeeshopRepository",
        auth_provider: "IAuthProvider",
        authorization: "AuthorizationService",
    ) -> None:
        self._user_repo = user_repo
        self._coffeeshop_repo = coffeeshop_repo
        self._auth_provider = auth_provider
        self._authorization = authorization

    async def create_account(
        self, caller_uid: str | None, data: AccountCreate
    ) -> AccountCreationResult:
        """Create a login and its profile; return the new uid.

        Raises:
            AuthenticationException: Caller not authenticated.
            AuthorizationException: Caller's stored role is not superadmin.
            ValidationException: Invalid input (incl. short password).
            ResourceNotFoundException: coffeeshop_id does not exist.
            UserAlreadyExistsException: Email already registered.
        """
        await self._authorization.require_role(
            caller_uid, CREATE_ACCOUNT_ROLE, action="create_account"
        )
        role = validate_account_input(data)

        profile: dict[str, Any] = {
            "name": data.name.strip(),
            "role": role.value,
            "login": data.email.strip(),
            "coffeeshop_id": None,
            "created_at": utc_now(),
        }
        if role != Role.SUPERADMIN:
            shop = await self._coffeeshop_repo.get_by_id(data.coffeeshop_id or "")
            if shop is None:
                raise ResourceNotFoundException("coffeeshop", data.coffeeshop_id or "")
            profile["coffeeshop_id"] = shop.id
            if shop.location is not None:
                profile["coffeeshop_location"] = shop.location.to_dict()

        uid = await self._auth_provider.create_login(
            data.email.strip(), data.password, data.name.strip()
        )
        try:
            await self._user_repo.create(uid, profile)
        except Exception:
            logger.exception("Profile write failed for new login %s; deleting login", uid)
            await self._auth_provider.delete_login(uid)
            raise
        logger.info("Created %s account %s", role.value, uid)
        return AccountCreationResult(uid=uid)
