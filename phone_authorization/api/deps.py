from __future__ import annotations

from functools import lru_cache

from fastapi import Depends, Header, HTTPException, Request

from phone_authorization.application.dto.permissions import CheckActionPermissionInput
from phone_authorization.application.use_cases.check_action_permission import CheckActionPermissionUseCase
from phone_authorization.application.use_cases.get_authorization_form import GetAuthorizationFormUseCase
from phone_authorization.application.use_cases.list_authorization_handlers import (
    ListAuthorizationHandlersUseCase,
)
from phone_authorization.application.use_cases.submit_authorization import SubmitAuthorizationUseCase
from phone_authorization.application.use_cases.update_component_permissions import (
    UpdateComponentPermissionsUseCase,
)
from phone_authorization.domain.entities.user import User
from phone_authorization.domain.services.authorization_handlers import (
    AuthorizationHandlerRegistry,
    build_handler_registry,
)
from phone_authorization.infrastructure.db.engine import get_engine
from phone_authorization.infrastructure.db.repositories.authorizations_repository import (
    SqlAuthorizationsRepository,
)
from phone_authorization.infrastructure.security.token_service import JwtTokenService
from phone_authorization.shared.config import get_settings


def _get_db_engine():
    settings = get_settings()
    if not settings.postgres_dsn:
        raise HTTPException(status_code=500, detail="POSTGRES_DSN is required.")
    return get_engine(settings.postgres_dsn)


def _get_authorizations_repository() -> SqlAuthorizationsRepository:
    return SqlAuthorizationsRepository(_get_db_engine())


@lru_cache(maxsize=1)
def _get_token_service() -> JwtTokenService:
    settings = get_settings()
    if not settings.jwt_secret:
        raise HTTPException(status_code=500, detail="JWT_SECRET is required.")
    return JwtTokenService(jwt_secret=settings.jwt_secret)


@lru_cache(maxsize=1)
def get_handler_registry() -> AuthorizationHandlerRegistry:
    settings = get_settings()
    return build_handler_registry(
        available=settings.available_authorizations,
        contact_disclaimer_text=settings.contact_disclaimer_text,
        phone_number_length=settings.phone_number_length,
        phone_allowed_prefixes=settings.phone_allowed_prefixes,
        expires_in=settings.authorization_expires_in,
    )


def get_list_authorization_handlers_use_case() -> ListAuthorizationHandlersUseCase:
    return ListAuthorizationHandlersUseCase(
        authorization_port=_get_authorizations_repository(),
        handler_registry=get_handler_registry(),
    )


def get_authorization_form_use_case() -> GetAuthorizationFormUseCase:
    return GetAuthorizationFormUseCase(handler_registry=get_handler_registry())


def get_submit_authorization_use_case() -> SubmitAuthorizationUseCase:
    settings = get_settings()
    return SubmitAuthorizationUseCase(
        authorization_port=_get_authorizations_repository(),
        handler_registry=get_handler_registry(),
        default_redirect_path=settings.default_redirect_path,
    )


def get_check_action_permission_use_case() -> CheckActionPermissionUseCase:
    repository = _get_authorizations_repository()
    return CheckActionPermissionUseCase(
        authorization_port=repository,
        permission_rule_port=repository,
        handler_registry=get_handler_registry(),
    )


def get_update_component_permissions_use_case() -> UpdateComponentPermissionsUseCase:
    return UpdateComponentPermissionsUseCase(
        permission_rule_port=_get_authorizations_repository(),
        handler_registry=get_handler_registry(),
    )


def get_current_user(
    authorization: str = Header(...),
) -> User:
    if not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Invalid authorization header.")
    token = authorization.replace("Bearer ", "", 1).strip()
    if not token:
        raise HTTPException(status_code=401, detail="Missing access token.")

    token_service = _get_token_service()
    user_port = _get_authorizations_repository()

    try:
        payload = token_service.decode_access_token(token=token)
    except ValueError as exc:
        raise HTTPException(status_code=401, detail=str(exc)) from exc

    user = user_port.get_user_by_id(user_id=payload.user_id)
    if user is None:
        raise HTTPException(status_code=401, detail="User not found.")
    if not user.is_active:
        raise HTTPException(status_code=403, detail="User is inactive.")
    return user


def require_admin(user: User = Depends(get_current_user)) -> User:
    if user.id not in get_settings().admin_user_ids:
        raise HTTPException(status_code=403, detail="Administrator access is required.")
    return user


def require_action_authorization(action: str):
    def _dependency(
        component_id: str,
        request: Request,
        user: User = Depends(get_current_user),
        use_case: CheckActionPermissionUseCase = Depends(get_check_action_permission_use_case),
    ) -> User:
        redirect_url = request.url.path
        if request.url.query:
            redirect_url = f"{redirect_url}?{request.url.query}"
        output = use_case.execute(
            CheckActionPermissionInput(
                user_id=user.id,
                component_id=component_id,
                action=action,
                redirect_url=redirect_url,
            )
        )
        if not output.allowed:
            raise HTTPException(
                status_code=403,
                detail={
                    "message": "You are not authorized to perform this action.",
                    "redirect_url": output.redirect_url,
                    "authorizations": [
                        {
                            "handler": link.handler_name,
                            "display_name": link.display_name,
                            "link_text": link.link_text,
                            "href": link.href,
                        }
                        for link in output.authorizations
                    ],
                },
            )
        return user

    return _dependency
