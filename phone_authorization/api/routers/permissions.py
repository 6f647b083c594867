from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from phone_authorization.api.deps import (
    get_check_action_permission_use_case,
    get_current_user,
    get_update_component_permissions_use_case,
    require_admin,
)
from phone_authorization.api.schemas.permissions import (
    ActionAuthorizationResponse,
    ComponentPermissionsRequest,
    ComponentPermissionsResponse,
)
from phone_authorization.application.dto.permissions import (
    CheckActionPermissionInput,
    HandlerRequirementInput,
    UpdateComponentPermissionsInput,
)
from phone_authorization.application.use_cases.check_action_permission import CheckActionPermissionUseCase
from phone_authorization.application.use_cases.update_component_permissions import (
    UpdateComponentPermissionsUseCase,
)
from phone_authorization.domain.entities.user import User
from phone_authorization.domain.exceptions import (
    AuthorizationHandlerUnavailableError,
    InvalidPermissionRuleError,
    UnknownAuthorizationHandlerError,
)


router = APIRouter()


@router.get(
    "/v1/components/{component_id}/actions/{action}/authorization",
    response_model=ActionAuthorizationResponse,
)
def check_action_authorization(
    component_id: str,
    action: str,
    redirect_url: str,
    current_user: User = Depends(get_current_user),
    use_case: CheckActionPermissionUseCase = Depends(get_check_action_permission_use_case),
):
    output = use_case.execute(
        CheckActionPermissionInput(
            user_id=current_user.id,
            component_id=component_id,
            action=action,
            redirect_url=redirect_url,
        )
    )
    return ActionAuthorizationResponse(
        allowed=output.allowed,
        redirect_url=output.redirect_url,
        authorizations=[
            {
                "handler": link.handler_name,
                "display_name": link.display_name,
                "link_text": link.link_text,
                "href": link.href,
            }
            for link in output.authorizations
        ],
    )


@router.put("/v1/components/{component_id}/permissions", response_model=ComponentPermissionsResponse)
def update_component_permissions(
    component_id: str,
    req: ComponentPermissionsRequest,
    _admin: User = Depends(require_admin),
    use_case: UpdateComponentPermissionsUseCase = Depends(get_update_component_permissions_use_case),
):
    try:
        output = use_case.execute(
            UpdateComponentPermissionsInput(
                component_id=component_id,
                actions={
                    action: [
                        HandlerRequirementInput(handler_name=name, options=config.options)
                        for name, config in permission.authorization_handlers.items()
                    ]
                    for action, permission in req.permissions.items()
                },
            )
        )
    except (
        UnknownAuthorizationHandlerError,
        AuthorizationHandlerUnavailableError,
        InvalidPermissionRuleError,
    ) as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return ComponentPermissionsResponse(
        component_id=output.component_id,
        permissions={
            action: {
                "authorization_handlers": {
                    name: {"options": options}
                    for name, options in handlers.items()
                }
            }
            for action, handlers in output.actions.items()
        },
    )
