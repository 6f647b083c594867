from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from phone_authorization.api.deps import (
    get_authorization_form_use_case,
    get_current_user,
    get_list_authorization_handlers_use_case,
    get_submit_authorization_use_case,
)
from phone_authorization.api.schemas.authorizations import (
    AuthorizationFormResponse,
    AuthorizationsListResponse,
    SubmitAuthorizationRequest,
    SubmitAuthorizationResponse,
)
from phone_authorization.application.dto.authorizations import (
    AuthorizationOutput,
    GetAuthorizationFormInput,
    SubmitAuthorizationInput,
)
from phone_authorization.application.use_cases.get_authorization_form import GetAuthorizationFormUseCase
from phone_authorization.application.use_cases.list_authorization_handlers import (
    ListAuthorizationHandlersUseCase,
)
from phone_authorization.application.use_cases.submit_authorization import SubmitAuthorizationUseCase
from phone_authorization.domain.entities.user import User
from phone_authorization.domain.exceptions import (
    AuthorizationHandlerUnavailableError,
    PhoneNumberValidationError,
    UnknownAuthorizationHandlerError,
)


router = APIRouter()

FORM_ERROR_MESSAGE = "There was a problem creating the authorization."


def _authorization_payload(output: AuthorizationOutput) -> dict:
    return {
        "id": output.id,
        "handler": output.handler_name,
        "verified_value": output.verified_value,
        "granted_at": output.granted_at,
        "expires_at": output.expires_at,
    }


@router.get("/v1/authorizations", response_model=AuthorizationsListResponse)
def list_authorizations(
    current_user: User = Depends(get_current_user),
    use_case: ListAuthorizationHandlersUseCase = Depends(get_list_authorization_handlers_use_case),
):
    output = use_case.execute(user_id=current_user.id)
    return AuthorizationsListResponse(
        handlers=[
            {
                "name": item.name,
                "display_name": item.display_name,
                "form_path": item.form_path,
                "granted": item.granted,
            }
            for item in output.handlers
        ],
        authorizations=[_authorization_payload(item) for item in output.granted],
    )


@router.get("/v1/authorizations/new", response_model=AuthorizationFormResponse)
def get_authorization_form(
    handler: str,
    redirect_url: str | None = None,
    _current_user: User = Depends(get_current_user),
    use_case: GetAuthorizationFormUseCase = Depends(get_authorization_form_use_case),
):
    try:
        output = use_case.execute(GetAuthorizationFormInput(handler_name=handler, redirect_url=redirect_url))
    except (UnknownAuthorizationHandlerError, AuthorizationHandlerUnavailableError) as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    return AuthorizationFormResponse(
        handler=output.handler_name,
        display_name=output.display_name,
        title=output.title,
        disclaimer=output.disclaimer,
        fields=[
            {
                "name": item.name,
                "label": item.label,
                "input_type": item.input_type,
                "required": item.required,
            }
            for item in output.fields
        ],
        submit_label=output.submit_label,
        redirect_url=output.redirect_url,
    )


@router.post("/v1/authorizations", response_model=SubmitAuthorizationResponse)
def submit_authorization(
    req: SubmitAuthorizationRequest,
    current_user: User = Depends(get_current_user),
    use_case: SubmitAuthorizationUseCase = Depends(get_submit_authorization_use_case),
):
    try:
        output = use_case.execute(
            SubmitAuthorizationInput(
                user_id=current_user.id,
                handler_name=req.handler,
                form_data={"phone_number": req.phone_number},
                redirect_url=req.redirect_url,
            )
        )
    except (UnknownAuthorizationHandlerError, AuthorizationHandlerUnavailableError) as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except PhoneNumberValidationError as exc:
        raise HTTPException(
            status_code=422,
            detail={
                "message": FORM_ERROR_MESSAGE,
                "errors": {exc.field: [exc.reason.message]},
            },
        ) from exc

    return SubmitAuthorizationResponse(
        message=output.message,
        redirect_to=output.redirect_to,
        authorization=_authorization_payload(output.authorization),
    )
