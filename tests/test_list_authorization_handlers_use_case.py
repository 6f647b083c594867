from __future__ import annotations

from datetime import datetime, timezone

from phone_authorization.application.dto.authorizations import GetAuthorizationFormInput
from phone_authorization.application.use_cases.get_authorization_form import GetAuthorizationFormUseCase
from phone_authorization.application.use_cases.list_authorization_handlers import (
    ListAuthorizationHandlersUseCase,
)


def test_listing_shows_phone_handler_not_yet_granted(store, handler_registry):
    use_case = ListAuthorizationHandlersUseCase(authorization_port=store, handler_registry=handler_registry)

    output = use_case.execute(user_id="user-1")

    assert [item.display_name for item in output.handlers] == ["Phone number recovery"]
    assert output.handlers[0].form_path == "/v1/authorizations/new?handler=phone_authorization_handler"
    assert output.handlers[0].granted is False
    assert output.granted == []


def test_listing_marks_granted_handler(store, handler_registry):
    store.upsert_authorization(
        authorization_id="auth-1",
        user_id="user-1",
        handler_name="phone_authorization_handler",
        verified_value="0666666666",
        metadata={"phone_number": "0666666666"},
        granted_at=datetime.now(timezone.utc),
        expires_at=None,
    )
    use_case = ListAuthorizationHandlersUseCase(authorization_port=store, handler_registry=handler_registry)

    output = use_case.execute(user_id="user-1")

    assert output.handlers[0].granted is True
    assert [item.id for item in output.granted] == ["auth-1"]


def test_form_echoes_only_local_redirect_url(handler_registry):
    use_case = GetAuthorizationFormUseCase(handler_registry=handler_registry)

    local = use_case.execute(
        GetAuthorizationFormInput(handler_name="phone_authorization_handler", redirect_url="/proposals/new")
    )
    external = use_case.execute(
        GetAuthorizationFormInput(handler_name="phone_authorization_handler", redirect_url="https://x.example")
    )

    assert local.redirect_url == "/proposals/new"
    assert local.title == "Fill in your phone number"
    assert [field.name for field in local.fields] == ["phone_number"]
    assert external.redirect_url is None
