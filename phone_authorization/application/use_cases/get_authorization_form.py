from __future__ import annotations

from phone_authorization.application.dto.authorizations import (
    AuthorizationFormOutput,
    FormFieldOutput,
    GetAuthorizationFormInput,
)
from phone_authorization.domain.services.authorization_gate import safe_redirect_url
from phone_authorization.domain.services.authorization_handlers import AuthorizationHandlerRegistry


class GetAuthorizationFormUseCase:
    def __init__(self, *, handler_registry: AuthorizationHandlerRegistry):
        self._handler_registry = handler_registry

    def execute(self, command: GetAuthorizationFormInput) -> AuthorizationFormOutput:
        handler = self._handler_registry.get_available(command.handler_name)
        form = handler.form
        return AuthorizationFormOutput(
            handler_name=handler.name.value,
            display_name=handler.display_name,
            title=form.title,
            disclaimer=form.disclaimer,
            fields=[
                FormFieldOutput(
                    name=item.name,
                    label=item.label,
                    input_type=item.input_type,
                    required=item.required,
                )
                for item in form.fields
            ],
            submit_label=form.submit_label,
            redirect_url=safe_redirect_url(command.redirect_url),
        )
