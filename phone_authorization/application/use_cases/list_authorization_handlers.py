from __future__ import annotations

from phone_authorization.application.dto.authorizations import (
    AuthorizationHandlerItemOutput,
    ListAuthorizationHandlersOutput,
)
from phone_authorization.application.ports.authorization_port import AuthorizationPort
from phone_authorization.domain.entities.authorization import is_authorization_expired
from phone_authorization.domain.services.authorization_handlers import AuthorizationHandlerRegistry

from .authorization_common import build_authorization_output, handler_form_path, utcnow


class ListAuthorizationHandlersUseCase:
    def __init__(
        self,
        *,
        authorization_port: AuthorizationPort,
        handler_registry: AuthorizationHandlerRegistry,
    ):
        self._authorization_port = authorization_port
        self._handler_registry = handler_registry

    def execute(self, *, user_id: str) -> ListAuthorizationHandlersOutput:
        now = utcnow()
        records = self._authorization_port.list_authorizations_for_user(user_id=user_id)
        valid = [record for record in records if not is_authorization_expired(record, now=now)]
        granted_names = {record.handler_name for record in valid}

        handlers = [
            AuthorizationHandlerItemOutput(
                name=handler.name.value,
                display_name=handler.display_name,
                form_path=handler_form_path(handler.name.value),
                granted=handler.name.value in granted_names,
            )
            for handler in self._handler_registry.available()
        ]
        return ListAuthorizationHandlersOutput(
            handlers=handlers,
            granted=[build_authorization_output(record) for record in valid],
        )
