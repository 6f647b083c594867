from __future__ import annotations

import logging
from uuid import uuid4

from phone_authorization.application.dto.authorizations import (
    SubmitAuthorizationInput,
    SubmitAuthorizationOutput,
)
from phone_authorization.application.ports.authorization_port import AuthorizationPort
from phone_authorization.domain.exceptions import PhoneNumberValidationError
from phone_authorization.domain.services.authorization_gate import resolve_redirect_target
from phone_authorization.domain.services.authorization_handlers import AuthorizationHandlerRegistry

from .authorization_common import SUCCESS_MESSAGE, build_authorization_output, utcnow


logger = logging.getLogger(__name__)


class SubmitAuthorizationUseCase:
    def __init__(
        self,
        *,
        authorization_port: AuthorizationPort,
        handler_registry: AuthorizationHandlerRegistry,
        default_redirect_path: str,
    ):
        self._authorization_port = authorization_port
        self._handler_registry = handler_registry
        self._default_redirect_path = default_redirect_path

    def execute(self, command: SubmitAuthorizationInput) -> SubmitAuthorizationOutput:
        handler = self._handler_registry.get_available(command.handler_name)

        try:
            verified = handler.verify(command.form_data)
        except PhoneNumberValidationError as exc:
            logger.info(
                "authorization_rejected user_id=%s handler=%s reason=%s",
                command.user_id,
                handler.name.value,
                exc.reason.code,
            )
            raise

        now = utcnow()
        expires_at = now + handler.expires_in if handler.expires_in is not None else None
        # Upsert keyed on (user_id, handler_name); an existing id is kept by the store.
        record = self._authorization_port.upsert_authorization(
            authorization_id=str(uuid4()),
            user_id=command.user_id,
            handler_name=handler.name.value,
            verified_value=verified.value,
            metadata=verified.metadata,
            granted_at=now,
            expires_at=expires_at,
        )
        logger.info(
            "authorization_granted user_id=%s handler=%s authorization_id=%s",
            command.user_id,
            handler.name.value,
            record.id,
        )

        return SubmitAuthorizationOutput(
            authorization=build_authorization_output(record),
            message=SUCCESS_MESSAGE,
            redirect_to=resolve_redirect_target(
                command.redirect_url,
                default_path=self._default_redirect_path,
            ),
        )
