from __future__ import annotations

import logging

from phone_authorization.application.dto.permissions import (
    AuthorizationLinkOutput,
    CheckActionPermissionInput,
    CheckActionPermissionOutput,
)
from phone_authorization.application.ports.authorization_port import AuthorizationPort
from phone_authorization.application.ports.permission_rule_port import PermissionRulePort
from phone_authorization.domain.exceptions import (
    AuthorizationHandlerUnavailableError,
    UnknownAuthorizationHandlerError,
)
from phone_authorization.domain.services.authorization_gate import build_authorization_link, check_permission
from phone_authorization.domain.services.authorization_handlers import AuthorizationHandlerRegistry

from .authorization_common import handler_form_path, utcnow


logger = logging.getLogger(__name__)


class CheckActionPermissionUseCase:
    def __init__(
        self,
        *,
        authorization_port: AuthorizationPort,
        permission_rule_port: PermissionRulePort,
        handler_registry: AuthorizationHandlerRegistry,
    ):
        self._authorization_port = authorization_port
        self._permission_rule_port = permission_rule_port
        self._handler_registry = handler_registry

    def execute(self, command: CheckActionPermissionInput) -> CheckActionPermissionOutput:
        rule = self._permission_rule_port.get_permission_rule(
            component_id=command.component_id,
            action=command.action,
        )
        if rule is None or not rule.required_handlers:
            return CheckActionPermissionOutput(allowed=True, redirect_url=command.redirect_url, authorizations=[])

        records = self._authorization_port.list_authorizations_for_user(user_id=command.user_id)
        result = check_permission(rule=rule, records=records, now=utcnow())
        if result.allowed:
            return CheckActionPermissionOutput(allowed=True, redirect_url=command.redirect_url, authorizations=[])

        logger.info(
            "action_denied user_id=%s component_id=%s action=%s missing=%s",
            command.user_id,
            command.component_id,
            command.action,
            ",".join(result.missing_handlers),
        )

        links: list[AuthorizationLinkOutput] = []
        for handler_name in result.missing_handlers:
            try:
                handler = self._handler_registry.get_available(handler_name)
            except (UnknownAuthorizationHandlerError, AuthorizationHandlerUnavailableError) as exc:
                # The action stays denied; there is just no form to link to.
                logger.warning(
                    "unlinkable_handler component_id=%s action=%s handler=%s error=%s",
                    command.component_id,
                    command.action,
                    handler_name,
                    exc,
                )
                continue
            links.append(
                AuthorizationLinkOutput(
                    handler_name=handler.name.value,
                    display_name=handler.display_name,
                    link_text=handler.form.modal_link_text,
                    href=build_authorization_link(
                        handler_form_path(handler.name.value),
                        command.redirect_url,
                    ),
                )
            )

        return CheckActionPermissionOutput(
            allowed=False,
            redirect_url=command.redirect_url,
            authorizations=links,
        )
