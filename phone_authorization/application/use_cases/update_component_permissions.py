from __future__ import annotations

import logging

from phone_authorization.application.dto.permissions import (
    ComponentPermissionsOutput,
    UpdateComponentPermissionsInput,
)
from phone_authorization.application.ports.permission_rule_port import PermissionRulePort
from phone_authorization.domain.entities.authorization import ActionPermissionRule, HandlerRequirement
from phone_authorization.domain.exceptions import InvalidPermissionRuleError
from phone_authorization.domain.services.authorization_handlers import AuthorizationHandlerRegistry


logger = logging.getLogger(__name__)


class UpdateComponentPermissionsUseCase:
    def __init__(
        self,
        *,
        permission_rule_port: PermissionRulePort,
        handler_registry: AuthorizationHandlerRegistry,
    ):
        self._permission_rule_port = permission_rule_port
        self._handler_registry = handler_registry

    def execute(self, command: UpdateComponentPermissionsInput) -> ComponentPermissionsOutput:
        component_id = command.component_id.strip()
        if not component_id:
            raise InvalidPermissionRuleError("component_id is required.")

        rules: list[ActionPermissionRule] = []
        for action, requirements in command.actions.items():
            action_name = action.strip()
            if not action_name:
                raise InvalidPermissionRuleError("action name is required.")
            seen: set[str] = set()
            required: list[HandlerRequirement] = []
            for requirement in requirements:
                handler_name = self._handler_registry.get_available(requirement.handler_name).name.value
                if handler_name in seen:
                    raise InvalidPermissionRuleError(
                        f"Handler '{handler_name}' is declared twice for action '{action_name}'."
                    )
                seen.add(handler_name)
                required.append(
                    HandlerRequirement(
                        handler_name=handler_name,
                        options={str(k): str(v) for k, v in requirement.options.items()},
                    )
                )
            rules.append(
                ActionPermissionRule(
                    component_id=component_id,
                    action=action_name,
                    required_handlers=required,
                )
            )

        self._permission_rule_port.replace_component_permissions(component_id=component_id, rules=rules)
        logger.info(
            "component_permissions_updated component_id=%s actions=%s",
            component_id,
            ",".join(rule.action for rule in rules),
        )

        return ComponentPermissionsOutput(
            component_id=component_id,
            actions={
                rule.action: {req.handler_name: dict(req.options) for req in rule.required_handlers}
                for rule in rules
            },
        )
