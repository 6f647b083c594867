from __future__ import annotations

from typing import Protocol

from phone_authorization.domain.entities.authorization import ActionPermissionRule


class PermissionRulePort(Protocol):
    def get_permission_rule(self, *, component_id: str, action: str) -> ActionPermissionRule | None:
        ...

    def replace_component_permissions(
        self,
        *,
        component_id: str,
        rules: list[ActionPermissionRule],
    ) -> None:
        ...
