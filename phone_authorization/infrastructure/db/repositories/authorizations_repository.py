from __future__ import annotations

import json
import logging
from datetime import datetime
from uuid import uuid4

from sqlalchemy import text

from phone_authorization.application.ports.authorization_port import AuthorizationPort
from phone_authorization.application.ports.permission_rule_port import PermissionRulePort
from phone_authorization.application.ports.user_port import UserPort
from phone_authorization.domain.entities.authorization import ActionPermissionRule
from phone_authorization.infrastructure.db.mappers.authorizations_mapper import (
    map_row_to_authorization,
    map_row_to_permission_rule,
    map_row_to_user,
    permission_rule_to_handlers_payload,
)


logger = logging.getLogger(__name__)


class SqlAuthorizationsRepository(AuthorizationPort, PermissionRulePort, UserPort):
    def __init__(self, engine):
        self._engine = engine

    def get_user_by_id(self, *, user_id: str):
        sql = """
            SELECT id, name, email, is_active, created_at
            FROM public.users
            WHERE id = :user_id
            LIMIT 1
        """
        with self._engine.connect() as conn:
            row = conn.execute(text(sql), {"user_id": user_id}).mappings().first()
        if row is None:
            return None
        return map_row_to_user(row)

    def list_authorizations_for_user(self, *, user_id: str):
        sql = """
            SELECT id, user_id, name, unique_id, metadata, granted_at, expires_at
            FROM public.authorizations
            WHERE user_id = :user_id
            ORDER BY granted_at DESC
        """
        with self._engine.connect() as conn:
            rows = conn.execute(text(sql), {"user_id": user_id}).mappings().all()
        return [map_row_to_authorization(row) for row in rows]

    def upsert_authorization(
        self,
        *,
        authorization_id: str,
        user_id: str,
        handler_name: str,
        verified_value: str,
        metadata: dict[str, str],
        granted_at: datetime,
        expires_at: datetime | None,
    ):
        sql = """
            INSERT INTO public.authorizations (
                id, user_id, name, unique_id, metadata, granted_at, expires_at
            ) VALUES (
                :id, :user_id, :name, :unique_id, CAST(:metadata AS jsonb), :granted_at, :expires_at
            )
            ON CONFLICT (user_id, name) DO UPDATE
            SET unique_id = EXCLUDED.unique_id,
                metadata = EXCLUDED.metadata,
                granted_at = EXCLUDED.granted_at,
                expires_at = EXCLUDED.expires_at
            RETURNING id, user_id, name, unique_id, metadata, granted_at, expires_at
        """
        params = {
            "id": authorization_id,
            "user_id": user_id,
            "name": handler_name,
            "unique_id": verified_value,
            "metadata": json.dumps(metadata),
            "granted_at": granted_at,
            "expires_at": expires_at,
        }
        with self._engine.begin() as conn:
            row = conn.execute(text(sql), params).mappings().one()
        return map_row_to_authorization(row)

    def get_permission_rule(self, *, component_id: str, action: str):
        sql = """
            SELECT component_id, action, authorization_handlers
            FROM public.component_permissions
            WHERE component_id = :component_id
              AND action = :action
            LIMIT 1
        """
        with self._engine.connect() as conn:
            row = conn.execute(
                text(sql),
                {
                    "component_id": component_id,
                    "action": action,
                },
            ).mappings().first()
        if row is None:
            return None
        return map_row_to_permission_rule(row)

    def replace_component_permissions(
        self,
        *,
        component_id: str,
        rules: list[ActionPermissionRule],
    ) -> None:
        delete_sql = """
            DELETE FROM public.component_permissions
            WHERE component_id = :component_id
        """
        insert_sql = """
            INSERT INTO public.component_permissions (
                id, component_id, action, authorization_handlers, updated_at
            ) VALUES (
                :id, :component_id, :action, CAST(:authorization_handlers AS jsonb), now()
            )
        """
        with self._engine.begin() as conn:
            conn.execute(text(delete_sql), {"component_id": component_id})
            for rule in rules:
                conn.execute(
                    text(insert_sql),
                    {
                        "id": str(uuid4()),
                        "component_id": component_id,
                        "action": rule.action,
                        "authorization_handlers": json.dumps(permission_rule_to_handlers_payload(rule)),
                    },
                )
        logger.debug(
            "component_permissions_replaced component_id=%s rules=%s",
            component_id,
            len(rules),
        )
