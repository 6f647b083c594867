from __future__ import annotations

from sqlalchemy import UniqueConstraint

from phone_authorization.infrastructure.db.models.authorizations import (
    AuthorizationModel,
    ComponentPermissionModel,
    UserModel,
)


def _unique_columns(model) -> list[tuple[str, ...]]:
    return [
        tuple(column.name for column in constraint.columns)
        for constraint in model.__table__.constraints
        if isinstance(constraint, UniqueConstraint)
    ]


def test_one_authorization_per_user_and_handler():
    assert ("user_id", "name") in _unique_columns(AuthorizationModel)
    assert AuthorizationModel.__table__.fullname == "public.authorizations"
    assert "metadata" in AuthorizationModel.__table__.columns


def test_one_permission_rule_per_component_action():
    assert ("component_id", "action") in _unique_columns(ComponentPermissionModel)


def test_authorizations_reference_users():
    foreign_keys = {fk.target_fullname for fk in AuthorizationModel.__table__.foreign_keys}
    assert foreign_keys == {"public.users.id"}
    assert UserModel.__table__.fullname == "public.users"
