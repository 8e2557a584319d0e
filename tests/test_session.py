"""
세션 컨텍스트 / 설정 테스트
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from src.auth.models import (
    DEFAULT_ROLE_PERMISSIONS,
    SessionContext,
    permissions_for_role,
)
from src.config import Settings


class TestPermissionsForRole:
    def test_default_mapping(self):
        assert permissions_for_role("admin") == ["*"]

    def test_custom_mapping(self):
        assert permissions_for_role("clerk", {"clerk": ["movement.read"]}) == [
            "movement.read"
        ]

    def test_unknown_role_has_no_permissions(self):
        assert permissions_for_role("ghost") == []
        assert permissions_for_role(None) == []

    def test_returns_copy(self):
        perms = permissions_for_role("staff")
        perms.append("companies.update")
        assert "companies.update" not in DEFAULT_ROLE_PERMISSIONS["staff"]


class TestSessionContext:
    def test_for_role(self):
        session = SessionContext.for_role("staff", warehouse_slug="acme")
        assert session.user_id == "staff_session"
        assert session.warehouse_slug == "acme"
        assert session.has_permission("movement.inward.create")
        assert not session.has_permission("users.read")

    def test_any_and_all(self):
        session = SessionContext.for_role("staff")
        assert session.has_any_permission("users.read", "dashboard.read")
        assert not session.has_all_permissions("users.read", "dashboard.read")

    def test_admin_has_everything(self):
        session = SessionContext.for_role("admin", user_id="u-1")
        assert session.user_id == "u-1"
        assert session.has_all_permissions("companies.update", "users.invites.create")

    def test_anonymous_is_fail_closed(self):
        session = SessionContext.anonymous()
        assert session.permissions == []
        assert not session.has_permission("dashboard.read")


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.warehouse_route_prefix == "/warehouse"
        assert settings.restricted_page == "restricted"
        assert settings.role_permissions["admin"] == ["*"]
        assert settings.default_role is None

    def test_log_level_normalized(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None, log_level="verbose")

    def test_invalid_environment(self):
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None, environment="qa")

    @pytest.mark.parametrize("prefix", ["warehouse", "/warehouse/"])
    def test_invalid_prefix(self, prefix):
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None, warehouse_route_prefix=prefix)

    def test_invalid_restricted_page(self):
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None, restricted_page="a/b")

    def test_default_role_must_exist(self):
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None, default_role="ghost")

    def test_debug_rejected_in_production(self):
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None, environment="production", debug=True)

    def test_role_permissions_from_env(self, monkeypatch):
        monkeypatch.setenv("ROLE_PERMISSIONS", '{"clerk": ["movement.*"]}')
        settings = Settings(_env_file=None)
        assert settings.role_permissions == {"clerk": ["movement.*"]}
