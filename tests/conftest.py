"""
Test Configuration

테스트 공통 fixture 정의 — 설정은 .env 파일 없이 테스트 값으로 대체합니다.
"""

from typing import Annotated

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from src.auth.models import SessionContext
from src.config import Settings, get_settings
from src.dependencies import require_permissions
from src.domain.exceptions import AuthorizationError
from src.main import app, authorization_error_handler


@pytest.fixture
def test_settings():
    """테스트용 Settings"""
    return Settings(
        _env_file=None,
        app_name="Bale Access Test",
        app_version="0.1.0",
        environment="test",
        log_level="DEBUG",
        default_role=None,
        role_permissions={
            "admin": ["*"],
            "staff": ["movement.*", "inventory.products.read"],
            "viewer": ["inventory.*", "dashboard.read"],
            "partners_only": ["partners.read"],
        },
    )


@pytest.fixture
def client(test_settings):
    """설정을 주입한 TestClient (리다이렉트는 따라가지 않음)"""
    app.dependency_overrides[get_settings] = lambda: test_settings
    with TestClient(app, follow_redirects=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def staff_grants():
    """staff 역할의 권한 목록"""
    return ["movement.*", "inventory.products.read"]


@pytest.fixture
def gate_client(test_settings):
    """require_permissions(AND) 게이트만 붙인 테스트용 앱"""
    gate_app = FastAPI()
    gate_app.add_exception_handler(AuthorizationError, authorization_error_handler)

    @gate_app.get("/gated")
    async def gated(
        session: Annotated[
            SessionContext,
            Depends(
                require_permissions("movement.read", "users.read", require_all=True)
            ),
        ],
    ):
        return {"user_id": session.user_id}

    gate_app.dependency_overrides[get_settings] = lambda: test_settings
    with TestClient(gate_app) as test_client:
        yield test_client
