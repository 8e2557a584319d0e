"""
도메인 예외 정의

애플리케이션 전역에서 사용되는 커스텀 예외 클래스를 정의합니다.
"""


class BaleError(Exception):
    """Bale 애플리케이션 기본 예외"""

    def __init__(self, message: str, code: str = "UNKNOWN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


# ============================================
# 입력 검증 관련 예외
# ============================================


class ValidationError(BaleError):
    """입력 검증 실패"""

    def __init__(self, message: str, field: str = ""):
        self.field = field
        super().__init__(message, code="VALIDATION_ERROR")


# ============================================
# 설정 관련 예외
# ============================================


class ConfigurationError(BaleError):
    """설정 오류"""

    def __init__(
        self, message: str, config_key: str = "", code: str = "CONFIGURATION_ERROR"
    ):
        self.config_key = config_key
        super().__init__(message, code=code)


class RouteNotConfiguredError(ConfigurationError):
    """
    라우트 레지스트리에 등록되지 않은 경로

    접근 제어 대상 라우트는 모두 레지스트리에 명시되어야 하므로
    사용자 오류가 아니라 개발/배포 설정 오류입니다.
    """

    def __init__(self, route: str):
        self.route = route
        super().__init__(
            f'Route "{route}" is not defined in route configuration. '
            "All routes must be explicitly defined in ROUTE_PERMISSIONS.",
            config_key="ROUTE_PERMISSIONS",
            code="ROUTE_NOT_CONFIGURED",
        )


# ============================================
# 인가 관련 예외
# ============================================


class AuthorizationError(BaleError):
    """인가 실패 (권한 부족)"""

    def __init__(self, message: str = "Permission denied", permission: str = ""):
        self.permission = permission
        super().__init__(message, code="FORBIDDEN")
