"""
권한 매칭 테스트

와일드카드 매처의 경계 조건과 권한 목록 평가를 확인합니다.
"""

from itertools import permutations

import pytest

from src.auth.permissions import (
    has_all_permissions,
    has_any_permission,
    has_permission,
    matches_wildcard,
)


class TestMatchesWildcard:
    """세그먼트 와일드카드 매처"""

    @pytest.mark.parametrize(
        "required,pattern,expected",
        [
            ("a.b.c", "a.b.c", True),
            ("a.b.c", "a.*", True),
            ("a.b.c", "a.*.c", True),
            ("a.b.c", "a.*.d", False),
            ("a", "*", True),
            ("a.b", "*.b", True),
            ("a.b", "a.*", True),
            ("a.b.c", "a.b", False),
            ("a.b", "a.b.c", False),
            ("x.y", "a.*", False),
            ("a", "a.*", True),
            ("a", "a.*.*", True),
            ("a.b.c.d", "a.*.d", True),
            ("a.b.c.d", "*.c.*", True),
            ("a.b.c", "*.*", True),
            ("a.b.c", "b.*", False),
            ("a..b", "a..b", True),
            ("a..b", "a.*.b", True),
            ("a.b", "a..b", False),
        ],
    )
    def test_boundary_cases(self, required, pattern, expected):
        assert matches_wildcard(required, pattern) is expected

    @pytest.mark.parametrize(
        "permission",
        [
            "dashboard.read",
            "inventory.products.read",
            "movement.outward.create",
            "a",
        ],
    )
    def test_reflexive(self, permission):
        """와일드카드 없는 권한은 자기 자신과 일치"""
        assert matches_wildcard(permission, permission)

    def test_trailing_wildcard_matches_zero_segments(self):
        """끝의 * 는 남은 세그먼트가 없어도 일치"""
        assert matches_wildcard("movement", "movement.*")

    def test_mid_wildcard_backtracks_over_repeated_segment(self):
        """* 뒤의 세그먼트가 반복될 때 백트래킹으로 마지막 위치에 맞춤"""
        assert matches_wildcard("a.c.b.c", "a.*.c")
        assert not matches_wildcard("a.c.b.d", "a.*.c")

    def test_result_stable_across_calls(self):
        """메모이제이션이 결과에 영향을 주지 않음"""
        first = matches_wildcard("inventory.products.read", "inventory.*.read")
        second = matches_wildcard("inventory.products.read", "inventory.*.read")
        assert first is second is True


class TestHasPermission:
    """권한 목록 평가"""

    def test_exact_match_fast_path(self):
        assert has_permission("inventory.products.read", ["inventory.products.read"])

    def test_wildcard_grant(self):
        assert has_permission("movement.outward.create", ["movement.*"])

    def test_admin_wildcard(self):
        assert has_permission("companies.update", ["*"])

    def test_empty_grants_fail_closed(self):
        assert not has_permission("dashboard.read", [])
        assert not has_permission("dashboard.read", None)

    def test_non_wildcard_patterns_are_not_prefix_matched(self):
        assert not has_permission("inventory.products.read", ["inventory", "inventory.products"])

    def test_duplicates_are_harmless(self):
        assert has_permission("partners.read", ["partners.read", "partners.read"])
        assert not has_permission("partners.create", ["partners.read", "partners.read"])

    def test_accepts_generator(self):
        grants = (g for g in ["reports.*"])
        assert has_permission("reports.read", grants)

    @pytest.mark.parametrize(
        "required",
        ["movement.outward.create", "companies.update", "inventory.products.read"],
    )
    def test_order_independent(self, required):
        grants = ["movement.*", "inventory.products.read", "partners.read"]
        expected = has_permission(required, grants)
        for ordering in permutations(grants):
            assert has_permission(required, list(ordering)) is expected

    def test_staff_scenario(self, staff_grants):
        """staff: 출고 생성은 허용, 회사 설정 수정은 거부"""
        assert has_permission("movement.outward.create", staff_grants)
        assert not has_permission("companies.update", staff_grants)


class TestMultiplePermissions:
    """OR / AND 평가"""

    def test_any(self, staff_grants):
        assert has_any_permission(staff_grants, "companies.update", "movement.read")
        assert not has_any_permission(staff_grants, "companies.update", "users.read")

    def test_all(self, staff_grants):
        assert has_all_permissions(
            staff_grants, "movement.inward.create", "inventory.products.read"
        )
        assert not has_all_permissions(
            staff_grants, "movement.inward.create", "inventory.products.update"
        )

    def test_no_required_permissions(self, staff_grants):
        assert not has_any_permission(staff_grants)
        assert has_all_permissions(staff_grants)

    def test_none_grants(self):
        assert not has_any_permission(None, "dashboard.read")
        assert not has_all_permissions(None, "dashboard.read")
