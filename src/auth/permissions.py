"""
권한 매칭 로직

점(.) 경로 권한 문자열과 와일드카드(*) 세그먼트 패턴 간의 매칭을 제공합니다.

매칭 규칙:
- "*" → 모든 권한 허용 (admin용)
- "inventory.*" → "inventory.products.read", "inventory.qr_batches.create" 등 매칭
- "inventory.*.read" → "inventory.products.read" 매칭 ("inventory.products.create"는 불일치)
- "movement.*" → "movement" 자체도 매칭 (끝의 * 는 0개 세그먼트 허용)

세그먼트는 순수 문자열 비교이므로 "a..b" 의 빈 세그먼트도 다른 빈 세그먼트와만 일치합니다.
"""

from collections.abc import Iterable
from functools import lru_cache

WILDCARD = "*"
SEGMENT_SEPARATOR = "."


@lru_cache(maxsize=4096)
def matches_wildcard(required: str, pattern: str) -> bool:
    """
    부여된 패턴이 요구 권한을 만족하는지 확인

    정규식 변환 대신 커서 두 개와 마지막 와일드카드 위치를 기억하는
    백트래킹 방식으로 매칭합니다. 불일치가 나오면 가장 최근의 * 가
    요구 세그먼트를 하나 더 삼키도록 확장한 뒤 * 다음부터 다시 비교합니다.

    Args:
        required: 요구되는 권한 (와일드카드 없음)
        pattern: 사용자에게 부여된 권한 패턴 (* 세그먼트 가능)

    Returns:
        True면 매칭됨

    Examples:
        >>> matches_wildcard("inventory.products.read", "inventory.*")
        True
        >>> matches_wildcard("inventory.products.read", "inventory.*.read")
        True
        >>> matches_wildcard("inventory.products.read", "inventory.*.create")
        False
        >>> matches_wildcard("inventory.products.read", "inventory.products")
        False
    """
    required_parts = required.split(SEGMENT_SEPARATOR)
    pattern_parts = pattern.split(SEGMENT_SEPARATOR)

    req_idx = 0
    pat_idx = 0
    last_star_pattern = -1
    last_star_required = -1

    while req_idx < len(required_parts):
        if pat_idx < len(pattern_parts) and pattern_parts[pat_idx] == WILDCARD:
            # * 위치 기록 (아직 요구 세그먼트는 소비하지 않음)
            last_star_pattern = pat_idx
            last_star_required = req_idx
            pat_idx += 1
        elif (
            pat_idx < len(pattern_parts)
            and pattern_parts[pat_idx] == required_parts[req_idx]
        ):
            pat_idx += 1
            req_idx += 1
        elif last_star_pattern >= 0:
            # 백트래킹: 마지막 * 가 세그먼트 하나를 더 삼킴
            last_star_required += 1
            req_idx = last_star_required
            pat_idx = last_star_pattern + 1
        else:
            return False

    # 요구 세그먼트 소진 후 남은 패턴은 * 만 허용
    while pat_idx < len(pattern_parts) and pattern_parts[pat_idx] == WILDCARD:
        pat_idx += 1

    return pat_idx >= len(pattern_parts)


def has_permission(required: str, granted: Iterable[str] | None) -> bool:
    """
    부여된 권한 목록 중 하나라도 요구 권한을 만족하는지 확인

    정확히 일치하는 권한을 먼저 확인하고(가장 흔하고 빠른 경우),
    그 다음 * 를 포함한 패턴만 와일드카드 매칭을 수행합니다.
    목록이 비어 있거나 None이면 항상 False (fail-closed).
    """
    if not granted:
        return False

    patterns = list(granted)
    if required in patterns:
        return True

    return any(
        WILDCARD in pattern and matches_wildcard(required, pattern)
        for pattern in patterns
    )


def has_any_permission(granted: Iterable[str] | None, *required: str) -> bool:
    """요구 권한 중 하나라도 보유하면 True (OR)"""
    patterns = list(granted or [])
    return any(has_permission(perm, patterns) for perm in required)


def has_all_permissions(granted: Iterable[str] | None, *required: str) -> bool:
    """요구 권한을 모두 보유해야 True (AND)"""
    patterns = list(granted or [])
    return all(has_permission(perm, patterns) for perm in required)
