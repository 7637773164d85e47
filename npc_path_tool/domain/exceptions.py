"""NPC Path Tool 도메인 예외 정의."""


class DomainError(Exception):
    """도메인 계층 기본 예외."""


class PathIndexError(DomainError, IndexError):
    """제어점 또는 구간 인덱스가 유효 범위를 벗어날 때."""


class DegenerateTopologyError(DomainError):
    """경로의 제어점이 2개 미만이 되어 경로로 정의할 수 없을 때."""


class PathNotFoundError(DomainError):
    """등록되지 않은 경로 접근 시."""
