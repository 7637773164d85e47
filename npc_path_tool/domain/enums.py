"""경로 도메인 열거형 정의."""

from enum import StrEnum


class TangentSide(StrEnum):
    """제어점의 탄젠트 핸들 방향."""

    BACK = 'BACK'
    FRONT = 'FRONT'
