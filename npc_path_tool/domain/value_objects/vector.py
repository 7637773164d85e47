"""3차원 벡터 값 객체."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector3:
    """월드 좌표계의 3차원 점 또는 벡터.

    위치와 탄젠트 오프셋을 모두 표현한다.

    Args:
        x: X 성분.
        y: Y 성분 (위쪽 축).
        z: Z 성분.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def zero(cls) -> Vector3:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def one(cls) -> Vector3:
        return cls(1.0, 1.0, 1.0)

    @classmethod
    def right(cls) -> Vector3:
        """경로의 기본 축 방향 단위 벡터 (+X)."""
        return cls(1.0, 0.0, 0.0)

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3:
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def flattened(self) -> Vector3:
        """Top-down 표시용으로 XZ 평면에 투영한다 (y=0)."""
        return Vector3(self.x, 0.0, self.z)
