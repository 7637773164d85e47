"""베지어 구간 및 핸들 선 값 객체."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from npc_path_tool.domain.enums import TangentSide
from npc_path_tool.domain.value_objects.vector import Vector3


@dataclass(frozen=True)
class BezierSegment:
    """인접한 두 제어점 사이의 3차 베지어 곡선.

    [P0, P1, P2, P3] 배치를 따른다.
    P0/P3는 끝점, P1/P2는 핸들 점이다.

    Args:
        p0: 뒤쪽 제어점의 위치.
        p1: 뒤쪽 제어점의 나가는 핸들 (position + front_tangent).
        p2: 앞쪽 제어점의 들어오는 핸들 (position + back_tangent).
        p3: 앞쪽 제어점의 위치.
    """

    p0: Vector3
    p1: Vector3
    p2: Vector3
    p3: Vector3

    def __iter__(self) -> Iterator[Vector3]:
        yield self.p0
        yield self.p1
        yield self.p2
        yield self.p3

    def __len__(self) -> int:
        return 4

    def __getitem__(self, index: int) -> Vector3:
        return (self.p0, self.p1, self.p2, self.p3)[index]

    def point_at(self, t: float) -> Vector3:
        """번스타인 다항식으로 곡선 위의 점을 계산한다.

        Args:
            t: 곡선 매개변수 (0.0~1.0).

        Returns:
            곡선 위의 점.

        Raises:
            ValueError: t가 [0, 1] 범위를 벗어날 때.
        """
        if not 0.0 <= t <= 1.0:
            raise ValueError(f't는 0과 1 사이여야 합니다: {t}')

        u = 1.0 - t
        return (
            self.p0 * (u * u * u)
            + self.p1 * (3.0 * u * u * t)
            + self.p2 * (3.0 * u * t * t)
            + self.p3 * (t * t * t)
        )

    def sample(self, count: int) -> list[Vector3]:
        """곡선을 균등한 매개변수 간격으로 샘플링한다.

        Args:
            count: 샘플 개수 (2 이상). 첫 점은 p0, 마지막 점은 p3.

        Raises:
            ValueError: count가 2 미만일 때.
        """
        if count < 2:
            raise ValueError(f'샘플 개수는 2 이상이어야 합니다: {count}')

        last = count - 1
        samples = [self.point_at(i / last) for i in range(last)]
        # 부동소수점 오차 없이 끝점을 그대로 사용
        samples.append(self.p3)
        return samples

    def flattened(self) -> BezierSegment:
        """네 점을 모두 XZ 평면에 투영한 구간."""
        return BezierSegment(
            p0=self.p0.flattened(),
            p1=self.p1.flattened(),
            p2=self.p2.flattened(),
            p3=self.p3.flattened(),
        )


@dataclass(frozen=True)
class HandleLine:
    """제어점 위치와 탄젠트 핸들 점을 잇는 선.

    Args:
        index: 제어점 인덱스.
        side: 탄젠트 방향.
        anchor: 제어점 위치.
        handle: 탄젠트 핸들의 절대 위치.
    """

    index: int
    side: TangentSide
    anchor: Vector3
    handle: Vector3
