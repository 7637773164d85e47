"""베지어 경로 엔티티."""

from __future__ import annotations

from collections.abc import Iterator

from npc_path_tool.domain.entities.control_point import ControlPoint
from npc_path_tool.domain.enums import TangentSide
from npc_path_tool.domain.exceptions import (
    DegenerateTopologyError,
    PathIndexError,
)
from npc_path_tool.domain.value_objects.bezier import BezierSegment
from npc_path_tool.domain.value_objects.vector import Vector3

MIN_CONTROL_POINTS = 2


class Path:
    """제어점 시퀀스로 정의되는 3차 베지어 곡선 체인.

    제어점 순서가 곧 경로 순회 순서이다.
    loop=True이면 마지막 제어점이 첫 제어점과 연결된다.
    구간 기하는 캐시하지 않고 조회 시마다 현재 상태로 다시 계산한다.

    제어점 최소 개수(2개)는 여기서 강제하지 않는다.
    삭제 가능 여부는 편집 화면(EditPath)이 판단한다.

    Args:
        initial_position: 첫 제어점 위치. 두 번째 제어점은
            기본 축(+X)으로 한 단위 떨어진 곳에 생성된다.
    """

    def __init__(self, initial_position: Vector3) -> None:
        self.points: list[ControlPoint] = [
            ControlPoint(initial_position),
            ControlPoint(initial_position + Vector3.right()),
        ]
        self._loop = False

    @property
    def loop(self) -> bool:
        return self._loop

    def set_loop(self, new_loop: bool) -> None:
        self._loop = new_loop

    def get_num_of_control_points(self) -> int:
        return len(self.points)

    def get_num_of_segments(self) -> int:
        if self._loop:
            return len(self.points)
        return len(self.points) - 1

    def get_control_point(self, index: int) -> ControlPoint:
        self._check_point_index(index)
        return self.points[index]

    # -- 제어점 편집 --

    def move_position_point(self, index: int, position: Vector3) -> None:
        """제어점 위치를 옮긴다. 탄젠트 오프셋은 유지된다."""
        self._check_point_index(index)
        self.points[index].set_position(position)

    def move_tangent(
        self, index: int, side: TangentSide, offset: Vector3
    ) -> None:
        """탄젠트 오프셋을 설정한다.

        Args:
            index: 제어점 인덱스.
            side: 탄젠트 방향.
            offset: 원하는 핸들 절대 위치 - 제어점 위치.

        Raises:
            PathIndexError: index가 [0, count) 범위를 벗어날 때.
        """
        self._check_point_index(index)
        self.points[index].set_tangent(side, offset)

    def move_back_tangent(self, index: int, offset: Vector3) -> None:
        self.move_tangent(index, TangentSide.BACK, offset)

    def move_front_tangent(self, index: int, offset: Vector3) -> None:
        self.move_tangent(index, TangentSide.FRONT, offset)

    def insert_point(self, index: int, position: Vector3) -> None:
        """기본 탄젠트를 가진 새 제어점을 index 위치에 삽입한다.

        Raises:
            PathIndexError: index가 [0, count] 범위를 벗어날 때.
        """
        if not 0 <= index <= len(self.points):
            raise PathIndexError(
                f'삽입 인덱스가 범위를 벗어났습니다: {index} '
                f'(허용: 0~{len(self.points)})'
            )
        self.points.insert(index, ControlPoint(position))

    def remove_point(self, index: int) -> None:
        """index 위치의 제어점을 제거한다.

        Raises:
            PathIndexError: index가 [0, count) 범위를 벗어날 때.
        """
        self._check_point_index(index)
        del self.points[index]

    # -- 구간 기하 --

    def get_bezier_points_in_segment(self, index: int) -> BezierSegment:
        """구간의 베지어 제어값 [P0, P1, P2, P3]를 계산한다.

        Args:
            index: 구간 인덱스.

        Returns:
            뒤쪽 제어점 points[index]에서 앞쪽 제어점까지의 구간.
            loop 상태의 마지막 구간은 points[0]으로 이어진다.

        Raises:
            PathIndexError: index가 [0, segment_count) 범위를 벗어날 때.
        """
        num_segments = self.get_num_of_segments()
        if not 0 <= index < num_segments:
            raise PathIndexError(
                f'구간 인덱스가 범위를 벗어났습니다: {index} '
                f'(구간 수: {num_segments})'
            )

        back = self.points[index]
        if self._loop and index == len(self.points) - 1:
            front = self.points[0]
        else:
            front = self.points[index + 1]

        return BezierSegment(
            p0=back.position,
            p1=back.position + back.front_tangent,
            p2=front.position + front.back_tangent,
            p3=front.position,
        )

    def iter_segments(self) -> Iterator[BezierSegment]:
        for i in range(self.get_num_of_segments()):
            yield self.get_bezier_points_in_segment(i)

    def validate(self) -> None:
        """경로 구조의 유효성을 검증한다.

        Raises:
            DegenerateTopologyError: 제어점이 2개 미만일 때.
        """
        if len(self.points) < MIN_CONTROL_POINTS:
            raise DegenerateTopologyError(
                f'경로에는 최소 {MIN_CONTROL_POINTS}개의 제어점이 '
                f'필요합니다: {len(self.points)}'
            )

    def _check_point_index(self, index: int) -> None:
        if not 0 <= index < len(self.points):
            raise PathIndexError(
                f'제어점 인덱스가 범위를 벗어났습니다: {index} '
                f'(제어점 수: {len(self.points)})'
            )
