"""경로 제어점 엔티티."""

from dataclasses import dataclass, field

from npc_path_tool.domain.enums import TangentSide
from npc_path_tool.domain.value_objects.vector import Vector3


@dataclass
class ControlPoint:
    """위치 하나와 탄젠트 핸들 두 개로 이루어진 경로 제어점.

    탄젠트는 절대 좌표가 아니라 position 기준 오프셋으로 저장하므로
    위치를 옮기면 핸들도 함께 이동한다.
    back/front 탄젠트는 서로 독립적이다 (대칭 제약 없음).

    Args:
        position: 제어점의 월드 좌표.
        back_tangent: 들어오는 핸들의 오프셋.
        front_tangent: 나가는 핸들의 오프셋.
    """

    position: Vector3
    back_tangent: Vector3 = field(default_factory=lambda: -Vector3.one())
    front_tangent: Vector3 = field(default_factory=Vector3.one)

    def get_position(self) -> Vector3:
        return self.position

    def set_position(self, new_position: Vector3) -> None:
        self.position = new_position

    def get_back_tangent(self) -> Vector3:
        return self.back_tangent

    def set_back_tangent(self, new_back_tangent: Vector3) -> None:
        self.back_tangent = new_back_tangent

    def get_front_tangent(self) -> Vector3:
        return self.front_tangent

    def set_front_tangent(self, new_front_tangent: Vector3) -> None:
        self.front_tangent = new_front_tangent

    def get_tangent(self, side: TangentSide) -> Vector3:
        """지정한 방향의 탄젠트 오프셋을 반환한다."""
        if side is TangentSide.BACK:
            return self.back_tangent
        return self.front_tangent

    def set_tangent(self, side: TangentSide, offset: Vector3) -> None:
        """지정한 방향의 탄젠트 오프셋을 설정한다.

        Args:
            side: 탄젠트 방향.
            offset: position 기준 오프셋 (절대 좌표 아님).
        """
        if side is TangentSide.BACK:
            self.back_tangent = offset
        else:
            self.front_tangent = offset

    def get_tangent_point(self, side: TangentSide) -> Vector3:
        """탄젠트 핸들의 절대 위치 (position + 오프셋)."""
        return self.position + self.get_tangent(side)
