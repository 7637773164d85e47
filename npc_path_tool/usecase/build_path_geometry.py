"""경로 기하 생성 유스케이스.

렌더러가 그릴 베지어 구간, 핸들 선, 폴리라인을 만든다.
top-down 투영은 코어가 아닌 이 레이어에서 호출 매개변수로 처리한다.
"""

from npc_path_tool.domain.entities.path import Path
from npc_path_tool.domain.enums import TangentSide
from npc_path_tool.domain.exceptions import PathNotFoundError
from npc_path_tool.domain.value_objects.bezier import BezierSegment, HandleLine
from npc_path_tool.domain.value_objects.vector import Vector3
from npc_path_tool.usecase.ports.config_port import EditorConfig
from npc_path_tool.usecase.ports.path_repository import PathRepository


class BuildPathGeometry:
    """경로 기하 조회 유스케이스.

    Args:
        path_repo: 경로 저장소.
        config: 편집 화면 설정.
    """

    def __init__(
        self, path_repo: PathRepository, config: EditorConfig
    ) -> None:
        self._path_repo = path_repo
        self._config = config

    def segments(
        self, path_id: str, top_down: bool = False
    ) -> list[BezierSegment]:
        """경로의 모든 베지어 구간을 반환한다.

        Raises:
            PathNotFoundError: 경로가 등록되어 있지 않을 때.
            DegenerateTopologyError: 제어점이 2개 미만일 때.
        """
        path = self._require_path(path_id)
        path.validate()

        result = list(path.iter_segments())
        if top_down:
            result = [segment.flattened() for segment in result]
        return result

    def handle_lines(
        self, path_id: str, top_down: bool = False
    ) -> list[HandleLine]:
        """제어점마다 back, front 순서로 핸들 선을 반환한다."""
        path = self._require_path(path_id)

        lines: list[HandleLine] = []
        for i, point in enumerate(path.points):
            anchor = point.get_position()
            for side in (TangentSide.BACK, TangentSide.FRONT):
                handle = point.get_tangent_point(side)
                if top_down:
                    lines.append(HandleLine(
                        index=i, side=side,
                        anchor=anchor.flattened(), handle=handle.flattened(),
                    ))
                else:
                    lines.append(HandleLine(
                        index=i, side=side, anchor=anchor, handle=handle,
                    ))
        return lines

    def polyline(
        self,
        path_id: str,
        samples_per_segment: int | None = None,
        top_down: bool = False,
    ) -> list[Vector3]:
        """모든 구간을 샘플링하여 하나의 폴리라인으로 잇는다.

        인접 구간이 공유하는 끝점은 한 번만 포함된다.

        Args:
            path_id: 경로 식별자.
            samples_per_segment: 구간당 샘플 수. None이면 설정값 사용.
            top_down: XZ 평면 투영 여부.
        """
        count = samples_per_segment or self._config.samples_per_segment

        points: list[Vector3] = []
        for segment in self.segments(path_id, top_down=top_down):
            samples = segment.sample(count)
            if points:
                samples = samples[1:]
            points.extend(samples)
        return points

    def _require_path(self, path_id: str) -> Path:
        path = self._path_repo.get_path(path_id)
        if path is None:
            raise PathNotFoundError(
                f"경로 [{path_id}]가 등록되어 있지 않습니다."
            )
        return path
