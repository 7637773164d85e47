"""경로 편집 유스케이스.

편집 화면이 사용자 입력으로 계산한 핸들 위치를 받아
Path 변경 연산으로 변환하는 로직을 담당한다.
loop/top-down 같은 옵션은 호스트 객체에서 읽지 않고 매개변수로 전달받는다.
"""

import logging

from npc_path_tool.domain.entities.path import Path
from npc_path_tool.domain.enums import TangentSide
from npc_path_tool.domain.events.path_events import (
    ControlPointInsertedEvent,
    ControlPointMovedEvent,
    ControlPointRemovedEvent,
    LoopChangedEvent,
    PointRemovalRejectedEvent,
    TangentMovedEvent,
)
from npc_path_tool.domain.exceptions import PathNotFoundError
from npc_path_tool.domain.value_objects.vector import Vector3
from npc_path_tool.usecase.ports.config_port import EditorConfig, FrameOptions
from npc_path_tool.usecase.ports.event_publisher import EventPublisher
from npc_path_tool.usecase.ports.path_repository import PathRepository

logger = logging.getLogger(__name__)


class EditPath:
    """경로 편집 유스케이스.

    핸들 입력 → 변경 여부 확인 → Path 변경 → 이벤트 발행.

    Args:
        path_repo: 경로 저장소.
        event_publisher: 이벤트 발행자.
        config: 편집 화면 설정.
    """

    def __init__(
        self,
        path_repo: PathRepository,
        event_publisher: EventPublisher,
        config: EditorConfig,
    ) -> None:
        self._path_repo = path_repo
        self._event_publisher = event_publisher
        self._config = config

    def open_path(self, path_id: str, origin: Vector3) -> Path:
        """호스트 객체의 경로를 가져오거나 없으면 새로 만든다.

        Args:
            path_id: 호스트 객체 식별자.
            origin: 새 경로의 첫 제어점 위치.

        Returns:
            기존 또는 새로 생성된 Path.
        """
        path = self._path_repo.get_path(path_id)
        if path is None:
            path = Path(origin)
            self._path_repo.save_path(path_id, path)
            logger.info("Created path [%s] at %s", path_id, origin)
        return path

    def apply_frame_options(
        self, path_id: str, options: FrameOptions
    ) -> None:
        """프레임 옵션의 loop 설정을 경로에 반영한다."""
        path = self._require_path(path_id)
        if path.loop == options.close_loop:
            return

        path.set_loop(options.close_loop)
        self._event_publisher.publish(
            LoopChangedEvent(path_id=path_id, loop=options.close_loop)
        )

    def move_position_handle(
        self,
        path_id: str,
        index: int,
        new_position: Vector3,
        top_down: bool = False,
    ) -> bool:
        """위치 핸들 이동을 반영한다.

        Args:
            path_id: 경로 식별자.
            index: 제어점 인덱스.
            new_position: 사용자 입력으로 계산된 새 위치.
            top_down: 표시 핸들이 XZ 평면에 투영된 상태인지 여부.
                True이면 투영된 위치와 비교하여 변경 여부를 판단한다.

        Returns:
            위치가 실제로 변경되었으면 True.

        Raises:
            PathNotFoundError: 경로가 등록되어 있지 않을 때.
            PathIndexError: index가 범위를 벗어날 때.
        """
        path = self._require_path(path_id)
        previous = path.get_control_point(index).get_position()
        displayed = previous.flattened() if top_down else previous
        if displayed == new_position:
            return False

        path.move_position_point(index, new_position)
        self._event_publisher.publish(
            ControlPointMovedEvent(
                path_id=path_id,
                index=index,
                previous_position=previous,
                new_position=new_position,
            )
        )
        return True

    def move_tangent_handle(
        self,
        path_id: str,
        index: int,
        side: TangentSide,
        new_handle_position: Vector3,
        top_down: bool = False,
    ) -> bool:
        """탄젠트 핸들 이동을 반영한다.

        back/front 탄젠트를 하나의 흐름으로 처리한다.
        핸들은 절대 위치로 입력받아 제어점 위치 기준 오프셋으로 저장한다.

        Args:
            path_id: 경로 식별자.
            index: 제어점 인덱스.
            side: 탄젠트 방향.
            new_handle_position: 핸들의 새 절대 위치.
            top_down: 표시 핸들이 XZ 평면에 투영된 상태인지 여부.

        Returns:
            핸들이 실제로 이동했으면 True.

        Raises:
            PathNotFoundError: 경로가 등록되어 있지 않을 때.
            PathIndexError: index가 범위를 벗어날 때.
        """
        path = self._require_path(path_id)
        control_point = path.get_control_point(index)

        anchor = control_point.get_position()
        displayed = control_point.get_tangent_point(side)
        if top_down:
            # 투영된 제어점 기준 오프셋이므로 핸들은 제어점 높이를 따라간다
            anchor = anchor.flattened()
            displayed = displayed.flattened()
        if displayed == new_handle_position:
            return False

        offset = new_handle_position - anchor
        path.move_tangent(index, side, offset)
        self._event_publisher.publish(
            TangentMovedEvent(
                path_id=path_id, index=index, side=side, new_offset=offset,
            )
        )
        return True

    def insert_at_handle(self, path_id: str, index: int) -> int:
        """기존 제어점 옆에 새 제어점을 삽입한다.

        새 점은 index 위치에 삽입되고 기존 점은 뒤로 밀린다.

        Returns:
            삽입 후 제어점 수.

        Raises:
            PathNotFoundError: 경로가 등록되어 있지 않을 때.
            PathIndexError: index가 범위를 벗어날 때.
        """
        path = self._require_path(path_id)
        anchor = path.get_control_point(index).get_position()
        position = anchor + Vector3(
            self._config.effective_insert_offset, 0.0, 0.0
        )

        path.insert_point(index, position)
        self._event_publisher.publish(
            ControlPointInsertedEvent(
                path_id=path_id, index=index, position=position,
            )
        )
        logger.debug(
            "Inserted control point %d into [%s] at %s",
            index, path_id, position,
        )
        return path.get_num_of_control_points()

    def remove_point(self, path_id: str, index: int) -> bool:
        """제어점을 삭제한다.

        최소 제어점 수 이하에서는 경로를 변경하지 않고 거부한다.

        Returns:
            삭제되었으면 True, 거부되었으면 False.

        Raises:
            PathNotFoundError: 경로가 등록되어 있지 않을 때.
            PathIndexError: index가 범위를 벗어날 때.
        """
        path = self._require_path(path_id)
        # 최소 개수 검사보다 인덱스 검증이 먼저
        path.get_control_point(index)
        min_points = self._config.min_points
        if path.get_num_of_control_points() <= min_points:
            reason = (
                "Cannot delete any more control points, "
                f"there must be at least {min_points}."
            )
            logger.info("[%s] %s", path_id, reason)
            self._event_publisher.publish(
                PointRemovalRejectedEvent(
                    path_id=path_id, index=index, reason=reason,
                )
            )
            return False

        path.remove_point(index)
        self._event_publisher.publish(
            ControlPointRemovedEvent(path_id=path_id, index=index)
        )
        return True

    def _require_path(self, path_id: str) -> Path:
        path = self._path_repo.get_path(path_id)
        if path is None:
            raise PathNotFoundError(
                f"경로 [{path_id}]가 등록되어 있지 않습니다."
            )
        return path
