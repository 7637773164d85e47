"""경로 편집 도메인 이벤트 정의.

편집 화면(usecase 레이어)이 경로를 변경할 때 발생하는 이벤트를 정의한다.
infra/presentation 레이어에서 이벤트를 구독하여 부가 로직을 처리한다.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from npc_path_tool.domain.enums import TangentSide
from npc_path_tool.domain.value_objects.vector import Vector3


@dataclass(frozen=True)
class DomainEvent:
    """도메인 이벤트 기본 클래스.

    Args:
        timestamp: 이벤트 발생 시각 (UTC).
    """

    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))


@dataclass(frozen=True)
class ControlPointMovedEvent(DomainEvent):
    """제어점 위치 이동 이벤트.

    Args:
        path_id: 경로 식별자.
        index: 제어점 인덱스.
        previous_position: 이전 위치.
        new_position: 새 위치.
    """

    path_id: str = ''
    index: int = 0
    previous_position: Vector3 = field(default_factory=Vector3.zero)
    new_position: Vector3 = field(default_factory=Vector3.zero)


@dataclass(frozen=True)
class TangentMovedEvent(DomainEvent):
    """탄젠트 핸들 이동 이벤트.

    Args:
        path_id: 경로 식별자.
        index: 제어점 인덱스.
        side: 탄젠트 방향.
        new_offset: 새 탄젠트 오프셋.
    """

    path_id: str = ''
    index: int = 0
    side: TangentSide = TangentSide.FRONT
    new_offset: Vector3 = field(default_factory=Vector3.zero)


@dataclass(frozen=True)
class ControlPointInsertedEvent(DomainEvent):
    """제어점 삽입 이벤트.

    Args:
        path_id: 경로 식별자.
        index: 삽입된 인덱스.
        position: 새 제어점 위치.
    """

    path_id: str = ''
    index: int = 0
    position: Vector3 = field(default_factory=Vector3.zero)


@dataclass(frozen=True)
class ControlPointRemovedEvent(DomainEvent):
    """제어점 삭제 이벤트.

    Args:
        path_id: 경로 식별자.
        index: 삭제된 인덱스.
    """

    path_id: str = ''
    index: int = 0


@dataclass(frozen=True)
class PointRemovalRejectedEvent(DomainEvent):
    """최소 제어점 수 제약으로 삭제가 거부된 이벤트.

    Args:
        path_id: 경로 식별자.
        index: 삭제 요청된 인덱스.
        reason: 사용자에게 보여줄 거부 사유.
    """

    path_id: str = ''
    index: int = 0
    reason: str = ''


@dataclass(frozen=True)
class LoopChangedEvent(DomainEvent):
    """경로 닫힘(loop) 상태 변경 이벤트.

    Args:
        path_id: 경로 식별자.
        loop: 새 loop 상태.
    """

    path_id: str = ''
    loop: bool = False
