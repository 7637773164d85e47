"""설정 포트 인터페이스.

편집기 설정의 로딩을 추상화한다.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from npc_path_tool.domain.entities.path import MIN_CONTROL_POINTS


@dataclass(frozen=True)
class EditorConfig:
    """편집 화면 설정.

    Args:
        position_handle_size: 위치 핸들 크기.
        tangent_handle_size: 탄젠트 핸들 크기.
        snap: 핸들 이동 스냅 간격 (렌더러에 전달만 한다).
        insert_offset: 새 제어점을 기존 점에서 X축으로 띄우는 거리.
            None이면 position_handle_size를 사용한다.
        min_points: 삭제 후에도 유지해야 하는 최소 제어점 수.
        samples_per_segment: 폴리라인 생성 시 구간당 샘플 수.
    """

    position_handle_size: float = 0.6
    tangent_handle_size: float = 0.4
    snap: float = 0.5
    insert_offset: float | None = None
    min_points: int = MIN_CONTROL_POINTS
    samples_per_segment: int = 16

    def __post_init__(self) -> None:
        if self.min_points < MIN_CONTROL_POINTS:
            raise ValueError(
                f"min_points는 {MIN_CONTROL_POINTS} 이상이어야 합니다: "
                f"{self.min_points}"
            )

    @property
    def effective_insert_offset(self) -> float:
        if self.insert_offset is None:
            return self.position_handle_size
        return self.insert_offset


@dataclass(frozen=True)
class FrameOptions:
    """상호작용 프레임마다 편집 화면에 전달되는 옵션.

    Args:
        close_loop: 경로를 닫을지 여부.
        top_down: 표시 좌표를 XZ 평면에 투영할지 여부.
    """

    close_loop: bool = False
    top_down: bool = False


@dataclass(frozen=True)
class AppConfig:
    """애플리케이션 전체 설정.

    Args:
        editor: 편집 화면 설정.
        frame: 초기 프레임 옵션.
    """

    editor: EditorConfig = field(default_factory=EditorConfig)
    frame: FrameOptions = field(default_factory=FrameOptions)


class ConfigPort(ABC):
    """설정 로더 인터페이스."""

    @abstractmethod
    def load(self) -> AppConfig:
        """설정을 로드한다.

        Returns:
            로드된 AppConfig.
        """
