"""유스케이스 포트 인터페이스 (ABC).

infra 레이어에서 구현해야 하는 추상 인터페이스를 정의한다.
"""

from npc_path_tool.usecase.ports.config_port import (
    AppConfig,
    ConfigPort,
    EditorConfig,
    FrameOptions,
)
from npc_path_tool.usecase.ports.event_publisher import EventPublisher
from npc_path_tool.usecase.ports.path_repository import PathRepository

__all__ = [
    "AppConfig",
    "ConfigPort",
    "EditorConfig",
    "EventPublisher",
    "FrameOptions",
    "PathRepository",
]
