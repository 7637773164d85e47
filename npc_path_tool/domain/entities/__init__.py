"""경로 도메인 엔티티."""

from npc_path_tool.domain.entities.control_point import ControlPoint
from npc_path_tool.domain.entities.path import MIN_CONTROL_POINTS, Path

__all__ = [
    'ControlPoint',
    'MIN_CONTROL_POINTS',
    'Path',
]
