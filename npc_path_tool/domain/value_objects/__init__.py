"""경로 편집 값 객체 (불변, 동등성 기반 비교)."""

from npc_path_tool.domain.value_objects.bezier import (
    BezierSegment,
    HandleLine,
)
from npc_path_tool.domain.value_objects.vector import Vector3

__all__ = [
    'BezierSegment',
    'HandleLine',
    'Vector3',
]
