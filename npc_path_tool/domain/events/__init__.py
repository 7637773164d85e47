"""경로 편집 도메인 이벤트."""

from npc_path_tool.domain.events.path_events import (
    ControlPointInsertedEvent,
    ControlPointMovedEvent,
    ControlPointRemovedEvent,
    DomainEvent,
    LoopChangedEvent,
    PointRemovalRejectedEvent,
    TangentMovedEvent,
)

__all__ = [
    "ControlPointInsertedEvent",
    "ControlPointMovedEvent",
    "ControlPointRemovedEvent",
    "DomainEvent",
    "LoopChangedEvent",
    "PointRemovalRejectedEvent",
    "TangentMovedEvent",
]
