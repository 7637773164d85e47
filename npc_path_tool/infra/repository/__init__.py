"""경로 저장소 인프라 (PathRepository 구현)."""

from npc_path_tool.infra.repository.in_memory_path_repository import (
    InMemoryPathRepository,
)

__all__ = ["InMemoryPathRepository"]
