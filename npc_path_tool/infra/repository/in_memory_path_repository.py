"""인메모리 경로 저장소 구현체."""

import threading

from npc_path_tool.domain.entities.path import Path
from npc_path_tool.usecase.ports.path_repository import PathRepository


class InMemoryPathRepository(PathRepository):
    """PathRepository의 인메모리 구현체.

    dict 기반으로 호스트 객체별 경로를 메모리에 저장한다.
    저장소 dict 접근만 Lock으로 보호하며 Path 자체는 보호하지 않는다.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._paths: dict[str, Path] = {}

    def get_path(self, path_id: str) -> Path | None:
        with self._lock:
            return self._paths.get(path_id)

    def save_path(self, path_id: str, path: Path) -> None:
        with self._lock:
            self._paths[path_id] = path

    def delete_path(self, path_id: str) -> None:
        with self._lock:
            self._paths.pop(path_id, None)

    def get_all_path_ids(self) -> list[str]:
        with self._lock:
            return list(self._paths.keys())
