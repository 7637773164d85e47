"""경로 저장소 포트 인터페이스.

경로를 소유하는 호스트 객체의 역할을 추상화한다.
세션 간 영속화는 구현체의 책임이며 이 포트는 관여하지 않는다.
"""

from abc import ABC, abstractmethod

from npc_path_tool.domain.entities.path import Path


class PathRepository(ABC):
    """호스트 객체별 경로 저장소 인터페이스."""

    @abstractmethod
    def get_path(self, path_id: str) -> Path | None:
        """경로를 조회한다.

        Args:
            path_id: 호스트 객체 식별자.

        Returns:
            저장된 Path 또는 미등록 시 None.
        """

    @abstractmethod
    def save_path(self, path_id: str, path: Path) -> None:
        """경로를 저장한다.

        Args:
            path_id: 호스트 객체 식별자.
            path: 저장할 경로.
        """

    @abstractmethod
    def delete_path(self, path_id: str) -> None:
        """호스트 객체와 함께 경로를 제거한다.

        Args:
            path_id: 호스트 객체 식별자.
        """

    @abstractmethod
    def get_all_path_ids(self) -> list[str]:
        """등록된 모든 경로 ID를 반환한다."""
