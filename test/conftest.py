"""공통 테스트 fixture."""

import pytest

from npc_path_tool.domain.entities.path import Path
from npc_path_tool.domain.value_objects.vector import Vector3
from npc_path_tool.infra.repository import InMemoryPathRepository
from npc_path_tool.usecase.ports.config_port import (
    AppConfig,
    EditorConfig,
    FrameOptions,
)


@pytest.fixture
def origin():
    return Vector3(0.0, 0.0, 0.0)


@pytest.fixture
def sample_path(origin):
    """(0,0,0), (1,0,0), (5,0,0) 세 제어점을 가진 열린 경로."""
    path = Path(origin)
    path.insert_point(2, Vector3(5.0, 0.0, 0.0))
    return path


@pytest.fixture
def looped_path(sample_path):
    sample_path.set_loop(True)
    return sample_path


@pytest.fixture
def sample_editor_config():
    return EditorConfig()


@pytest.fixture
def sample_config(sample_editor_config):
    return AppConfig(
        editor=sample_editor_config,
        frame=FrameOptions(close_loop=False, top_down=False),
    )


@pytest.fixture
def path_repo(sample_path):
    repo = InMemoryPathRepository()
    repo.save_path("npc-001", sample_path)
    return repo
