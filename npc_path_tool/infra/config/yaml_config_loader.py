"""YAML 파일 기반 설정 로더 구현체."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from npc_path_tool.domain.entities.path import MIN_CONTROL_POINTS
from npc_path_tool.usecase.ports.config_port import (
    AppConfig,
    ConfigPort,
    EditorConfig,
    FrameOptions,
)

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG_PATH = (
    Path(__file__).resolve().parent.parent.parent
    / "config"
    / "default_params.yaml"
)


class YamlConfigLoader(ConfigPort):
    """ConfigPort의 YAML 파일 구현체.

    YAML 파일에서 설정을 읽어 AppConfig로 변환한다.
    파일이 없으면 기본값을 사용한다.

    Args:
        config_path: YAML 설정 파일 경로. None이면 기본 경로 사용.
    """

    def __init__(self, config_path: Path | None = None) -> None:
        self._path = config_path or _DEFAULT_CONFIG_PATH

    def load(self) -> AppConfig:
        """YAML 파일에서 설정을 로드한다."""
        raw = self._read_yaml()
        params = self._extract_params(raw)

        editor_data = params.get("editor") or {}
        frame_data = params.get("frame") or {}
        defaults = EditorConfig()

        insert_offset = editor_data.get("insert_offset")
        if insert_offset is not None:
            insert_offset = float(insert_offset)

        min_points = int(editor_data.get("min_points", defaults.min_points))
        if min_points < MIN_CONTROL_POINTS:
            logger.warning(
                "min_points=%d is below %d, using %d",
                min_points, MIN_CONTROL_POINTS, MIN_CONTROL_POINTS,
            )
            min_points = MIN_CONTROL_POINTS

        config = AppConfig(
            editor=EditorConfig(
                position_handle_size=float(editor_data.get(
                    "position_handle_size", defaults.position_handle_size
                )),
                tangent_handle_size=float(editor_data.get(
                    "tangent_handle_size", defaults.tangent_handle_size
                )),
                snap=float(editor_data.get("snap", defaults.snap)),
                insert_offset=insert_offset,
                min_points=min_points,
                samples_per_segment=int(editor_data.get(
                    "samples_per_segment", defaults.samples_per_segment
                )),
            ),
            frame=FrameOptions(
                close_loop=bool(frame_data.get("close_loop", False)),
                top_down=bool(frame_data.get("top_down", False)),
            ),
        )

        logger.info("Config loaded from %s", self._path)
        return config

    def _read_yaml(self) -> dict[str, Any]:
        """YAML 파일을 dict로 읽는다."""
        if not self._path.exists():
            logger.warning(
                "Config file not found: %s, using defaults", self._path
            )
            return {}

        with open(self._path, encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            logger.warning("Invalid YAML format, using defaults")
            return {}

        return data

    def _extract_params(self, raw: dict[str, Any]) -> dict[str, Any]:
        """YAML 구조에서 npc_path_tool 섹션을 추출한다."""
        node_data = raw.get("npc_path_tool", raw)
        if isinstance(node_data, dict):
            return node_data
        return {}
