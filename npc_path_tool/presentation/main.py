r"""NPC Path Tool 진입점.

편집 스크립트를 경로에 재생하고 베지어 구간을 출력한다.

실행: path_editor -c config.yaml -s edits.yaml --top-down

편집 스크립트 형식 (YAML 리스트):
    - {op: move, index: 1, position: [2.0, 0.0, 1.0]}
    - {op: tangent, index: 0, side: front, position: [0.5, 0.0, 1.0]}
    - {op: insert, index: 1}
    - {op: remove, index: 2}
    - {op: loop, value: true}
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys
from typing import Any

import yaml

from npc_path_tool.domain.enums import TangentSide
from npc_path_tool.domain.exceptions import DomainError
from npc_path_tool.domain.value_objects.vector import Vector3
from npc_path_tool.infra.config.yaml_config_loader import YamlConfigLoader
from npc_path_tool.infra.event import InMemoryEventPublisher
from npc_path_tool.infra.repository import InMemoryPathRepository
from npc_path_tool.usecase.build_path_geometry import BuildPathGeometry
from npc_path_tool.usecase.edit_path import EditPath
from npc_path_tool.usecase.ports.config_port import FrameOptions

logger = logging.getLogger(__name__)

PATH_ID = 'cli'


def _vector(value: Any) -> Vector3:
    x, y, z = (float(v) for v in value)
    return Vector3(x, y, z)


def _format(vector: Vector3) -> str:
    return f'({vector.x:.3f}, {vector.y:.3f}, {vector.z:.3f})'


def load_edit_script(script_path: str) -> list[dict[str, Any]]:
    """편집 스크립트 YAML을 읽는다.

    Args:
        script_path: 스크립트 파일 경로.

    Returns:
        편집 연산 목록. 파일 내용이 리스트가 아니면 빈 리스트.
    """
    with open(script_path, encoding='utf-8') as f:
        data = yaml.safe_load(f)

    if not isinstance(data, list):
        logger.warning('Edit script is not a list: %s', script_path)
        return []
    return data


def apply_edit(
    editor: EditPath,
    path_id: str,
    edit: dict[str, Any],
    frame: FrameOptions,
) -> FrameOptions:
    """편집 연산 하나를 적용하고 갱신된 프레임 옵션을 반환한다.

    Raises:
        ValueError: 항목이 mapping이 아니거나 값이 잘못되었을 때.
        KeyError: 연산에 필요한 키가 없을 때.
    """
    if not isinstance(edit, dict):
        raise ValueError(f'편집 항목은 mapping이어야 합니다: {edit!r}')

    op = edit.get('op')
    if op == 'move':
        editor.move_position_handle(
            path_id, int(edit['index']), _vector(edit['position']),
            top_down=frame.top_down,
        )
    elif op == 'tangent':
        editor.move_tangent_handle(
            path_id,
            int(edit['index']),
            TangentSide(str(edit.get('side', 'front')).upper()),
            _vector(edit['position']),
            top_down=frame.top_down,
        )
    elif op == 'insert':
        editor.insert_at_handle(path_id, int(edit['index']))
    elif op == 'remove':
        editor.remove_point(path_id, int(edit['index']))
    elif op == 'loop':
        frame = FrameOptions(
            close_loop=bool(edit.get('value', True)),
            top_down=frame.top_down,
        )
        editor.apply_frame_options(path_id, frame)
    else:
        logger.warning('Unknown edit op ignored: %s', op)
    return frame


def main(argv: list[str] | None = None) -> int:
    """편집 세션을 재생한다.

    Args:
        argv: 커맨드 라인 인자 (프로그램 이름 제외).

    Returns:
        종료 코드.
    """
    parser = argparse.ArgumentParser(
        prog='path_editor',
        description='Replay edits on a cubic Bezier path',
    )
    parser.add_argument(
        '-c', '--config_file', type=str, default=None,
        help='Path to the config yaml file',
    )
    parser.add_argument(
        '-s', '--script', type=str, default=None,
        help='Path to a yaml edit script',
    )
    parser.add_argument(
        '--origin', type=float, nargs=3, default=[0.0, 0.0, 0.0],
        metavar=('X', 'Y', 'Z'),
        help='Position of the first control point',
    )
    parser.add_argument(
        '--loop', action='store_true',
        help='Close the path',
    )
    parser.add_argument(
        '--top-down', action='store_true',
        help='Project output points onto the XZ plane',
    )
    parser.add_argument(
        '--samples', type=int, default=0,
        help='Also print a polyline with N samples per segment',
    )
    parser.add_argument(
        '-v', '--verbose', action='store_true',
        help='Enable debug logging',
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='[%(name)s] %(levelname)s: %(message)s',
    )

    config_path = Path(args.config_file) if args.config_file else None
    config = YamlConfigLoader(config_path).load()

    path_repo = InMemoryPathRepository()
    event_publisher = InMemoryEventPublisher()
    editor = EditPath(path_repo, event_publisher, config.editor)
    geometry = BuildPathGeometry(path_repo, config.editor)

    frame = FrameOptions(
        close_loop=args.loop or config.frame.close_loop,
        top_down=args.top_down or config.frame.top_down,
    )

    try:
        editor.open_path(PATH_ID, _vector(args.origin))
        editor.apply_frame_options(PATH_ID, frame)

        if args.script:
            for edit in load_edit_script(args.script):
                frame = apply_edit(editor, PATH_ID, edit, frame)

        for i, segment in enumerate(
            geometry.segments(PATH_ID, top_down=frame.top_down)
        ):
            points = ' '.join(_format(p) for p in segment)
            print(f'segment {i}: {points}')

        if args.samples > 0:
            polyline = geometry.polyline(
                PATH_ID, args.samples, top_down=frame.top_down
            )
            for point in polyline:
                print(_format(point))
    except DomainError as e:
        logger.error('Edit failed: %s', e)
        return 1
    except (KeyError, TypeError, ValueError) as e:
        logger.error('Invalid edit script entry: %r', e)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
