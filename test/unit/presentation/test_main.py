"""path_editor CLI 단위 테스트."""

from unittest.mock import patch

import pytest
import yaml

from npc_path_tool.presentation.main import load_edit_script, main
from npc_path_tool.usecase.edit_path import EditPath


@pytest.fixture
def script_yaml(tmp_path):
    edits = [
        {'op': 'move', 'index': 1, 'position': [2.0, 0.0, 0.0]},
        {'op': 'insert', 'index': 1},
        {'op': 'tangent', 'index': 0, 'side': 'front',
         'position': [0.5, 0.0, 0.0]},
        {'op': 'loop', 'value': True},
    ]
    path = tmp_path / 'edits.yaml'
    with open(path, 'w') as f:
        yaml.dump(edits, f)
    return path


class TestLoadEditScript:
    def test_list(self, script_yaml):
        edits = load_edit_script(str(script_yaml))
        assert len(edits) == 4
        assert edits[0]['op'] == 'move'

    def test_not_a_list(self, tmp_path):
        path = tmp_path / 'bad.yaml'
        path.write_text('op: move\n')
        assert load_edit_script(str(path)) == []


class TestMain:
    def test_default_path(self, capsys):
        assert main([]) == 0
        out = capsys.readouterr().out.splitlines()
        assert len(out) == 1
        assert out[0].startswith('segment 0: (0.000, 0.000, 0.000)')
        assert out[0].endswith('(1.000, 0.000, 0.000)')

    def test_loop_flag(self, capsys):
        assert main(['--loop']) == 0
        out = capsys.readouterr().out.splitlines()
        assert len(out) == 2

    def test_replay_script(self, script_yaml, capsys):
        assert main(['-s', str(script_yaml)]) == 0
        out = capsys.readouterr().out.splitlines()
        # 3개 제어점 + loop = 3개 구간
        assert len(out) == 3
        assert '(0.500, 0.000, 0.000)' in out[0]

    def test_top_down(self, capsys):
        assert main(['--origin', '0', '5', '0', '--top-down']) == 0
        out = capsys.readouterr().out
        assert '5.000' not in out

    def test_samples(self, capsys):
        assert main(['--samples', '4']) == 0
        out = capsys.readouterr().out.splitlines()
        assert len(out) == 1 + 4

    def test_bad_index_returns_error(self, tmp_path, capsys):
        path = tmp_path / 'bad_edits.yaml'
        with open(path, 'w') as f:
            yaml.dump([{'op': 'remove', 'index': 0},
                       {'op': 'move', 'index': 7,
                        'position': [0, 0, 0]}], f)
        assert main(['-s', str(path)]) == 1

    def test_top_down_passed_to_move(self, tmp_path):
        path = tmp_path / 'top_down.yaml'
        with open(path, 'w') as f:
            yaml.dump([{'op': 'move', 'index': 0,
                        'position': [0.0, 0.0, 0.0]}], f)
        original = EditPath.move_position_handle
        results = []

        def record(*args, **kwargs):
            results.append(original(*args, **kwargs))
            return results[-1]

        with patch.object(
            EditPath, 'move_position_handle', autospec=True,
            side_effect=record,
        ) as move:
            assert main(['--origin', '0', '5', '0', '--top-down',
                         '-s', str(path)]) == 0

        assert move.call_args.kwargs['top_down'] is True
        # 투영된 위치 그대로 입력하면 이동하지 않는다
        assert results == [False]

    @pytest.mark.parametrize('entry', [
        {'op': 'move', 'position': [0.0, 0.0, 0.0]},
        {'op': 'move', 'index': 0},
        {'op': 'tangent', 'index': 0, 'side': 'up',
         'position': [0.0, 0.0, 0.0]},
        {'op': 'move', 'index': 0, 'position': [1.0, 2.0]},
        'move',
        ['remove', 0],
    ])
    def test_malformed_entry_returns_error(self, tmp_path, caplog, entry):
        path = tmp_path / 'malformed.yaml'
        with open(path, 'w') as f:
            yaml.dump([entry], f)

        assert main(['-s', str(path)]) == 1
        assert 'Invalid edit script entry' in caplog.text
