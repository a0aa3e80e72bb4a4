import json

from grapple2d.__main__ import main


def test_headless_run_prints_final_state(capsys):
    assert main(['--frames', '10', '--width', '960', '--height', '640']) == 0
    out = capsys.readouterr().out
    assert 'frame 10' in out
    assert 'state free' in out


def test_config_file_is_used(tmp_path, capsys):
    path = tmp_path / 'config.json'
    path.write_text(json.dumps({'physics': {'gravity': 0.5}, 'viewport': {'width': 800, 'height': 600}}))
    assert main(['--config', str(path), '--frames', '1', '--log-level', 'WARNING']) == 0
    assert 'frame 1' in capsys.readouterr().out


def test_save_snapshot(tmp_path):
    path = tmp_path / 'start.png'
    assert main(['--save', str(path)]) == 0
    assert path.exists()
