import pytest

from ascii_wireframe.config import RenderConfig


def test_defaults():
    cfg = RenderConfig()
    assert (cfg.width, cfg.height) == (80, 40)
    assert cfg.fov == 90.0
    assert cfg.camera_distance == 3.0
    assert cfg.mark_char == '.'


@pytest.mark.parametrize("kwargs", [
    dict(width=1),
    dict(height=0),
    dict(fov=0),
    dict(fov=180),
    dict(near_clip=-1),
    dict(mesh_size=0),
    dict(frame_delay=-0.1),
    dict(mark_char=''),
    dict(mark_char=' '),
])
def test_invalid_settings_raise(kwargs):
    with pytest.raises(ValueError):
        RenderConfig(**kwargs)


def test_detect_terminal_dumb(monkeypatch):
    monkeypatch.setenv('TERM', 'dumb')
    assert RenderConfig.detect_terminal().use_ansi is False


def test_detect_terminal_xterm_with_overrides(monkeypatch):
    monkeypatch.setenv('TERM', 'xterm-256color')
    cfg = RenderConfig.detect_terminal(width=40, fov=60.0)
    assert cfg.use_ansi is True
    assert cfg.width == 40
    assert cfg.fov == 60.0


def test_explicit_use_ansi_wins(monkeypatch):
    monkeypatch.setenv('TERM', 'xterm')
    assert RenderConfig.detect_terminal(use_ansi=False).use_ansi is False
