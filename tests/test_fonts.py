"""Tests for rendering/fonts.py - font registration with fallback."""

import pytest

from rendering import fonts
from rendering.fonts import register_font, resolve_font_family, FALLBACK_FAMILY


@pytest.fixture(autouse=True)
def clear_registry(monkeypatch):
    monkeypatch.setattr(fonts, '_registered', {})


def test_missing_file_falls_back(tmp_path, capsys):
    family = register_font(str(tmp_path / 'simhei.ttf'), 'SimHei')
    assert family == FALLBACK_FAMILY
    assert 'Warning' in capsys.readouterr().out


def test_corrupt_file_falls_back(tmp_path, capsys):
    font = tmp_path / 'broken.ttf'
    font.write_bytes(b'definitely not a font')
    assert register_font(str(font)) == FALLBACK_FAMILY
    assert 'Warning' in capsys.readouterr().out


def test_failure_is_cached(tmp_path, capsys):
    path = str(tmp_path / 'simhei.ttf')
    register_font(path)
    capsys.readouterr()
    assert register_font(path) == FALLBACK_FAMILY
    assert capsys.readouterr().out == ''


def test_resolve_without_file_keeps_family():
    assert resolve_font_family('SimHei') == 'SimHei'


def test_resolve_with_missing_file(tmp_path):
    assert resolve_font_family('SimHei', str(tmp_path / 'x.ttf')) == FALLBACK_FAMILY
