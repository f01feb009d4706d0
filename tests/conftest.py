"""Pytest configuration and shared fixtures for svg-analyze tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

import svg_analyze.config as config_module

SVG_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" {attrs}>
{body}
</svg>"""


def make_svg(body: str, viewbox: str | None = "0 0 100 100", **attrs: str) -> str:
    """Build SVG markup with the given root attributes and body."""
    parts = []
    if viewbox is not None:
        parts.append(f'viewBox="{viewbox}"')
    parts.extend(f'{k}="{v}"' for k, v in attrs.items())
    return SVG_TEMPLATE.format(attrs=" ".join(parts), body=body)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep user/environment config files out of the tests."""
    monkeypatch.delenv(config_module.CONFIG_ENV_VAR, raising=False)
    monkeypatch.setattr(
        config_module, "DEFAULT_CONFIG_PATH", tmp_path / "no-such-config.yaml"
    )


@pytest.fixture
def write_svg(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing SVG markup to ``tmp_path/<name>``."""

    def _write(name: str, body: str, viewbox: str | None = "0 0 100 100", **attrs: str) -> Path:
        path = tmp_path / name
        path.write_text(make_svg(body, viewbox, **attrs), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def centered_svg_content() -> str:
    """SVG whose content has 5% padding on every side."""
    return make_svg('  <rect x="5" y="5" width="90" height="90" fill="blue"/>')


@pytest.fixture
def padded_svg_content() -> str:
    """SVG with a small centered square: excessive padding only."""
    return make_svg('  <rect x="45" y="45" width="10" height="10"/>')


@pytest.fixture
def left_shifted_svg_content() -> str:
    """SVG whose content fills only the left half."""
    return make_svg('  <rect x="0" y="0" width="50" height="100"/>')


@pytest.fixture
def svg_folder(tmp_path: Path) -> Path:
    """Folder with two valid SVGs, one with a broken viewBox, and noise."""
    folder = tmp_path / "icons"
    folder.mkdir()
    (folder / "a_centered.svg").write_text(
        make_svg('  <circle cx="50" cy="50" r="45"/>'), encoding="utf-8"
    )
    (folder / "b_broken.svg").write_text(
        make_svg('  <circle cx="50" cy="50" r="45"/>', viewbox="0 0 100"), encoding="utf-8"
    )
    (folder / "c_shifted.SVG").write_text(
        make_svg('  <rect x="0" y="0" width="50" height="100"/>'), encoding="utf-8"
    )
    (folder / "notes.txt").write_text("not an svg", encoding="utf-8")
    (folder / "nested.svg").mkdir()
    return folder
