from pathlib import Path
from unittest.mock import MagicMock

import pytest
from PIL import Image

from snapocr.config.settings import Settings
from snapocr.models.tools import ResolvedTool, Toolset


def make_tool(name, companions=()):
    return ResolvedTool(
        name,
        f"/usr/bin/{name}",
        {c: f"/usr/bin/{c}" for c in companions},
    )


def write_png(path, size=(40, 20)):
    Image.new("RGB", size, color=(255, 255, 255)).save(path, format="PNG")
    return Path(path)


@pytest.fixture
def tool():
    return make_tool


@pytest.fixture
def settings(tmp_path):
    return Settings(config_dir=tmp_path / "config")


@pytest.fixture
def toolset():
    return Toolset(
        ocr=make_tool("tesseract"),
        screenshot=make_tool("maim"),
        clipboard=make_tool("xclip"),
        enhance=make_tool("magick"),
        notify=make_tool("notify-send"),
    )


@pytest.fixture
def notifier():
    mock = MagicMock()
    mock.tool = None
    return mock
