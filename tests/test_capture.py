import subprocess
from unittest.mock import patch

import pytest

from conftest import write_png
from snapocr.core.capture import build_capture_command, capture_region
from snapocr.core.errors import CaptureCancelledError, CommandFailedError


@pytest.mark.parametrize("name, expected", [
    ("maim", ["-s", "-u", "-f", "png", "-m", "1"]),
    ("scrot", ["-s", "-o", "-q", "100"]),
    ("gnome-screenshot", ["-a", "-f"]),
    ("spectacle", ["-b", "-n", "-r", "-o"]),
    ("flameshot", ["gui", "-p"]),
    ("screencapture", ["-i", "-x", "-t", "png"]),
])
def test_build_capture_command(tool, tmp_path, name, expected):
    image = tmp_path / "shot.png"

    args = build_capture_command(tool(name), image)

    assert args == [f"/usr/bin/{name}"] + expected + [str(image)]


def test_build_capture_command_grim_uses_geometry(tool, tmp_path):
    image = tmp_path / "shot.png"

    args = build_capture_command(tool("grim", ["slurp"]), image, "10,20 300x200")

    assert args == ["/usr/bin/grim", "-g", "10,20 300x200", "-t", "png", str(image)]


def test_build_capture_command_rejects_unknown_tool(tool, tmp_path):
    with pytest.raises(ValueError):
        build_capture_command(tool("xwd"), tmp_path / "shot.png")


def test_capture_region_returns_image_written_by_tool(tool, tmp_path):
    image = tmp_path / "shot.png"

    def fake_run(args, **kwargs):
        write_png(args[-1])
        return subprocess.CompletedProcess(args, 0)

    with patch("snapocr.core.capture.run_command", side_effect=fake_run) as run:
        result = capture_region(tool("maim"), image)

    assert result == image
    run.assert_called_once()


def test_capture_region_grim_asks_slurp_first(tool, tmp_path):
    image = tmp_path / "shot.png"
    calls = []

    def fake_run(args, **kwargs):
        calls.append(args)
        if args[0] == "/usr/bin/slurp":
            return subprocess.CompletedProcess(args, 0, stdout=b"5,6 70x80\n")
        write_png(args[-1])
        return subprocess.CompletedProcess(args, 0)

    with patch("snapocr.core.capture.run_command", side_effect=fake_run):
        capture_region(tool("grim", ["slurp"]), image)

    assert calls[0] == ["/usr/bin/slurp"]
    assert calls[1][:3] == ["/usr/bin/grim", "-g", "5,6 70x80"]


def test_capture_region_slurp_abort_is_cancellation(tool, tmp_path):
    def fake_run(args, **kwargs):
        raise CommandFailedError(args, 1, "selection cancelled")

    with patch("snapocr.core.capture.run_command", side_effect=fake_run):
        with pytest.raises(CaptureCancelledError):
            capture_region(tool("grim", ["slurp"]), tmp_path / "shot.png")


def test_capture_region_without_output_is_cancellation(tool, tmp_path):
    with patch("snapocr.core.capture.run_command"):
        with pytest.raises(CaptureCancelledError):
            capture_region(tool("scrot"), tmp_path / "shot.png")


def test_capture_region_empty_output_is_cancellation(tool, tmp_path):
    image = tmp_path / "shot.png"

    def fake_run(args, **kwargs):
        image.write_bytes(b"")

    with patch("snapocr.core.capture.run_command", side_effect=fake_run):
        with pytest.raises(CaptureCancelledError):
            capture_region(tool("gnome-screenshot"), image)


def test_capture_region_rejects_unreadable_image(tool, tmp_path):
    image = tmp_path / "shot.png"

    def fake_run(args, **kwargs):
        image.write_bytes(b"definitely not a png")

    with patch("snapocr.core.capture.run_command", side_effect=fake_run):
        with pytest.raises(CommandFailedError) as excinfo:
            capture_region(tool("maim"), image)

    assert not isinstance(excinfo.value, CaptureCancelledError)
    assert "not a readable image" in str(excinfo.value)


def test_capture_region_propagates_tool_failure(tool, tmp_path):
    def fake_run(args, **kwargs):
        raise CommandFailedError(args, 2, "cannot open display")

    with patch("snapocr.core.capture.run_command", side_effect=fake_run):
        with pytest.raises(CommandFailedError) as excinfo:
            capture_region(tool("maim"), tmp_path / "shot.png")

    assert excinfo.value.returncode == 2
    assert "cannot open display" in str(excinfo.value)
