import subprocess
from unittest.mock import patch

import pytest
from pytesseract import TesseractError, TesseractNotFoundError

from snapocr.core.clipboard import build_clipboard_command, copy_file
from snapocr.core.enhance import build_enhance_command, enhance_image
from snapocr.core.errors import CommandFailedError, ToolMissingError
from snapocr.core.ocr import OCRProcessor


# Enhancement

def test_enhance_skipped_without_tool(tmp_path):
    with patch("snapocr.core.enhance.run_command") as run:
        assert enhance_image(None, tmp_path / "shot.png") is False
    run.assert_not_called()


def test_enhance_desaturates_and_upscales_in_place(tool, tmp_path):
    image = tmp_path / "shot.png"

    with patch("snapocr.core.enhance.run_command") as run:
        assert enhance_image(tool("convert"), image, 300) is True

    run.assert_called_once_with([
        "/usr/bin/convert", str(image), "-modulate", "100,0", "-resize", "300%", str(image)
    ])


def test_enhance_failure_is_fatal_once_invoked(tool, tmp_path):
    with patch("snapocr.core.enhance.run_command",
               side_effect=CommandFailedError(["magick"], 1, "no decode delegate")):
        with pytest.raises(CommandFailedError):
            enhance_image(tool("magick"), tmp_path / "shot.png")


def test_build_enhance_command_default_scale(tool, tmp_path):
    args = build_enhance_command(tool("magick"), tmp_path / "a.png")
    assert "400%" in args


# OCR

def fake_tesseract(text):
    def run_tesseract(input_filename, output_filename_base, extension, lang, config=''):
        with open(f"{output_filename_base}.txt", "w", encoding="utf-8") as f:
            f.write(text)
    return run_tesseract


def test_recognize_writes_text_file(tool, tmp_path):
    processor = OCRProcessor(tool("tesseract"), ["eng", "deu"])

    with patch("snapocr.core.ocr.pytesseract.get_languages", return_value=["eng", "deu", "osd"]), \
            patch("snapocr.core.ocr.pytesseract.pytesseract.run_tesseract",
                  side_effect=fake_tesseract("Hello\n\f")) as run:
        text_path = processor.recognize(tmp_path / "shot.png", tmp_path / "shot")

    assert text_path == tmp_path / "shot.txt"
    assert OCRProcessor.read_text(text_path) == "Hello\n\f"
    assert run.call_args.kwargs["lang"] == "eng+deu"
    assert run.call_args.kwargs["extension"] == "txt"


def test_recognize_points_pytesseract_at_resolved_binary(tool):
    import pytesseract

    OCRProcessor(tool("tesseract"))

    assert pytesseract.pytesseract.tesseract_cmd == "/usr/bin/tesseract"


def test_effective_languages_drop_uninstalled(tool):
    processor = OCRProcessor(tool("tesseract"), ["eng", "ita", "jpn"])

    with patch("snapocr.core.ocr.pytesseract.get_languages", return_value=["eng", "jpn"]):
        assert processor.effective_languages() == ["eng", "jpn"]


def test_effective_languages_fall_back_to_english(tool):
    processor = OCRProcessor(tool("tesseract"), ["ita", "fra"])

    with patch("snapocr.core.ocr.pytesseract.get_languages", return_value=["osd"]):
        assert processor.effective_languages() == ["eng"]


def test_effective_languages_keep_config_when_listing_fails(tool):
    processor = OCRProcessor(tool("tesseract"), ["eng", "fra"])

    with patch("snapocr.core.ocr.pytesseract.get_languages", side_effect=OSError("boom")):
        assert processor.effective_languages() == ["eng", "fra"]


def test_recognize_failure_is_command_failed(tool, tmp_path):
    processor = OCRProcessor(tool("tesseract"), ["eng"])

    with patch("snapocr.core.ocr.pytesseract.get_languages", return_value=["eng"]), \
            patch("snapocr.core.ocr.pytesseract.pytesseract.run_tesseract",
                  side_effect=TesseractError(1, "Error opening data file")):
        with pytest.raises(CommandFailedError) as excinfo:
            processor.recognize(tmp_path / "shot.png", tmp_path / "shot")

    assert excinfo.value.returncode == 1
    assert "Error opening data file" in str(excinfo.value)


def test_recognize_missing_binary_is_tool_missing(tool, tmp_path):
    processor = OCRProcessor(tool("tesseract"), ["eng"])

    with patch("snapocr.core.ocr.pytesseract.get_languages", side_effect=TesseractNotFoundError()):
        with pytest.raises(ToolMissingError):
            processor.recognize(tmp_path / "shot.png", tmp_path / "shot")


def test_recognize_without_output_file_fails(tool, tmp_path):
    processor = OCRProcessor(tool("tesseract"), ["eng"])

    with patch("snapocr.core.ocr.pytesseract.get_languages", return_value=["eng"]), \
            patch("snapocr.core.ocr.pytesseract.pytesseract.run_tesseract"):
        with pytest.raises(CommandFailedError):
            processor.recognize(tmp_path / "shot.png", tmp_path / "shot")


# Clipboard

@pytest.mark.parametrize("name, expected", [
    ("xclip", ["-selection", "clipboard", "-in"]),
    ("xsel", ["--clipboard", "--input"]),
    ("wl-copy", []),
    ("pbcopy", []),
])
def test_build_clipboard_command(tool, name, expected):
    assert build_clipboard_command(tool(name)) == [f"/usr/bin/{name}"] + expected


def test_build_clipboard_command_rejects_unknown_tool(tool):
    with pytest.raises(ValueError):
        build_clipboard_command(tool("clip.exe"))


def test_copy_file_pipes_exact_contents(tool, tmp_path):
    text_path = tmp_path / "shot.txt"
    text_path.write_bytes("Grüße\r\nline two\n\f".encode("utf-8"))

    with patch("snapocr.core.clipboard.run_command",
               return_value=subprocess.CompletedProcess([], 0)) as run:
        copied = copy_file(tool("xclip"), text_path)

    args, kwargs = run.call_args
    assert args[0] == ["/usr/bin/xclip", "-selection", "clipboard", "-in"]
    assert kwargs["input_bytes"] == text_path.read_bytes()
    assert kwargs["capture_stderr"] is False
    assert copied == len(text_path.read_bytes())


def test_copy_file_failure_is_fatal(tool, tmp_path):
    text_path = tmp_path / "shot.txt"
    text_path.write_text("x")

    with patch("snapocr.core.clipboard.run_command",
               side_effect=CommandFailedError(["wl-copy"], 1, "no display")):
        with pytest.raises(CommandFailedError):
            copy_file(tool("wl-copy"), text_path)
