from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from screendump import cli

SAMPLE = bytes([0x41, 0x00, 0x42, 0x08])


@pytest.fixture
def dump_file(tmp_path: Path) -> Path:
    path = tmp_path / "screen.bin"
    path.write_bytes(SAMPLE)
    return path


def test_main_writes_fragment_to_output(tmp_path: Path, dump_file: Path) -> None:
    output = tmp_path / "screen.html"

    assert cli.main([str(dump_file), "--output", str(output)]) == 0

    assert output.read_text(encoding="utf-8") == (
        '<div><span style="color:#000;background-color:#000;">A</span>'
        '<span style="color:#555;background-color:#000;">B</span>\n</div>'
    )


def test_main_writes_to_stdout(dump_file: Path, capsysbinary: pytest.CaptureFixture[bytes]) -> None:
    assert cli.main([str(dump_file), "--palette", "revised"]) == 0

    captured = capsysbinary.readouterr()
    assert b"color:#4e4e4e;" in captured.out


def test_command_line_overrides_config(tmp_path: Path, dump_file: Path) -> None:
    config_path = tmp_path / "screendump.toml"
    config_path.write_text(
        textwrap.dedent(
            """
            [decoder]
            width = 1
            palette = "revised"
            debug = true
            """
        ),
        encoding="utf-8",
    )
    output = tmp_path / "screen.html"

    cli.main(
        [
            str(dump_file),
            "--config",
            str(config_path),
            "--palette",
            "standard",
            "--output",
            str(output),
        ]
    )

    html = output.read_text(encoding="utf-8")
    assert html.count("\n") == 2
    assert 'data-xy="2x1"' in html
    assert "#555" in html


def test_resolve_options_defaults_without_config(dump_file: Path) -> None:
    args = cli.parse_args([str(dump_file), "--width", "80", "--debug"])

    options = cli.resolve_options(args)

    assert options.width == 80
    assert options.debug is True
    assert options.max_rows == 0


def test_missing_input_file_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit, match="screen dump not found"):
        cli.main([str(tmp_path / "absent.bin")])


def test_missing_config_file_exits(dump_file: Path, tmp_path: Path) -> None:
    with pytest.raises(SystemExit, match="configuration file not found"):
        cli.main([str(dump_file), "--config", str(tmp_path / "absent.toml")])


def test_invalid_code_page_exits_with_message(dump_file: Path) -> None:
    with pytest.raises(SystemExit, match="error: unknown code page"):
        cli.main([str(dump_file), "--code-page", "bogus"])


def test_failed_decode_leaves_existing_output_untouched(
    tmp_path: Path, dump_file: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    from screendump import decoder as decoder_module
    from screendump.errors import StreamReadError

    def failing_cells(stream, **kwargs):
        raise StreamReadError("screen dump read failed: device error")
        yield  # pragma: no cover

    monkeypatch.setattr(decoder_module, "iter_cells", failing_cells)
    output = tmp_path / "screen.html"
    output.write_text("previous good output", encoding="utf-8")

    with pytest.raises(SystemExit, match="device error"):
        cli.main([str(dump_file), "--output", str(output)])

    assert output.read_text(encoding="utf-8") == "previous good output"
