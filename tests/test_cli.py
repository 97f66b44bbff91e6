"""CLI parser and command tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from rustdocstring.cli import _build_parser, main

SOURCE = """\
///
#[derive(Debug)]
pub struct Point {
    x: f64,
    y: f64,
}

///
pub unsafe fn poke(addr: usize) {
}
"""


@pytest.fixture
def source_file(tmp_path: Path) -> Path:
    path = tmp_path / "lib.rs"
    path.write_text(SOURCE, encoding="utf-8")
    return path


def test_cli_accepts_verbose_before_command() -> None:
    args = _build_parser().parse_args(["--verbose", "signature", "lib.rs", "--line", "0"])
    assert args.verbose is True
    assert args.command == "signature"


def test_cli_accepts_verbose_after_command() -> None:
    args = _build_parser().parse_args(["generate", "lib.rs", "--line", "3", "-v"])
    assert args.verbose is True
    assert args.line == 3


def test_generate_flags_default_to_unset() -> None:
    args = _build_parser().parse_args(["generate", "lib.rs", "--line", "0"])

    assert args.include_examples is None
    assert args.examples_only_for_public_or_extern is None
    assert args.include_safety_details is None
    assert args.gate_struct_examples is None


def test_generate_flags() -> None:
    args = _build_parser().parse_args(
        ["generate", "lib.rs", "--line", "0", "--no-examples", "--safety-details"]
    )

    assert args.include_examples is False
    assert args.include_safety_details is True


def test_serve_defaults() -> None:
    args = _build_parser().parse_args(["serve"])

    assert args.host == "127.0.0.1"
    assert args.port == 8000


def test_signature_command_prints_normalized_declaration(
    source_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    main(["signature", str(source_file), "--line", "0"])

    assert capsys.readouterr().out.strip() == "pub struct Point { x: f64, y: f64, }"


def test_generate_command_prints_template(
    source_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    main(["generate", str(source_file), "--line", "7", "--safety-details"])

    out = capsys.readouterr().out
    assert out.startswith(" ${1:Describe this function.}")
    assert "- **The caller must ensure that:**" in out


def test_generate_reads_config_next_to_source(
    source_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    (source_file.parent / ".rustdocstring.yml").write_text(
        "include_examples: false\n", encoding="utf-8"
    )

    main(["generate", str(source_file), "--line", "7"])

    assert "# Examples" not in capsys.readouterr().out


def test_generate_exits_when_no_item_follows(source_file: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["generate", str(source_file), "--line", "5"])

    assert excinfo.value.code == 1


def test_missing_file_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["signature", str(tmp_path / "missing.rs"), "--line", "0"])

    assert excinfo.value.code == 1


def test_generate_finds_config_at_crate_root(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    (tmp_path / ".rustdocstring.yml").write_text("include_examples: false\n", encoding="utf-8")
    source = tmp_path / "src" / "lib.rs"
    source.parent.mkdir()
    source.write_text(SOURCE, encoding="utf-8")

    main(["generate", str(source), "--line", "7"])

    out = capsys.readouterr().out
    assert out.startswith(" ${1:Describe this function.}")
    assert "# Examples" not in out


def test_log_file_option(source_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    log_file = source_file.parent / "run.log"

    main(["--log-file", str(log_file), "-v", "generate", str(source_file), "--line", "0"])

    assert capsys.readouterr().out.startswith(" ${1:Describe this struct.}")
    assert "[-] rustdocstring.cli: Generation options" in log_file.read_text(encoding="utf-8")
