"""CLI entrypoints for rustdocstring commands."""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path

from .config import ConfigError, GenerationOptions, RustDocConfig, load_config
from .generator import DocGenerator
from .logging import configure_logging, get_logger


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_location_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("path", help="Rust source file to read.")
    parser.add_argument(
        "--line",
        type=int,
        required=True,
        help="Zero-based line holding the cursor; scanning starts on the next line.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rustdocstring",
        description="Generate Rust doc-comment templates for functions, structs and enums.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write log records, tagged with the item kind, to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Print the doc-comment template for the item after a line.",
    )
    _add_verbose_option(generate_parser, suppress_default=True)
    _add_location_options(generate_parser)
    generate_parser.add_argument(
        "--config",
        default=None,
        help="Path to .rustdocstring.yml (defaults to the source file's directory).",
    )
    generate_parser.add_argument(
        "--no-examples",
        dest="include_examples",
        action="store_false",
        default=None,
        help="Omit '# Examples' sections.",
    )
    generate_parser.add_argument(
        "--examples-only-public",
        dest="examples_only_for_public_or_extern",
        action="store_true",
        default=None,
        help="Only include examples for items marked 'pub' or 'extern'.",
    )
    generate_parser.add_argument(
        "--safety-details",
        dest="include_safety_details",
        action="store_true",
        default=None,
        help="Include the caller obligations in '# Safety' sections.",
    )
    generate_parser.add_argument(
        "--gate-struct-examples",
        dest="gate_struct_examples",
        action="store_true",
        default=None,
        help="Apply the example switches to structs as well.",
    )

    signature_parser = subparsers.add_parser(
        "signature",
        help="Print the normalized signature of the item after a line.",
    )
    _add_verbose_option(signature_parser, suppress_default=True)
    _add_location_options(signature_parser)

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP service used by editor plugins.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to bind.")

    return parser


def _resolve_options(args: argparse.Namespace, config: RustDocConfig) -> GenerationOptions:
    overrides: dict[str, bool] = {}
    for key in (
        "include_examples",
        "examples_only_for_public_or_extern",
        "include_safety_details",
        "gate_struct_examples",
    ):
        value = getattr(args, key, None)
        if value is not None:
            overrides[key] = bool(value)
    return replace(config.options, **overrides)


def _read_lines(parser: argparse.ArgumentParser, path: str) -> list[str]:
    try:
        return Path(path).read_text(encoding="utf-8").splitlines()
    except OSError as exc:
        parser.exit(1, f"Cannot read {path}: {exc}\n")


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for rustdocstring commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    log_file = Path(args.log_file) if args.log_file else None
    configure_logging(verbose=bool(args.verbose), log_file=log_file)
    logger = get_logger("cli")

    if args.command == "generate":
        config_path = Path(args.config) if args.config else Path(args.path).parent
        try:
            config = load_config(config_path)
            generator = DocGenerator.from_config(config)
        except (ConfigError, ValueError) as exc:
            parser.exit(1, f"Invalid configuration: {exc}\n")
        options = _resolve_options(args, config)
        logger.debug("Generation options: %s", options)
        lines = _read_lines(parser, args.path)
        try:
            template = generator.generate_from_buffer(lines, args.line, options)
        except ValueError as exc:
            parser.exit(1, f"{exc}\n")
        if template is None:
            parser.exit(1, f"No documentable item follows line {args.line}\n")
        print(template)
    elif args.command == "signature":
        lines = _read_lines(parser, args.path)
        try:
            signature = DocGenerator().scanner.scan(lines, args.line)
        except ValueError as exc:
            parser.exit(1, f"{exc}\n")
        if signature is None:
            parser.exit(1, f"No item follows line {args.line}\n")
        print(signature)
    elif args.command == "serve":
        from .service import run_service

        run_service(host=args.host, port=args.port)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


if __name__ == "__main__":
    main(sys.argv[1:])
