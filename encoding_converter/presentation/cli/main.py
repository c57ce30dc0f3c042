"""CLI entry point for the encoding converter."""
from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace
from pathlib import Path
from typing import Dict, Iterable, Optional

from ... import __version__
from ...application.session import ConverterSession
from ...domain.configuration import (
    ConverterConfig,
    DefaultFormats,
    ExportOptions,
    LoggingSettings,
    parse_level,
    with_cli_overrides,
)
from ...domain.formats import FormatId
from ...shared.logging import configure_logger


def load_config(path: Optional[Path]) -> ConverterConfig:
    if not path:
        return ConverterConfig()
    data = json.loads(path.read_text(encoding="utf-8"))
    config = ConverterConfig()
    if "formats" in data:
        formats = data["formats"]
        config = replace(
            config,
            formats=DefaultFormats(
                source=FormatId.from_string(formats.get("source", config.formats.source.value)),
                target=FormatId.from_string(formats.get("target", config.formats.target.value)),
            ),
        )
    if "logging" in data:
        settings = data["logging"]
        config = replace(
            config,
            logging=LoggingSettings(
                level=parse_level(settings.get("level", config.logging.level)),
                json_mode=settings.get("json_mode", config.logging.json_mode),
            ),
        )
    if "export" in data:
        export = data["export"]
        config = replace(
            config,
            export=ExportOptions(
                file_name=export.get("file_name", config.export.file_name),
                encoding=export.get("encoding", config.export.encoding),
            ),
        )
    return config


def _supported() -> str:
    return ", ".join(t.value for t in FormatId.all_types())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="convert-encoding",
        description="Convert text between plain text, Base64, hex, binary, URI/URL encoding, "
        "ASCII codes, Unicode escapes and HTML entities",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  convert-encoding --from text --to hex Hello
  convert-encoding --from base64 --to text SGVsbG8=
  echo 'a b&c' | convert-encoding --to uri
  convert-encoding --from hex --to binary --input-file dump.txt --export
        """,
    )
    parser.add_argument("text", nargs="?", help="Text to convert (default: read standard input)")
    parser.add_argument("--from", dest="source", help=f"Source format ({_supported()})")
    parser.add_argument("--to", dest="target", help=f"Target format ({_supported()})")
    parser.add_argument("--input-file", type=Path, help="Read the input text from a file, unchanged")
    parser.add_argument(
        "--export",
        nargs="?",
        const="",
        default=None,
        help="Write input and output to an export file (default name from config)",
    )
    parser.add_argument("--swap", action="store_true", help="Convert the result back in the opposite direction")
    parser.add_argument("--list-formats", action="store_true", help="List supported formats and exit")
    parser.add_argument("--config", type=Path, help="Configuration JSON file")
    parser.add_argument("--log-level", help="Logging level (debug, info, warning, error)")
    parser.add_argument("--json-logs", action="store_true", default=None, help="Emit logs as JSON lines")
    parser.add_argument("--version", action="store_true", help="Print version and exit")
    return parser


def apply_cli(config: ConverterConfig, args: argparse.Namespace) -> ConverterConfig:
    overrides: Dict[str, object] = {
        "source": FormatId.from_string(args.source) if args.source else None,
        "target": FormatId.from_string(args.target) if args.target else None,
        "log_level": args.log_level,
        "json_logs": args.json_logs,
    }
    return with_cli_overrides(config, overrides)


def read_input(args: argparse.Namespace) -> str:
    """Positional text, then --input-file, then standard input.

    A single trailing line break is dropped from standard input so piped
    ``echo`` output converts as expected.
    """
    if args.text is not None:
        return args.text
    if args.input_file is not None:
        with args.input_file.open("r", encoding="utf-8", newline="") as f:
            return f.read()
    data = sys.stdin.read()
    if data.endswith("\r\n"):
        return data[:-2]
    if data.endswith("\n"):
        return data[:-1]
    return data


def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if args.version:
        print(__version__)
        return 0
    if args.list_formats:
        for format_id in FormatId.all_types():
            print(f"{format_id.value}\t{format_id.label}")
        return 0

    try:
        config = load_config(args.config)
        config = apply_cli(config, args)
    except OSError as exc:
        print(f"Error: cannot read config: {exc}", file=sys.stderr)
        return 2
    except json.JSONDecodeError as exc:
        print(f"Error: invalid config {args.config}: {exc}", file=sys.stderr)
        return 2
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        print(f"Supported formats: {_supported()}", file=sys.stderr)
        return 2

    configure_logger(config.logging)

    try:
        text = read_input(args)
    except OSError as exc:
        print(f"Error: cannot read input: {exc}", file=sys.stderr)
        return 2

    session = ConverterSession(config.formats.source, config.formats.target)
    session.set_input(text)
    if args.swap and not session.failed:
        session.swap()

    if session.failed:
        print(f"Error: {session.last_result}", file=sys.stderr)
        exit_code = 1
    else:
        print(session.output)
        exit_code = 0

    if args.export is not None:
        try:
            path = session.export(args.export or config.export.file_name, config.export.encoding)
        except (OSError, UnicodeError) as exc:
            print(f"Error: cannot write export: {exc}", file=sys.stderr)
            return 2
        print(f"Exported to {path}", file=sys.stderr)

    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
