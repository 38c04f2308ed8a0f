from __future__ import annotations

import argparse
import io
import sys
from pathlib import Path

from loguru import logger

from html2plain.config import AppConfig, default_config, load_config
from html2plain.convert import convert
from html2plain.logging import get_log_level, setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="html2plain")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show debug logs")
    parser.add_argument("--debug", action="store_true", help="Show trace-level logs")
    parser.add_argument("--quiet", "-q", action="store_true", help="Show only warnings and errors")
    parser.add_argument("--log-file", default=None, help="Also write logs to this file")
    subparsers = parser.add_subparsers(dest="command", required=True)

    convert_parser = subparsers.add_parser("convert", help="Convert an HTML file to plain text")
    convert_parser.add_argument(
        "path",
        nargs="?",
        default="-",
        help="HTML file to convert, or - for stdin (default)",
    )
    _add_common_arguments(convert_parser)

    fetch_parser = subparsers.add_parser("fetch", help="Fetch a URL and convert it to plain text")
    fetch_parser.add_argument("url", help="URL of the HTML page")
    _add_common_arguments(fetch_parser)

    return parser


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", default=None, help="Path to YAML config")
    parser.add_argument("--output", "-o", default=None, help="Write text here instead of stdout")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    log_level = get_log_level(
        verbose=args.verbose,
        debug=args.debug,
        quiet=args.quiet,
    )
    setup_logging(level=log_level, log_file=Path(args.log_file) if args.log_file else None)
    config = load_config(Path(args.config)) if args.config else default_config()

    if args.command == "convert":
        try:
            html = _read_input(args.path, config)
        except FileNotFoundError:
            logger.error(f"Input file not found: {args.path}")
            return 1
        text = convert(html, parser=config.parser.features)
        _write_output(text, args.output, config)
        return 0

    if args.command == "fetch":
        from html2plain.fetch.fetcher import decode_content, fetch_url

        doc = fetch_url(
            args.url,
            timeout_s=config.fetch.timeout_s,
            user_agent=config.fetch.user_agent,
        )
        logger.info(f"Fetched {doc.url}")
        text = convert(decode_content(doc), parser=config.parser.features)
        _write_output(text, args.output, config)
        return 0

    return 2


def _read_input(path: str, config: AppConfig) -> str:
    if path == "-":
        stream = io.TextIOWrapper(sys.stdin.buffer, encoding=config.io.encoding, errors="replace")
        try:
            return stream.read()
        finally:
            # Leave sys.stdin open for the caller.
            stream.detach()
    return Path(path).read_text(encoding=config.io.encoding, errors="replace")


def _write_output(text: str, output: str | None, config: AppConfig) -> None:
    if output:
        Path(output).write_text(text + "\n", encoding=config.io.encoding)
        logger.info(f"Wrote {len(text)} chars to {output}")
        return
    sys.stdout.write(text + "\n")


if __name__ == "__main__":
    sys.exit(main())
