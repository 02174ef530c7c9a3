"""Command-line interface for shelltok."""

from __future__ import annotations

import argparse
import json
import logging
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from shelltok.classifier import Classifier
from shelltok.errors import TokenizeError
from shelltok.logger import get_logger
from shelltok.tokens import Token, TokenKind

logger = get_logger(__name__)

OUTPUT_FORMATS = ("words", "tokens", "json")


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path | None
    command: str | None
    output_file: Path | None
    output_format: str
    comments: bool
    fold_unknown: bool
    extra_ordinary: str
    debug: bool

    @property
    def source_name(self) -> str:
        if self.command is not None:
            return "<command>"
        if self.input_file is None:
            return "<stdin>"
        return str(self.input_file)

    def classifier(self) -> Classifier:
        return Classifier.build(
            comments=self.comments,
            fold_unknown=self.fold_unknown,
            extra_ordinary=self.extra_ordinary,
        )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="shelltok",
        description="Split shell-style command text into tokens",
    )
    p.add_argument("input", nargs="?", help="Input file (default: stdin)")
    p.add_argument("-c", "--command", help="Tokenize this string instead of a file")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "-f",
        "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (default: words)",
    )
    p.add_argument(
        "--no-comments",
        action="store_true",
        default=None,
        help="Treat '#' as an ordinary character",
    )
    p.add_argument(
        "--lenient",
        action="store_true",
        default=None,
        help="Treat unknown characters as ordinary instead of failing",
    )
    p.add_argument(
        "--extra-ordinary",
        default=None,
        metavar="CHARS",
        help="Additional characters to treat as ordinary",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover shelltok.toml)",
    )
    p.add_argument("--debug", action="store_true", help="Dump tokens with positions to stderr")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p


def load_config(config_path: Path | None, search_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else search_dir / "shelltok.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        config = tomllib.load(f)
    logger.debug("loaded config from %s", path)
    return config


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    input_file = Path(args.input) if args.input and args.input != "-" else None
    if args.command is not None and input_file is not None:
        raise argparse.ArgumentTypeError("give either an input file or --command, not both")

    search_dir = input_file.parent if input_file is not None else Path(".")
    if not search_dir.parts:
        search_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, search_dir)

    comments = True
    fold_unknown = False
    extra_ordinary = ""
    cfg_classifier = config.get("classifier")
    if isinstance(cfg_classifier, dict):
        cfg_comments = cfg_classifier.get("comments")
        if isinstance(cfg_comments, bool):
            comments = cfg_comments
        cfg_fold = cfg_classifier.get("fold_unknown")
        if isinstance(cfg_fold, bool):
            fold_unknown = cfg_fold
        cfg_extra = cfg_classifier.get("extra_ordinary")
        if isinstance(cfg_extra, str):
            extra_ordinary = cfg_extra
    if args.no_comments:
        comments = False
    if args.lenient:
        fold_unknown = True
    if args.extra_ordinary is not None:
        extra_ordinary = args.extra_ordinary

    output_format = "words"
    cfg_output = config.get("output")
    if isinstance(cfg_output, dict):
        cfg_format = cfg_output.get("format")
        if isinstance(cfg_format, str):
            if cfg_format not in OUTPUT_FORMATS:
                raise argparse.ArgumentTypeError(
                    f"invalid output format in config: {cfg_format!r}"
                )
            output_format = cfg_format
    if args.format is not None:
        output_format = args.format

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        command=args.command,
        output_file=output_file,
        output_format=output_format,
        comments=comments,
        fold_unknown=fold_unknown,
        extra_ordinary=extra_ordinary,
        debug=args.debug,
    )


def render(tokens: list[Token], output_format: str) -> str:
    """Render tokens in the requested output format."""
    if output_format == "json":
        items = [{"kind": t.kind.name.lower(), "value": t.value} for t in tokens]
        return json.dumps(items, ensure_ascii=False) + "\n"
    if output_format == "tokens":
        lines = [f"{t.kind.name}\t{t.value!r}" for t in tokens]
    else:
        lines = [t.value for t in tokens if t.kind is not TokenKind.COMMENT]
    return "".join(f"{line}\n" for line in lines)


def tokenize_input(options: CliOptions) -> list[Token]:
    """Read and tokenize the configured input."""
    from shelltok.debug import dump_tokens
    from shelltok.tokenizer import tokenize

    classifier = options.classifier()
    if options.command is not None:
        tokens = tokenize(options.command, classifier)
    elif options.input_file is None:
        tokens = tokenize(sys.stdin, classifier)
    else:
        with open(options.input_file, encoding="utf-8") as f:
            tokens = tokenize(f, classifier)

    if options.debug:
        dump_tokens(tokens, file=sys.stderr)

    return tokens


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except tomllib.TOMLDecodeError as exc:
        print(f"error: invalid config file: {exc}", file=sys.stderr)
        return 2

    try:
        tokens = tokenize_input(options)
    except TokenizeError as exc:
        print(exc.format(options.source_name), file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    text = render(tokens, options.output_format)
    if options.output_file:
        options.output_file.write_text(text, encoding="utf-8")
    else:
        sys.stdout.write(text)

    return 0
