"""CLI entrypoint for confval."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from confval import __version__
from confval.catalog import MessageCatalog, default_catalog, load_catalog
from confval.constants.branding import CLI_DESCRIPTION
from confval.exceptions import ConfvalError, SettingsError
from confval.reporting import StdoutReporter, render_catalog
from confval.rules import RULE_SET_CLASSES, build_rule_set
from confval.settings import ValidatorSettings, load_settings
from confval.validation import ConfigValidator

logger = logging.getLogger(__name__)

EXIT_VALID: int = 0
EXIT_INVALID: int = 1
EXIT_TOOL_ERROR: int = 2


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(prog="confval", description=CLI_DESCRIPTION)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate = subparsers.add_parser("validate", help="Validate a JSON configuration document")
    validate.add_argument("document", type=Path, help="JSON document to validate")
    validate.add_argument("-s", "--schema", type=Path, default=None, help="JSON Schema file")
    validate.add_argument("-c", "--config", type=Path, default=None, help="Explicit settings file")
    validate.add_argument(
        "--rule-set",
        choices=sorted(cls.name for cls in RULE_SET_CLASSES),
        default=None,
        help="Rule set to run after the schema check",
    )
    validate.add_argument("-w", "--workers", type=int, default=None, help="Run rules on N worker threads")
    validate.add_argument("--show-codes", action="store_true", help="List the error codes before validating")
    validate.add_argument("--show-document", action="store_true", help="Echo the document before the errors")
    validate.add_argument("--no-color", action="store_true", help="Disable colored output")
    validate.add_argument("-v", "--verbose", action="store_true", help="Show diagnostics")

    codes = subparsers.add_parser("codes", help="List error codes and messages")
    codes.add_argument("-c", "--config", type=Path, default=None, help="Explicit settings file")
    codes.add_argument("--no-color", action="store_true", help="Disable colored output")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if getattr(args, "verbose", False) else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    try:
        if args.command == "codes":
            return _handle_codes(args)
        return _handle_validate(args)
    except SettingsError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_TOOL_ERROR
    except ConfvalError as exc:
        print(f"Validator error: {exc}", file=sys.stderr)
        return EXIT_TOOL_ERROR


def _handle_validate(args: argparse.Namespace) -> int:
    """Validate one document and report the errors."""
    if args.workers is not None and args.workers <= 0:
        raise SettingsError("--workers must be a positive integer")

    settings = load_settings(Path.cwd(), args.config).with_overrides(
        schema=args.schema,
        rule_set=args.rule_set,
        max_workers=args.workers,
    )
    if settings.schema is None:
        raise SettingsError("no schema given; pass --schema or set `schema` in the settings file")

    catalog = _resolve_catalog(settings)
    use_color = not args.no_color and sys.stdout.isatty()

    if args.show_codes:
        print(render_catalog(catalog, color=use_color))
        print()

    validator = ConfigValidator(
        settings.schema,
        rule_set=build_rule_set(settings.rule_set, catalog),
        catalog=catalog,
        max_workers=settings.max_workers,
    )
    errors = validator.validate(args.document)

    document = None
    if args.show_document and args.document.is_file():
        document = args.document.read_text(encoding="utf-8", errors="replace")
    print(StdoutReporter(errors, color=use_color, document=document).render())

    return EXIT_INVALID if errors else EXIT_VALID


def _handle_codes(args: argparse.Namespace) -> int:
    """Print every code in the message catalog."""
    catalog = _resolve_catalog(load_settings(Path.cwd(), args.config))
    use_color = not args.no_color and sys.stdout.isatty()
    print(render_catalog(catalog, color=use_color))
    return EXIT_VALID


def _resolve_catalog(settings: ValidatorSettings) -> MessageCatalog:
    if settings.catalog is None:
        return default_catalog()
    logger.debug("Using message catalog %s", settings.catalog)
    return load_catalog(settings.catalog)


if __name__ == "__main__":
    raise SystemExit(main())
