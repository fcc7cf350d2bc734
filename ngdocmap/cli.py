"""CLI entrypoints for ngdocmap commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError, load_config
from .loader import LoadError
from .logging import configure_logging, console_level
from .mapper import MalformedCommentError
from .pipeline import Pipeline
from .render import FORMATS


def _common_options() -> argparse.ArgumentParser:
    """Options accepted both before and after the subcommand name."""
    common = argparse.ArgumentParser(add_help=False, argument_default=argparse.SUPPRESS)
    common.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr.")
    common.add_argument(
        "--config",
        help="Path to .ngdocmap.yml or its directory (defaults to current directory).",
    )
    return common


def _build_parser() -> argparse.ArgumentParser:
    common = _common_options()
    parser = argparse.ArgumentParser(
        prog="ngdocmap",
        description="Map parsed ngdoc comments into a module/entity/method documentation tree.",
        parents=[common],
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    map_parser = subparsers.add_parser(
        "map",
        help="Map a JSON dump of parsed comments.",
        parents=[common],
    )
    map_parser.add_argument(
        "input",
        nargs="?",
        default=None,
        help="JSON file of doctrine annotations (defaults to the configured input).",
    )
    map_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Write the result here instead of printing it.",
    )
    map_parser.add_argument(
        "--format",
        choices=FORMATS,
        default=None,
        help="Output format (defaults to the configured format, then json).",
    )

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP mapping service.",
        parents=[common],
    )
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for ngdocmap commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    verbose = bool(getattr(args, "verbose", False))
    config_arg = getattr(args, "config", None)
    config_path = Path(config_arg) if config_arg else Path.cwd()

    try:
        config = load_config(config_path)
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    prints_result = args.command == "map" and args.output is None and config.output is None
    level = console_level(verbose=verbose, quiet=prints_result)
    configure_logging(level, log_file=config.log_file)

    if args.command == "map":
        pipeline = Pipeline()
        try:
            result = pipeline.run(
                args.input,
                args.output,
                fmt=args.format,
                config_path=config_path,
            )
        except (LoadError, ConfigError) as exc:
            parser.exit(1, f"{exc}\n")
        except MalformedCommentError as exc:
            parser.exit(1, f"ngdocmap map failed: {exc}\n")
        if result.path is None:
            sys.stdout.write(result.output)
        else:
            print(f"Output written to {_relativize(result.path)}")
    elif args.command == "serve":  # pragma: no cover - integration path
        from .service import run_service

        run_service(host=args.host, port=args.port)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
