"""Command-line interface for sicpgen."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pydantic import ValidationError

from . import __version__
from .config import Config
from .errors import SicpGenError, TemplateLoadError
from .generator import ExerciseGenerator
from .runner import run_tests
from .templates import TemplateRenderer
from .utils import (
    configure_logging,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with the ``start`` and ``test`` commands."""
    parser = argparse.ArgumentParser(
        prog="sicpgen",
        description="Scaffold chapter/exercise directories",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  sicpgen start --exercise 1-3\n"
            "  sicpgen start -e 2-17 ~/sicp\n"
            "  sicpgen test -e 1-3\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--template-dir",
        default=None,
        help="Directory holding readme.md.tpl and test.rkt.tpl (default: bundled templates)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log what is being generated",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    for name, help_text in (
        ("start", "Create the directory for an exercise"),
        ("test", "Run the tests of an exercise"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument(
            "--exercise", "-e",
            required=True,
            help="Exercise identifier, <chapter>-<exercise> (e.g. 1-3)",
        )
        sub.add_argument(
            "root",
            nargs="?",
            default=".",
            help="Directory holding the chapter folders (default: .)",
        )
    return parser


def _load_config(args: argparse.Namespace) -> Config:
    config = Config.from_env()
    overrides: dict[str, object] = {}
    if args.template_dir:
        overrides["template_dir"] = Path(args.template_dir)
    if args.verbose:
        overrides["log_level"] = "DEBUG"
    if overrides:
        config = config.model_copy(update=overrides)
    return config


def _start(config: Config, renderer: TemplateRenderer, root: Path, identifier: str) -> None:
    generator = ExerciseGenerator(renderer, config)
    exercise = generator.generate(root, identifier)
    print_success(f"Created {exercise}")
    print_summary_table(
        {path.name: str(path) for path in generator.written_files(exercise)},
        title=f"Exercise {exercise.chapter}-{exercise.exercise}",
    )


def _test(root: Path, identifier: str) -> None:
    run_tests(root, identifier)
    print_warning("Running exercise tests is not implemented; nothing was run.")


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit status."""
    args = build_parser().parse_args(argv)
    try:
        config = _load_config(args)
    except ValidationError as exc:
        print_error(f"Invalid configuration: {exc}")
        return 1
    configure_logging(config.log_level)

    renderer = TemplateRenderer(config.template_dir)
    try:
        renderer.load(config.required_templates)
    except TemplateLoadError as exc:
        print_error(exc.message)
        return 1

    root = Path(args.root)
    try:
        if args.command == "start":
            _start(config, renderer, root, args.exercise)
        else:
            _test(root, args.exercise)
    except SicpGenError as exc:
        print_error(exc.message)
        return 1
    return 0


def entrypoint() -> None:
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    entrypoint()
