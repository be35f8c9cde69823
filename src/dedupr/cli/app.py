# Copyright 2025 CrownOps Engineering
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""CLI entry point and orchestration for dedupr commands."""

from __future__ import annotations

import argparse
import logging
import pathlib
from collections.abc import Callable, Sequence
from textwrap import dedent
from typing import TYPE_CHECKING, Final

from dedupr import __version__
from dedupr._internal import consume
from dedupr._internal.logging_utils import LOG_FORMATS, LOG_LEVELS, configure_logging, structured_extra
from dedupr.cli.commands import run as run_command
from dedupr.cli.io import echo, register_argument
from dedupr.cli.types import CLIContext
from dedupr.config import load_config
from dedupr.core.model_types import LogComponent
from dedupr.dedupe import deduplicate
from dedupr.exceptions import DeduprError

if TYPE_CHECKING:
    from dedupr.cli.types import SubparserCollection

logger: logging.Logger = logging.getLogger("dedupr.cli")

DEDUPR_VERSION: Final[str] = __version__
DEMO_VALUES: Final[tuple[int, ...]] = (1, 1, 2, 2, 3, 3, 4, 4, 4, 4, 5, 5, 8, 8, 6, 6, 7, 7)
ERROR_EXIT_CODE: Final[int] = 2

CONFIG_TEMPLATE: Final[str] = dedent(
    """\
    # dedupr configuration template
    # Save this file as dedupr.toml in your working directory, or copy the
    # settings into a [tool.dedupr] table in pyproject.toml.
    config_version = 0

    # Membership check used by `dedupr run`: "hash" (fast, hashable values)
    # or "linear" (equality only).
    strategy = "hash"

    # Type CLI tokens are converted to: "str", "int" or "float".
    value_type = "str"

    # Logging defaults; --log-format/--log-level and DEDUPR_LOG_* take precedence.
    # log_format = "text"
    # log_level = "info"
    """,
)

CommandHandler = Callable[[argparse.Namespace, CLIContext], int]


def write_config_template(path: pathlib.Path, *, force: bool) -> int:
    """Write the dedupr configuration template to a file.

    Args:
        path: Target path where the configuration file will be written.
        force: If True, overwrite the file if it already exists.

    Returns:
        int: Exit code (0 for success, 1 when refusing to overwrite).
    """
    if path.exists() and not force:
        echo(f"[dedupr] Refusing to overwrite existing file: {path}")
        echo("Use --force if you want to replace it.")
        return 1
    path.parent.mkdir(parents=True, exist_ok=True)
    consume(path.write_text(CONFIG_TEMPLATE, encoding="utf-8"))
    echo(f"[dedupr] Wrote starter config to {path}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Main CLI entry point for the dedupr command-line interface.

    Parses command-line arguments, loads configuration, configures logging, and
    dispatches to the selected command handler. ``DeduprError`` failures are
    reported on stderr and mapped to exit code 2.

    Args:
        argv: Command-line arguments to parse. If None, uses sys.argv.

    Returns:
        int: Exit code from the executed command handler.
    """
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if args.version:
        echo(f"dedupr {DEDUPR_VERSION}")
        return 0
    if args.command is None:
        parser.error("No command provided.")
    handler = _command_handlers().get(args.command)
    if handler is None:
        parser.error(f"Unknown command {args.command}")
    try:
        config = load_config(getattr(args, "config", None))
        _ = configure_logging(
            getattr(args, "log_format", None) or config.log_format,
            log_level=getattr(args, "log_level", None) or config.log_level,
        )
        return handler(args, CLIContext(config=config))
    except DeduprError as exc:
        logger.debug(
            "Command failed",
            exc_info=True,
            extra=structured_extra(LogComponent.CLI, exit_code=ERROR_EXIT_CODE),
        )
        echo(f"[dedupr] {exc}", err=True)
        return ERROR_EXIT_CODE


def _build_parser() -> argparse.ArgumentParser:
    """Build the top-level parser with global options and all subcommands.

    Returns:
        argparse.ArgumentParser: Fully configured argument parser.
    """
    common = argparse.ArgumentParser(add_help=False)
    register_argument(
        common,
        "--log-format",
        choices=LOG_FORMATS,
        default=argparse.SUPPRESS,
        help="Logging output format (human-readable text or structured JSON).",
    )
    register_argument(
        common,
        "--log-level",
        choices=LOG_LEVELS,
        default=argparse.SUPPRESS,
        help="Verbosity of logged events.",
    )
    register_argument(
        common,
        "--config",
        type=pathlib.Path,
        default=argparse.SUPPRESS,
        help="Explicit configuration file (skips dedupr.toml/pyproject.toml discovery).",
    )
    parser = argparse.ArgumentParser(
        prog="dedupr",
        parents=[common],
        description="Remove duplicate values while keeping first-occurrence order.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    register_argument(
        parser,
        "--version",
        action="store_true",
        help="Print the dedupr version and exit.",
    )
    subparsers = parser.add_subparsers(dest="command")

    parents = [common]
    run_command.register_run_command(subparsers, parents=parents)
    _register_demo_command(subparsers, parents=parents)
    _register_init_command(subparsers, parents=parents)
    return parser


def _register_demo_command(
    subparsers: SubparserCollection,
    *,
    parents: Sequence[argparse.ArgumentParser] | None,
) -> None:
    consume(
        subparsers.add_parser(
            "demo",
            help="Deduplicate a fixed sample list and print the result",
            formatter_class=argparse.ArgumentDefaultsHelpFormatter,
            parents=parents or [],
        ),
    )


def _register_init_command(
    subparsers: SubparserCollection,
    *,
    parents: Sequence[argparse.ArgumentParser] | None,
) -> None:
    """Register the 'init' subcommand, which writes a starter dedupr.toml.

    Args:
        subparsers: Subparser registry where the init command will be added.
        parents: Shared parent parsers carrying global flags.
    """
    init = subparsers.add_parser(
        "init",
        help="Generate a starter configuration file",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        parents=parents or [],
    )
    register_argument(
        init,
        "-s",
        "--save-as",
        dest="output",
        type=pathlib.Path,
        default=pathlib.Path("dedupr.toml"),
        help="Destination for the generated configuration file.",
    )
    register_argument(
        init,
        "--force",
        action="store_true",
        help="Overwrite the output file if it already exists.",
    )


def _command_handlers() -> dict[str, CommandHandler]:
    return {
        "demo": _execute_demo,
        "init": _execute_init,
        "run": run_command.execute_run,
    }


def _execute_demo(_args: argparse.Namespace, _context: CLIContext) -> int:
    echo(str(deduplicate(list(DEMO_VALUES))))
    return 0


def _execute_init(args: argparse.Namespace, _: CLIContext) -> int:
    return write_config_template(args.output, force=args.force)


__all__ = ["CONFIG_TEMPLATE", "DEMO_VALUES", "main", "write_config_template"]
