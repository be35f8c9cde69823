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

"""``dedupr run``: deduplicate values supplied on the command line or a file."""

from __future__ import annotations

import argparse
import json
import logging
import math
import sys
from pathlib import Path
from typing import TYPE_CHECKING, TypeAlias

from dedupr._internal.logging_utils import structured_extra
from dedupr.cli.io import echo, register_argument
from dedupr.core.model_types import LogComponent, OutputFormat, Strategy, ValueKind
from dedupr.dedupe import deduplicate
from dedupr.exceptions import DeduprValidationError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from dedupr.cli.types import CLIContext, SubparserCollection

logger: logging.Logger = logging.getLogger("dedupr.cli")

Value: TypeAlias = str | int | float


def register_run_command(
    subparsers: SubparserCollection,
    *,
    parents: Sequence[argparse.ArgumentParser] | None = None,
) -> None:
    """Attach the ``dedupr run`` command to the CLI.

    Args:
        subparsers: Top-level argparse subparser collection to register commands on.
        parents: Shared parent parsers carrying global options.
    """
    run = subparsers.add_parser(
        "run",
        help="Deduplicate values, keeping the first occurrence of each",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        parents=parents or [],
    )
    register_argument(
        run,
        "values",
        nargs="*",
        help="Values to deduplicate. When omitted, tokens are read from --input.",
    )
    register_argument(
        run,
        "-i",
        "--input",
        dest="input",
        default=None,
        help="Read whitespace-separated tokens from this file ('-' for stdin).",
    )
    register_argument(
        run,
        "--strategy",
        choices=[strategy.value for strategy in Strategy],
        default=None,
        help="Membership strategy (defaults to the configured strategy, then 'hash').",
    )
    register_argument(
        run,
        "--type",
        dest="value_type",
        choices=[kind.value for kind in ValueKind],
        default=None,
        help="Convert tokens to this type before deduplicating.",
    )
    register_argument(
        run,
        "--out",
        choices=[fmt.value for fmt in OutputFormat],
        default=OutputFormat.TEXT.value,
        help="Print one value per line (text) or a JSON array (json).",
    )


def read_tokens(source: str) -> list[str]:
    """Return the whitespace-separated tokens of ``source`` (``-`` is stdin).

    Raises:
        DeduprValidationError: If the file cannot be read.
    """
    if source == "-":
        return sys.stdin.read().split()
    path = Path(source)
    try:
        return path.read_text(encoding="utf-8").split()
    except OSError as exc:
        msg = f"Unable to read input {path}: {exc}"
        raise DeduprValidationError(msg) from exc


def coerce_tokens(tokens: Sequence[str], kind: ValueKind) -> list[Value]:
    """Convert raw CLI tokens to ``kind``.

    Args:
        tokens: Raw string tokens in input order.
        kind: Target value type.

    Returns:
        Converted values, in the same order.

    Raises:
        DeduprValidationError: If a token cannot be parsed as ``kind``.
    """
    if kind is ValueKind.STR:
        return list(tokens)
    converter = int if kind is ValueKind.INT else float
    values: list[Value] = []
    for token in tokens:
        try:
            value = converter(token)
        except ValueError as exc:
            msg = f"invalid {kind.value} value '{token}'"
            raise DeduprValidationError(msg) from exc
        # nan never equals itself and neither nan nor inf is valid JSON
        if isinstance(value, float) and not math.isfinite(value):
            msg = f"invalid {kind.value} value '{token}' (only finite numbers are accepted)"
            raise DeduprValidationError(msg)
        values.append(value)
    return values


def render_values(values: Sequence[Value], output: OutputFormat) -> list[str]:
    """Render deduplicated values as output lines."""
    if output is OutputFormat.JSON:
        return [json.dumps(list(values), allow_nan=False)]
    return [str(value) for value in values]


def execute_run(args: argparse.Namespace, context: CLIContext) -> int:
    """Execute the ``run`` command.

    Args:
        args: Parsed command-line arguments.
        context: Shared CLI context carrying configuration defaults.

    Returns:
        int: Exit code (0 for success).
    """
    tokens: list[str] = list(args.values)
    if args.input is not None:
        if tokens:
            msg = "--input cannot be combined with positional values"
            raise DeduprValidationError(msg)
        tokens = read_tokens(args.input)
    strategy = Strategy.from_str(args.strategy) if args.strategy else context.config.strategy
    kind = ValueKind.from_str(args.value_type) if args.value_type else context.config.value_type
    values = coerce_tokens(tokens, kind)
    result = deduplicate(values, strategy=strategy)
    logger.info(
        "Kept %d of %d values",
        len(result),
        len(values),
        extra=structured_extra(
            LogComponent.CLI,
            strategy=strategy,
            input_count=len(values),
            output_count=len(result),
            path=args.input if args.input not in {None, "-"} else None,
        ),
    )
    for line in render_values(result, OutputFormat.from_str(args.out)):
        echo(line)
    return 0


__all__ = ["coerce_tokens", "execute_run", "read_tokens", "register_run_command", "render_values"]
