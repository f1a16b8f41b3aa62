"""Funclab CLI entry points.

This module exposes the functional exercises as subcommands.
It maps argparse commands onto library calls.
"""

from __future__ import annotations

import argparse
import random
from dataclasses import replace
from typing import Sequence

from core.config import FunclabConfig
from core.errors import FunclabError
from core.logging_config import configure_logging, get_logger
from core.types import ScoreProcessorOptions
from functional.composition import build_string_length_pipeline
from functional.division import process_division
from functional.functions import celsius_to_fahrenheit, count_vowels
from functional.type_router import parse_tagged_value, route_value
from pipeline.applications import (
    generate_and_filter_scores,
    process_strings,
    run_score_processor,
)

_LOGGER = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="funclab", description="Functional pipeline exercises")
    parser.add_argument("--seed", type=int, help="Override FUNCLAB_RANDOM_SEED for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_scores_command(subparsers)
    subparsers.add_parser("filter-scores", help="Print random scores above 70")
    strings_parser = subparsers.add_parser("strings", help="Print long strings lowercased")
    strings_parser.add_argument("values", nargs="*")
    divide_parser = subparsers.add_parser("divide", help="Safe division scaled by 10")
    divide_parser.add_argument("numerator", type=float)
    divide_parser.add_argument("denominator", type=float)
    route_parser = subparsers.add_parser("route", help="Transform a value by its kind")
    route_parser.add_argument("value")
    length_parser = subparsers.add_parser("length", help="Length of trimmed lowercase text")
    length_parser.add_argument("text")
    convert_parser = subparsers.add_parser("convert", help="Celsius to Fahrenheit")
    convert_parser.add_argument("celsius", type=float)
    vowels_parser = subparsers.add_parser("vowels", help="Count vowels in text")
    vowels_parser.add_argument("text")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Funclab CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = _build_config(args.seed)
    except FunclabError as error:
        parser.error(str(error))
        return 2
    configure_logging(config.log_level)
    try:
        return _dispatch(parser, args, config)
    except FunclabError as error:
        _LOGGER.error("command_failed", command=args.command, error=str(error))
        return 1


def _build_config(seed: int | None) -> FunclabConfig:
    """Build runtime config with optional seed override.

    Args:
        seed: Optional seed from the command line.

    Returns:
        Validated config.
    """
    config = FunclabConfig.from_env()
    if seed is not None:
        config = replace(config, random_seed=seed)
    return config


def _dispatch(
    parser: argparse.ArgumentParser,
    args: argparse.Namespace,
    config: FunclabConfig,
) -> int:
    if args.command == "scores":
        return _run_scores_command(args, config)
    if args.command == "filter-scores":
        generate_and_filter_scores(rng=_build_rng(config))
        return 0
    if args.command == "strings":
        process_strings(args.values)
        print()
        return 0
    if args.command == "divide":
        print(process_division(args.numerator, args.denominator))
        return 0
    if args.command == "route":
        print(route_value(parse_tagged_value(args.value)))
        return 0
    if args.command == "length":
        print(build_string_length_pipeline()(args.text))
        return 0
    if args.command == "convert":
        print(celsius_to_fahrenheit()(args.celsius))
        return 0
    if args.command == "vowels":
        print(count_vowels()(args.text))
        return 0
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _add_scores_command(subparsers: argparse._SubParsersAction) -> None:
    """Register the scores command.

    Args:
        subparsers: Parent subparsers object.
    """
    scores_parser = subparsers.add_parser("scores", help="Run the score processor")
    scores_parser.add_argument("--count", type=int, help="Number of scores to draw")
    scores_parser.add_argument("--threshold", type=int, help="Minimum score, exclusive")


def _run_scores_command(args: argparse.Namespace, config: FunclabConfig) -> int:
    """Handle scores command.

    Args:
        args: Parsed CLI args.
        config: Runtime config.

    Returns:
        Exit code.
    """
    options = ScoreProcessorOptions(
        score_count=args.count if args.count is not None else config.score_count,
        threshold=args.threshold if args.threshold is not None else config.score_threshold,
    )
    run_score_processor(options, rng=_build_rng(config))
    return 0


def _build_rng(config: FunclabConfig) -> random.Random:
    return random.Random(config.random_seed)
