"""CLI entry point that verifies an instance and, optionally, a solution."""

from __future__ import annotations

import argparse
import logging
from typing import Dict, Iterable, Optional, Union

import pandas as pd
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from lpbasic.planning.instance_io import load_instance, load_solution
from lpbasic.planning.instance_validation import InstanceValidationError, verify_instance
from lpbasic.planning.model_config import ModelConfig
from lpbasic.planning.solution_validation import verify_solution
from lpbasic.planning.stats import basic_stats


def parse_args(argv: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Verify a line planning instance and an optional solution."
    )
    parser.add_argument("--instance", required=True, help="Instance YAML path.")
    parser.add_argument(
        "--solution",
        help="Optional solution CSV with a 'selected' or 'frequency' column.",
    )
    parser.add_argument(
        "--model-config",
        help="Optional model config YAML; enables edge frequency bound checks.",
    )
    parser.add_argument(
        "--output-stats",
        help="Optional CSV path for the basic solution statistics.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Verbosity for the CLI logger.",
    )
    return parser.parse_args(argv)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(message)s",
    )


def _print_stats(console: Console, stats: Dict[str, Union[int, float]]) -> None:
    table = Table(title="Solution statistics")
    table.add_column("Statistic")
    table.add_column("Value", justify="right")
    for key, value in stats.items():
        text = f"{value:,.3f}" if isinstance(value, float) else f"{value:,}"
        table.add_row(key, text)
    console.print(table)


def _report_load_error(console: Console, label: str, path: str, exc: Exception) -> int:
    logging.error("Could not load %s from %s: %s", label, path, exc)
    console.print(f"[red]Could not load {label}:[/red] {escape(str(exc))}")
    return 1


def main(argv: Iterable[str] | None = None, console: Optional[Console] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)
    console = console or Console()

    logging.info("Loading instance from %s", args.instance)
    try:
        instance = load_instance(args.instance)
    except (OSError, AttributeError, KeyError, TypeError, ValueError, yaml.YAMLError) as exc:
        return _report_load_error(console, "instance", args.instance, exc)
    try:
        verify_instance(instance)
    except InstanceValidationError as exc:
        logging.error("Instance is invalid: %s", exc)
        console.print(f"[red]Invalid instance:[/red] {escape(str(exc))}")
        return 1
    console.print(
        f"Instance valid: {instance.network.num_stops} stops, "
        f"{instance.network.num_edges} edges, {instance.num_lines} lines."
    )

    if not args.solution:
        return 0

    try:
        config = ModelConfig.from_yaml(args.model_config) if args.model_config else None
    except (OSError, TypeError, ValueError, yaml.YAMLError) as exc:
        return _report_load_error(console, "model config", args.model_config, exc)
    logging.info("Loading solution from %s", args.solution)
    try:
        solution = load_solution(args.solution)
    except (OSError, KeyError, ValueError) as exc:
        return _report_load_error(console, "solution", args.solution, exc)
    ok, message = verify_solution(instance, solution, config)
    if not ok:
        logging.warning("Solution rejected: %s", message)
        console.print(f"[red]Infeasible solution:[/red] {escape(message)}")
        return 1
    console.print(f"Solution: {message}")

    stats = basic_stats(instance, solution)
    _print_stats(console, stats)
    if args.output_stats:
        pd.DataFrame([stats]).to_csv(args.output_stats, index=False)
        logging.info("Statistics written to %s", args.output_stats)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
