"""Command-line interface for railgraph."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, Dict, List, Optional

from railgraph.logging import (
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    set_global_log_level,
)
from railgraph.scenario import Scenario

logger = get_logger(__name__)


def _format_table(
    headers: List[str],
    rows: List[List[str]],
    min_width: int = 8,
) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width

    Returns:
        Formatted table string
    """
    if not rows:
        return ""

    all_data = [headers] + rows
    col_widths = []
    for col_idx in range(len(headers)):
        max_width = max(len(str(row[col_idx])) for row in all_data)
        col_widths.append(max(max_width, min_width))

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    for row in rows:
        lines.append(format_row(row))

    return "\n".join(lines)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s"; 75.2 -> "1m 15.2s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    if seconds < 60.0:
        return f"{seconds:.2f} s"
    minutes = int(seconds // 60)
    rem = seconds - minutes * 60
    return f"{minutes}m {rem:.1f}s"


def results_path_for_run(
    scenario_path: Path, results_override: Optional[Path]
) -> Path:
    """Return the results JSON path: the override, else ``<stem>.results.json``."""
    if results_override is not None:
        return results_override
    return Path(f"{scenario_path.stem}.results.json")


def _results_to_dict(
    scenario: Scenario, results: Dict[str, Any], keys: Optional[List[str]]
) -> Dict[str, Any]:
    queries = {name: result.to_dict() for name, result in results.items()}
    if keys:
        queries = {name: queries[name] for name in keys if name in queries}
    return {"graph": scenario.network.edges.to_tokens(), "queries": queries}


def _run_scenario(
    path: Path,
    results_override: Optional[Path],
    no_results: bool,
    stdout: bool,
    keys: Optional[List[str]] = None,
) -> None:
    """Run a scenario file and export results as JSON by default.

    Args:
        path: Scenario YAML file.
        results_override: Optional explicit path for the JSON results. Defaults
            to ``<scenario_name>.results.json`` in the current directory.
        no_results: Whether to disable results file generation.
        stdout: Whether to also print results to stdout.
        keys: Optional list of query names to include. All queries are
            exported when ``None``.
    """
    logger.info(f"Loading scenario from: {path}")
    _start_time = perf_counter()

    try:
        scenario = Scenario.from_yaml(path.read_text())

        logger.info("Starting scenario execution")
        results = scenario.run()
        logger.info("Scenario execution completed successfully")
        print("✅ Scenario execution completed")

        json_str = json.dumps(_results_to_dict(scenario, results, keys), indent=2)

        if not no_results:
            effective_output = results_path_for_run(path, results_override)
            effective_output.parent.mkdir(parents=True, exist_ok=True)
            logger.info(f"Writing results to: {effective_output}")
            effective_output.write_text(json_str)
            print(f"✅ Results written to: {effective_output}")

        if stdout:
            print(json_str)

        _elapsed = perf_counter() - _start_time
        logger.info(
            f"Scenario run completed successfully in {_format_duration(_elapsed)}"
        )

    except FileNotFoundError:
        logger.error(f"Scenario file not found: {path}")
        print(f"❌ ERROR: Scenario file not found: {path}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to run scenario: {type(e).__name__}: {e}")
        print(f"❌ ERROR: Failed to run scenario: {type(e).__name__}: {e}")
        sys.exit(1)


def _inspect_scenario(path: Path) -> None:
    """Validate a scenario file and print its graph and queries.

    Args:
        path: Scenario YAML file.
    """
    logger.info(f"Inspecting scenario from: {path}")

    try:
        scenario = Scenario.from_yaml(path.read_text())
        logger.info("✓ Scenario validated and loaded successfully")

        edges = scenario.network.edges
        print("\n" + "=" * 60)
        print("RAILGRAPH SCENARIO INSPECTION")
        print("=" * 60)
        print(f"\nNodes: {len(edges)}  ({', '.join(edges.nodes())})")
        print(f"Edges: {len(edges.edges())}")
        print(
            _format_table(
                ["Source", "Destination", "Weight"],
                [[src, dst, str(weight)] for src, dst, weight in edges.edges()],
            )
        )

        print(f"\nQueries: {len(scenario.queries)}")
        rows = []
        for item in scenario.queries:
            if item.route is not None:
                rows.append([item.name, "route", item.route])
            else:
                assert item.query is not None
                kind = "shortest" if item.query.shortest_route else "routes"
                rows.append([item.name, kind, item.query.describe()])
        if rows:
            print(_format_table(["Name", "Kind", "Query"], rows))

    except FileNotFoundError:
        logger.error(f"Scenario file not found: {path}")
        print(f"❌ ERROR: Scenario file not found: {path}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to inspect scenario: {type(e).__name__}: {e}")
        print(f"❌ ERROR: Failed to inspect scenario: {type(e).__name__}: {e}")
        sys.exit(1)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``railgraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="railgraph",
        description="Cost and enumerate routes through a rail graph.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Suppress console output (logs only)"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{run,inspect}",
        help="Available commands",
    )

    run_parser = subparsers.add_parser("run", help="Run a scenario")
    run_parser.add_argument("scenario", type=Path, help="Path to scenario YAML")
    run_parser.add_argument(
        "--results",
        "-r",
        type=Path,
        default=None,
        help="Export results to JSON file (default: <scenario_name>.results.json)",
    )
    run_parser.add_argument(
        "--no-results",
        action="store_true",
        help="Disable results file generation",
    )
    run_parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print results to stdout",
    )
    run_parser.add_argument(
        "--keys",
        "-k",
        nargs="+",
        help="Filter output to these query names",
    )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Validate a scenario and show its graph and queries"
    )
    inspect_parser.add_argument("scenario", type=Path, help="Path to scenario YAML")

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        enable_debug_logging()
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        disable_debug_logging()

    if args.command == "run":
        _run_scenario(
            path=args.scenario,
            results_override=args.results,
            no_results=args.no_results,
            stdout=args.stdout,
            keys=args.keys,
        )
    elif args.command == "inspect":
        _inspect_scenario(args.scenario)


if __name__ == "__main__":
    main()
