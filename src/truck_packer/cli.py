from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Optional, Sequence

from truck_packer.config import configure_logging, get_settings
from truck_packer.errors import PackingError
from truck_packer.io.schemas import Scenario
from truck_packer.metrics import compute_metrics
from truck_packer.packing.engine import pack

logger = logging.getLogger(__name__)


def load_scenario(path: Path) -> Scenario:
    """Read a scenario JSON file (snake_case or camelCase keys)."""
    data = json.loads(path.read_text(encoding="utf-8"))
    scenario = Scenario.model_validate(data)
    logger.info(
        f"Loaded scenario '{scenario.name}': truck {scenario.truck_width} x {scenario.truck_height}, "
        f"{len(scenario.items)} item rows"
    )
    return scenario


def write_result(result: dict, path: str = "result.json") -> None:
    """
    Write a packing result dictionary to a JSON file.

    Creates parent folders if needed, writes JSON with indent=2 and sort_keys=True,
    and overwrites the file on every run.
    """
    output_path = Path(path).resolve()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    logger.debug(f"write_result: writing to {output_path}")
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(result, f, indent=2, sort_keys=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Truck Packer CLI")
    parser.add_argument("--input", required=True, type=Path, help="Input scenario JSON file")
    parser.add_argument("--output", required=True, help="Output result JSON file")
    parser.add_argument(
        "--strategy",
        choices=["best_fit", "shelf"],
        default=None,
        help="best_fit = best short side fit over free rectangles, shelf = row-based placement",
    )
    parser.add_argument(
        "--sort-by-area",
        action="store_true",
        help="Place larger items first instead of keeping input order",
    )
    parser.add_argument(
        "--no-rotate",
        action="store_true",
        help="Never swap item width and height",
    )
    parser.add_argument(
        "--margin",
        type=float,
        default=None,
        help="Clearance added to every item (overrides the scenario)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(settings)

    if not args.input.is_file():
        parser.error(f"input file not found: {args.input}")

    scenario = load_scenario(args.input)

    # Command-line flags override the scenario
    updates: dict = {}
    if args.strategy:
        updates["strategy"] = args.strategy
    if args.sort_by_area:
        updates["sort_by_area"] = True
    if args.no_rotate:
        updates["allow_rotate"] = False
    if args.margin is not None:
        if args.margin < 0:
            parser.error("--margin must be >= 0")
        updates["margin"] = args.margin
    if updates:
        scenario = scenario.model_copy(update=updates)

    options = scenario.to_options(default_strategy=settings.default_strategy)
    try:
        result = pack(scenario.to_items(), scenario.truck_width, scenario.truck_height, options)
    except PackingError as e:
        logger.error(f"Packing failed: {e}")
        return 1

    metrics = compute_metrics(result, scenario.truck_width, scenario.truck_height)
    output = {
        "scenario": scenario.name,
        "truck": {"width": scenario.truck_width, "height": scenario.truck_height},
        "options": options.model_dump(),
        "count": result.count,
        "containers": [[p.model_dump() for p in placed] for placed in result.containers],
        "metrics": metrics,
    }
    write_result(output, args.output)

    summary = {k: v for k, v in metrics.items() if k != "containers"}
    print(json.dumps(summary, indent=2, sort_keys=True))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
