"""Simple CLI entry to exercise the trip planner."""

import argparse
import json
import logging
import sys
from pathlib import Path

from trip_planner import TripRequest, ValidationError, generate_travel_plan
from trip_planner.config import get_settings


def load_request(path: Path) -> TripRequest:
    data = json.loads(path.read_text())
    return TripRequest(
        destination=data.get("destination"),
        start_date=data.get("startDate"),
        end_date=data.get("endDate"),
        budget=data.get("budget"),
        travel_style=data.get("travelStyle"),
        travel_type=data.get("travelType"),
        constraints=data.get("constraints"),
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate a travel plan from a JSON request.")
    parser.add_argument("request_file", type=Path, help="Path to a JSON file describing the trip request")
    parser.add_argument("--output", type=Path, help="Optional path to save the travel plan JSON")
    args = parser.parse_args()

    logging.basicConfig(
        level=get_settings().log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        plan = generate_travel_plan(load_request(args.request_file))
    except ValidationError as exc:
        for error in exc.errors:
            print(f"- {error}", file=sys.stderr)
        sys.exit(2)
    result = json.dumps(plan, indent=2, ensure_ascii=False)

    if args.output:
        args.output.write_text(result)
        print(f"Travel plan saved to {args.output}")
    else:
        print(result)


if __name__ == "__main__":
    main()
