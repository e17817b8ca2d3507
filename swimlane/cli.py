"""
Swimlane Timeline CLI
=====================

Command-line access to the lane allocator and dataset builder.

COMMANDS:
- sample:  Generate a random board document
- lanes:   Print the lane table for a board document
- render:  Write the render payload (or chart config) as JSON

USAGE:
    python -m swimlane.cli [COMMAND] [ARGS]
"""
import argparse
import json
import logging
import sys
from typing import Dict, List, Optional

from renderer.mapper import to_chart_config

from .contracts.layout import LaneAssignment
from .core.allocation import lane_counts
from .domain.serialization import board_from_dict, board_to_dict, dumps, payload_to_dict
from .engine import TimelineBoard, TimelineConfig
from .sampling import SampleConfig


def load_board(path: str, config: TimelineConfig) -> Optional[TimelineBoard]:
    """Load a board document; prints the reason and returns None on failure."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        groups, events = board_from_dict(data)
    except FileNotFoundError:
        print(f"[!] No such file: {path}")
        return None
    except ValueError as e:
        print(f"[!] Could not read board document: {e}")
        return None

    board = TimelineBoard(config)
    board.load(groups, events)
    return board


def write_output(text: str, out: Optional[str]):
    if out:
        with open(out, 'w', encoding='utf-8') as f:
            f.write(text)
        print(f"[*] Wrote {out}")
    else:
        print(text)


def cmd_sample(args, config: TimelineConfig) -> int:
    board = TimelineBoard(config)
    seed = args.seed if args.seed is not None else config.sample.seed
    board.seed_sample(SampleConfig(event_count=args.events, group_count=args.groups, seed=seed))
    write_output(json.dumps(board_to_dict(board.groups, board.events), indent=2), args.out)
    return 0


def cmd_lanes(args, config: TimelineConfig) -> int:
    board = load_board(args.file, config)
    if board is None:
        return 1

    assignments = board.assignments()
    counts = lane_counts(assignments)
    fmt = config.time_format

    rows_by_group: Dict[str, List[LaneAssignment]] = {group: [] for group in board.groups}
    for a in assignments:
        rows_by_group.setdefault(a.group, []).append(a)

    print("GROUP | LANE | EVENT | START | END")
    print("-" * 80)
    for group, rows in rows_by_group.items():
        # Assignments are start-ordered already; the sort is stable
        for a in sorted(rows, key=lambda a: a.lane_index):
            print(f"{group} | {a.lane_id} | {a.event.name} | "
                  f"{a.event.start.strftime(fmt)} | {a.event.end.strftime(fmt)}")

    print(f"\n[*] {len(assignments)} events on {sum(counts.values())} lanes "
          f"across {len(counts)} groups.")
    return 0


def cmd_render(args, config: TimelineConfig) -> int:
    board = load_board(args.file, config)
    if board is None:
        return 1

    payload = board.compute()
    if args.chart:
        document = to_chart_config(payload, board.window, args.title)
    else:
        document = payload_to_dict(payload)
    write_output(dumps(document, indent=2), args.out)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Swimlane Timeline")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command")

    sample_parser = subparsers.add_parser("sample", help="Generate a random board")
    sample_parser.add_argument("--events", type=int, default=20)
    sample_parser.add_argument("--groups", type=int, default=5)
    sample_parser.add_argument("--seed", type=int, default=None)
    sample_parser.add_argument("--out", default=None, help="Output file (stdout if omitted)")

    lanes_parser = subparsers.add_parser("lanes", help="Print lane assignments")
    lanes_parser.add_argument("file", help="Board document (JSON)")

    render_parser = subparsers.add_parser("render", help="Write the render payload")
    render_parser.add_argument("file", help="Board document (JSON)")
    render_parser.add_argument("--chart", action="store_true", help="Emit chart configuration")
    render_parser.add_argument("--title", default="Timeline")
    render_parser.add_argument("--out", default=None, help="Output file (stdout if omitted)")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    config = TimelineConfig.from_env()

    if args.command == "sample":
        return cmd_sample(args, config)
    elif args.command == "lanes":
        return cmd_lanes(args, config)
    elif args.command == "render":
        return cmd_render(args, config)
    else:
        parser.print_help()
        return 2


if __name__ == "__main__":
    sys.exit(main())
