#!/usr/bin/env python3
"""
GraphAlgo CLI - Watch a search strategy explore a saved graph.

Usage:
    python scripts/visualize.py --graph data/sample_graph.json
    python scripts/visualize.py --graph data/sample_graph.json --strategy astar --speed 2
    python scripts/visualize.py --graph my_graph.json --strategy greedy --no-delay --html results/run.html

Strategies:
    bfs     - Breadth-first: fewest edges from the source first
    dfs     - Depth-first: deepest discovered nodes first
    astar   - A*: travelled distance plus straight-line distance to target
    greedy  - Greedy best-first: straight-line distance to target only

Exit codes:
    0 path found, 1 no path, 2 graph could not be loaded or searched, 130 interrupted
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from graphalgo.config import (  # noqa: E402
    DEFAULT_FRAME_DELAY_MS,
    DEFAULT_STRATEGY,
    LOG_DATE_FORMAT,
    LOG_FORMAT,
    LOG_LEVEL,
    SAMPLE_GRAPH_PATH,
)
from graphalgo.graph import GraphFormatError, load_graph  # noqa: E402
from graphalgo.render import Scene  # noqa: E402
from graphalgo.search import (  # noqa: E402
    SearchEngine,
    SearchPreconditionError,
    TickDriver,
    available_strategies,
    get_strategy,
)


def positive_float(value: str) -> float:
    number = float(value)
    if not number > 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return number


def non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return number


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Visualize a graph search step by step",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--graph",
        type=Path,
        default=SAMPLE_GRAPH_PATH,
        help=f"Graph JSON file (default: {SAMPLE_GRAPH_PATH.name})",
    )
    parser.add_argument(
        "--strategy",
        type=str,
        default=DEFAULT_STRATEGY,
        choices=available_strategies(),
        help=f"Search strategy (default: {DEFAULT_STRATEGY})",
    )
    parser.add_argument(
        "--speed",
        type=positive_float,
        default=1.0,
        help="Playback speed multiplier (default: 1)",
    )
    parser.add_argument(
        "--frame-delay",
        type=non_negative_int,
        default=DEFAULT_FRAME_DELAY_MS,
        help=f"Milliseconds between frames at speed 1 (default: {DEFAULT_FRAME_DELAY_MS})",
    )
    parser.add_argument(
        "--no-delay",
        action="store_true",
        help="Step as fast as possible",
    )
    parser.add_argument(
        "--html",
        type=Path,
        default=None,
        help="Write an animated plotly HTML of the run to this path",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(level=log_level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    try:
        graph = load_graph(args.graph)
    except (OSError, GraphFormatError) as e:
        print(f"Error: could not load {args.graph}: {e}", file=sys.stderr)
        return 2

    strategy = get_strategy(args.strategy)
    scene = Scene(graph, title=f"{strategy.name} on {args.graph.name}")
    engine = SearchEngine(graph)

    try:
        engine.start(strategy)
    except SearchPreconditionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print("\n" + "=" * 60)
    print("GraphAlgo")
    print("=" * 60)
    print(f"  Graph:    {args.graph} ({len(graph)} nodes, {len(graph.edges)} edges)")
    print(f"  Strategy: {strategy.name} - {strategy.description}")
    print("=" * 60 + "\n")

    scene.capture("start")

    def on_step(step) -> None:
        scene.capture(f"step {step.step_number}")
        print(
            f"  Step {step.step_number}: closed #{graph.index_of(step.current)}, "
            f"open {[graph.index_of(n) for n in step.open_nodes]}"
        )

    driver = TickDriver(
        engine,
        frame_delay_ms=0 if args.no_delay else args.frame_delay,
        speed=args.speed,
        on_step=on_step,
    )

    try:
        result = driver.run()
    except KeyboardInterrupt:
        driver.cancel()
        engine.cancel()
        print("\n\nSearch interrupted by user")
        return 130

    if args.html:
        args.html.parent.mkdir(parents=True, exist_ok=True)
        scene.animation().write_html(str(args.html))
        print(f"\nAnimation written to {args.html}")

    print("\n" + "=" * 60)
    if result.solved:
        print(f"Path found in {result.step_count} steps ({result.path_length} edges)")
        print("=" * 60)
        print("\nPath:")
        for i, node in enumerate(result.path):
            marker = " (SOURCE)" if i == 0 else " (TARGET)" if node is result.target else ""
            print(f"  {i}. #{graph.index_of(node)} at ({node.x:g}, {node.y:g}){marker}")
    else:
        print(f"No path found after {result.step_count} steps")
        print("=" * 60)

    print(f"\nSearch time: {result.elapsed_ms:.2f} ms")

    return 0 if result.solved else 1


if __name__ == "__main__":
    sys.exit(main())
