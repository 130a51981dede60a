from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path
from typing import List, Optional

# Ensure project root is on path when running this script directly
_script_dir = Path(__file__).resolve().parent
_project_root = _script_dir.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from mars_rover.command import Command, format_commands, parse_commands
from mars_rover.config import SimConfig, config_from_dict, load_config, resolve_map_path
from mars_rover.coordinate import Coordinate
from mars_rover.errors import RoverError
from mars_rover.grid import Grid
from mars_rover.map_generator import generate_random_map
from mars_rover.orientation import Orientation
from mars_rover.rover import Rover
from telemetry.logger import TelemetryLogger


def build_grid(cfg: SimConfig) -> Grid:
    grid_cfg = cfg.grid
    if grid_cfg.random_density is not None:
        data = generate_random_map(
            width=grid_cfg.width,
            height=grid_cfg.height,
            density=grid_cfg.random_density,
            rng=random.Random(grid_cfg.random_seed),
            keep_clear=[Coordinate(cfg.rover.x, cfg.rover.y).as_tuple()],
        )
        return Grid.from_map_dict(data)
    return Grid.from_map_file(resolve_map_path(grid_cfg.map))


def print_report(rover: Rover, commands: List[Command], applied: int) -> None:
    failure = rover.last_failure_position()
    print()
    print("=" * 48)
    print("ROVER REPORT")
    print("=" * 48)
    print(f"  Commands:        {format_commands(commands)} ({applied}/{len(commands)} applied)")
    print(f"  Final position:  {rover.current_position()}")
    print(f"  Final heading:   {rover.current_orientation().name}")
    print(f"  Last failure:    {failure if failure is not None else 'none'}")
    print("=" * 48)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Drive a rover across a grid map.")
    parser.add_argument("commands", nargs="?", default=None, help="Command letters, e.g. FFRBL.")
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to rover YAML config (e.g. configs/rover.yaml).",
    )
    parser.add_argument("--map", type=str, default=None, help="Bundled map name or JSON map path.")
    parser.add_argument(
        "--start",
        nargs=3,
        metavar=("X", "Y", "HEADING"),
        default=None,
        help="Start cell and heading letter (N/E/S/W).",
    )
    parser.add_argument("--random-density", type=float, default=None, help="Random obstacle density.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for random obstacles.")
    parser.add_argument("--telemetry", type=str, default=None, help="JSONL telemetry output path.")
    parser.add_argument("--render", action="store_true", help="Show the pygame viewer.")
    args = parser.parse_args(argv)

    try:
        cfg = load_config(args.config) if args.config else config_from_dict({})
        if args.map is not None:
            cfg.grid.map = args.map
        if args.random_density is not None:
            cfg.grid.random_density = args.random_density
        if args.seed is not None:
            cfg.grid.random_seed = args.seed
        if args.start is not None:
            cfg.rover.x = int(args.start[0])
            cfg.rover.y = int(args.start[1])
            cfg.rover.heading = args.start[2]
        if args.commands is not None:
            cfg.rover.commands = args.commands
        if args.telemetry is not None:
            cfg.telemetry.path = args.telemetry
        if args.render:
            cfg.render.enabled = True

        commands = parse_commands(cfg.rover.commands)
        heading = Orientation.from_letter(cfg.rover.heading)
        grid = build_grid(cfg)
        rover = Rover(cfg.rover.x, cfg.rover.y, heading, grid)
    except (RoverError, OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    print(f"Grid {grid.width}x{grid.height}, rover at {rover.current_position()} facing {heading.name}")

    logger = TelemetryLogger(cfg.telemetry.path) if cfg.telemetry.path else None
    renderer = None
    if cfg.render.enabled:
        from mars_rover.render import GridRenderer

        renderer = GridRenderer(grid, cell_size=cfg.render.cell_size)
        renderer.draw(rover, label="start")
        renderer.tick(cfg.render.fps)

    applied = 0

    def on_step(idx: int, command: Command, succeeded: bool, r: Rover) -> None:
        nonlocal applied, renderer
        applied = idx + 1
        status = "ok" if succeeded else f"blocked by obstacle at {r.last_failure_position()}"
        print(f"  [{idx + 1}] {command.letter} -> {r.current_position()} {r.current_orientation().letter} ({status})")
        if logger is not None:
            logger.log_step(idx, command, succeeded, r)
        if renderer is not None:
            if not renderer.pump():
                # window closed; finish the run headless
                renderer.close()
                renderer = None
                return
            renderer.draw(r, label=command.letter)
            renderer.tick(cfg.render.fps)

    try:
        rover.execute_commands(commands, on_step=on_step)
        if logger is not None:
            logger.log_summary(rover, len(commands), applied)
    finally:
        if logger is not None:
            logger.close()

    print_report(rover, commands, applied)

    if renderer is not None:
        print("Close the window or press ESC to exit.")
        while renderer.pump():
            renderer.draw(rover, label="done")
            renderer.tick(cfg.render.fps)
        renderer.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
