"""mazegen CLI entry point.

Subcommands for generating a maze grid, querying shortest paths through it,
and running structural diagnostics across seeds. Accepts configuration via
flags and ``MAZEGEN_*`` environment variables, with optional .env loading.

Run `python run.py --help` for details.
"""

import argparse
import json
import os
import sys
from textwrap import dedent

from colorama import Fore, Style
from colorama import init as _color_init
from dotenv import load_dotenv

from mazegen import __version__ as _package_version
from mazegen.logging_utils import configure as configure_logging
from mazegen.logging_utils import env_flag
from mazegen.logging_utils import get_logger
from mazegen.maze import Algorithm, GenerationConfig, MazeGridData, Pathfinder, generate_maze
from mazegen.maze.analysis import analyze
from mazegen.maze.grid_data import END_CHAR, PATH_CHAR, START_CHAR

log = get_logger("cli")

DEFAULT_DIAGNOSE_SEEDS = [1, 42, 12345]


def _load_version() -> str:
    try:
        with open(os.path.join(os.path.dirname(os.path.abspath(__file__)), "VERSION"), "r", encoding="utf-8") as f:
            return f.read().strip()
    except OSError:
        return _package_version


__version__ = _load_version()


def _color_enabled() -> bool:
    # Disable colors if output is not a real terminal (e.g., during pytest capture)
    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


def _add_generation_flags(p: argparse.ArgumentParser) -> None:
    p.add_argument("--seed", type=int, default=None, help="Random seed (default: env MAZEGEN_SEED or 12345)")
    p.add_argument("--width", type=int, default=None, help="Grid width in cells (default: env MAZEGEN_WIDTH or 21)")
    p.add_argument("--height", type=int, default=None, help="Grid height in cells (default: env MAZEGEN_HEIGHT or 21)")
    p.add_argument(
        "--algorithm",
        type=Algorithm.parse,
        default=None,
        help="backtracker | prims | kruskals (default: env MAZEGEN_ALGORITHM or backtracker)",
    )
    p.add_argument("--cell-size", dest="cell_size", type=float, default=None, help="World units per cell (default: 200)")
    p.add_argument(
        "--wall-height", dest="wall_height", type=float, default=None, help="Wall height in world units (default: 300)"
    )


def parse_args(argv: list) -> argparse.Namespace:
    description = """
    mazegen: seeded maze generation and shortest-path queries

    Generate a floor/wall grid with one of three spanning-tree algorithms,
    save it as a JSON document, and query breadth-first shortest paths.
    If both CLI flags and environment variables are present, flags win.
    """

    epilog = dedent(
        """
        Environment variables:
          MAZEGEN_SEED, MAZEGEN_WIDTH, MAZEGEN_HEIGHT, MAZEGEN_ALGORITHM,
          MAZEGEN_CELL_SIZE, MAZEGEN_WALL_HEIGHT   Generation defaults
          MAZEGEN_LOG_LEVEL                        debug | info | warn | error
          MAZEGEN_LOG_JSON                         1 to emit JSON log lines

        Examples:
          # Print a 21x21 backtracker maze
          python run.py generate --seed 7

          # Save a Kruskal maze as JSON
          python run.py generate --algorithm kruskals --output maze.json

          # Shortest path through a saved maze
          python run.py path --input maze.json --start 0 0 --end 20 20

          # Structural checks for a few seeds across all algorithms
          python run.py diagnose 1 2 3
        """
    )

    parser = argparse.ArgumentParser(
        prog="mazegen",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("--env-file", dest="env_file", help="Path to a .env file to load before processing flags")
    parser.add_argument("--version", action="version", version=f"mazegen {__version__}")
    parser.add_argument(
        "--log-level", dest="log_level", choices=["debug", "info", "warn", "error"], default=None, help="Log threshold"
    )
    parser.add_argument("--log-json", dest="log_json", action="store_true", help="Emit log lines as JSON")

    subparsers = parser.add_subparsers(dest="command")

    gen_parser = subparsers.add_parser(
        "generate",
        help="Generate a maze and print it",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Generate a maze grid; print ASCII (default), JSON, or write a JSON document.",
    )
    _add_generation_flags(gen_parser)
    gen_parser.add_argument("--json", action="store_true", help="Print the grid document as JSON")
    gen_parser.add_argument("--output", default=None, help="Write the grid document to this path")
    gen_parser.set_defaults(command="generate")

    path_parser = subparsers.add_parser(
        "path",
        help="Find the shortest path between two cells",
        formatter_class=argparse.RawTextHelpFormatter,
        description=dedent(
            """
            Load a saved grid (--input) or generate one from the flags, then run a
            breadth-first search. Defaults to (0,0) -> the last floor cell.
            """
        ),
    )
    _add_generation_flags(path_parser)
    path_parser.add_argument("--input", default=None, help="Grid document written by 'generate --output'")
    path_parser.add_argument("--start", nargs=2, type=int, metavar=("X", "Y"), default=None, help="Start cell")
    path_parser.add_argument("--end", nargs=2, type=int, metavar=("X", "Y"), default=None, help="End cell")
    path_parser.add_argument(
        "--from-world",
        dest="from_world",
        nargs=2,
        type=float,
        metavar=("X", "Y"),
        default=None,
        help="Start from a world position (snapped to the nearest floor cell)",
    )
    path_parser.set_defaults(command="path")

    diag_parser = subparsers.add_parser(
        "diagnose",
        help="Structural checks for a list of seeds",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Verify spanning-tree, symmetry and expansion invariants; exits 1 on any issue.",
    )
    diag_parser.add_argument("seeds", nargs="*", type=int, help=f"Seeds to check (default: {DEFAULT_DIAGNOSE_SEEDS})")
    diag_parser.add_argument("--width", type=int, default=21, help="Grid width in cells (default: 21)")
    diag_parser.add_argument("--height", type=int, default=21, help="Grid height in cells (default: 21)")
    diag_parser.add_argument(
        "--algorithm", type=Algorithm.parse, default=None, help="Restrict to one algorithm (default: all)"
    )
    diag_parser.set_defaults(command="diagnose")

    args = parser.parse_args(argv)
    # If no subcommand provided, default to generate
    if args.command is None:
        args = parser.parse_args(list(argv) + ["generate"])
    return args


def _config_from_args(args: argparse.Namespace) -> GenerationConfig:
    cfg = GenerationConfig.from_env()
    for attr in ("seed", "width", "height", "algorithm", "cell_size", "wall_height"):
        val = getattr(args, attr, None)
        if val is not None:
            setattr(cfg, attr, val)
    return cfg


def _error(message: str) -> None:
    prefix = f"{Fore.RED}[ERROR]{Style.RESET_ALL}" if _color_enabled() else "[ERROR]"
    print(f"{prefix} {message}", file=sys.stderr)


def _render(data: MazeGridData, path=None) -> str:
    text = data.to_ascii(path)
    if not (_color_enabled() and path):
        return text
    colored = {
        PATH_CHAR: f"{Fore.YELLOW}{PATH_CHAR}{Style.RESET_ALL}",
        START_CHAR: f"{Fore.GREEN}{Style.BRIGHT}{START_CHAR}{Style.RESET_ALL}",
        END_CHAR: f"{Fore.RED}{Style.BRIGHT}{END_CHAR}{Style.RESET_ALL}",
    }
    return "".join(colored.get(ch, ch) for ch in text)


def _summary(data: MazeGridData) -> str:
    color = _color_enabled()

    def label(text: str) -> str:
        return f"{Fore.YELLOW}{text}{Style.RESET_ALL}" if color else text

    def value(val) -> str:
        return f"{Fore.GREEN}{val}{Style.RESET_ALL}" if color else str(val)

    divider = (Fore.MAGENTA + "=" * 40 + Style.RESET_ALL) if color else "=" * 40
    lines = [
        divider,
        f"  {label('Seed:'):12} {value(data.seed)}",
        f"  {label('Algorithm:'):12} {value(Algorithm(data.algorithm).value)}",
        f"  {label('Size:'):12} {value(f'{data.width}x{data.height}')}",
        f"  {label('Floors:'):12} {value(data.floor_count())}",
        f"  {label('Walls:'):12} {value(data.wall_count())}",
        divider,
    ]
    return "\n".join(lines)


def _generate(cfg: GenerationConfig):
    result = generate_maze(cfg)
    if not result.ok:
        _error(f"{result.error.value}: width={cfg.width} height={cfg.height} cell_size={cfg.cell_size}")
        return None
    return MazeGridData.from_generation(result.config, result.cells)


def _cmd_generate(args: argparse.Namespace) -> int:
    data = _generate(_config_from_args(args))
    if data is None:
        return 1
    if args.output:
        try:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(data.to_json(indent=2))
        except OSError as e:
            _error(f"cannot write {args.output}: {e}")
            return 1
        print(_summary(data))
        print(f"Wrote {args.output}")
        return 0
    if args.json:
        print(data.to_json(indent=2))
        return 0
    print(_summary(data))
    print(_render(data))
    return 0


def _cmd_path(args: argparse.Namespace) -> int:
    if args.input:
        try:
            with open(args.input, "r", encoding="utf-8") as f:
                data = MazeGridData.from_json(f.read())
        except OSError as e:
            _error(f"cannot read {args.input}: {e}")
            return 1
        except ValueError as e:
            _error(f"invalid grid document {args.input}: {e}")
            return 1
    else:
        data = _generate(_config_from_args(args))
        if data is None:
            return 1

    pf = Pathfinder()
    if not pf.load(data):
        _error("grid document is inconsistent")
        return 1
    if args.end is not None:
        end = tuple(args.end)
    else:
        floors = [c for c in data.cells if c.is_floor]
        end = floors[-1].grid_position if floors else (data.width - 1, data.height - 1)
    if args.from_world is not None:
        result = pf.find_path_from_world(args.from_world, end)
    else:
        start = tuple(args.start) if args.start is not None else (0, 0)
        result = pf.find_path(start, end)

    if not result.success:
        _error(f"{result.error.value}: no path to {tuple(end)}")
        return 1
    print(_render(data, result.path))
    first, last = result.path[0], result.path[-1]
    print(f"length={result.length} start=({first.x},{first.y}) end=({last.x},{last.y})")
    return 0


def _cmd_diagnose(args: argparse.Namespace) -> int:
    seeds = args.seeds or DEFAULT_DIAGNOSE_SEEDS
    algorithms = [args.algorithm] if args.algorithm else list(Algorithm)
    results = []
    for seed in seeds:
        for algorithm in algorithms:
            cfg = GenerationConfig(seed=seed, width=args.width, height=args.height, algorithm=algorithm)
            gen = generate_maze(cfg, collect_metrics=False)
            if not gen.ok:
                results.append({"seed": seed, "algorithm": algorithm.value, "error": gen.error.value, "ok": False})
                continue
            report = analyze(gen.rooms, gen.cells, cfg.width, cfg.height)
            results.append({"seed": seed, "algorithm": algorithm.value, **report})
    print(json.dumps({"results": results}, indent=2))
    return 0 if all(r["ok"] for r in results) else 1


def main(argv: list) -> int:
    args = parse_args(argv)
    # Load .env if requested, otherwise a default .env if present (no error if missing)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        load_dotenv()
    # MAZEGEN_LOG_* may come from the .env loaded above; warn when unset
    level = args.log_level or os.getenv("MAZEGEN_LOG_LEVEL", "").strip() or "warn"
    json_mode = args.log_json or env_flag(os.getenv("MAZEGEN_LOG_JSON"))
    try:
        configure_logging(level=level, json_mode=json_mode)
    except ValueError as e:
        _error(f"MAZEGEN_LOG_LEVEL: {e}")
        return 2
    if _color_enabled():
        _color_init()  # pragma: no cover - terminal dependent

    mode = (getattr(args, "command", None) or "generate").lower()
    log.debug(event="startup", mode=mode, version=__version__)
    try:
        if mode == "path":
            return _cmd_path(args)
        if mode == "diagnose":
            return _cmd_diagnose(args)
        return _cmd_generate(args)
    except ValueError as e:
        # Bad MAZEGEN_* environment values surface here
        _error(str(e))
        return 2


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
