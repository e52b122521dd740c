"""
Command-line entry point.

Usage:
    python -m crt_solver                               # built-in default system
    python -m crt_solver --system three_moduli
    python -m crt_solver --list-systems
    python -m crt_solver --config configs/three_moduli.yaml
    python -m crt_solver --residues 2 3 --moduli 5 7
    python -m crt_solver --residues 2 3 --moduli 5 7 --method garner --verify
    python -m crt_solver --output-dir ./outputs/run1   # also write JSONL logs
"""

import argparse
import sys
import time
from pathlib import Path
from typing import List, Optional

from .config import SystemConfig, load_config, system_config
from .constants import DEFAULT_SYSTEM, SYSTEMS_REGISTRY
from .crt.solve import METHODS, format_solution, solve_congruences
from .crt.verify import verify_solution
from .errors import CrtError
from .logging import RunLogger, create_manifest


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="crt-solve",
        description="Solve simultaneous congruences with the Chinese "
                    "Remainder Theorem",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--system", type=str, default=None,
                        help=f"Built-in system name (default: {DEFAULT_SYSTEM})")
    source.add_argument("--config", type=str, default=None,
                        help="YAML file describing the system")
    source.add_argument("--list-systems", action="store_true",
                        help="List built-in systems and exit")
    parser.add_argument("--residues", type=int, nargs="+", default=None,
                        help="Residues a_1 .. a_n (requires --moduli)")
    parser.add_argument("--moduli", type=int, nargs="+", default=None,
                        help="Moduli m_1 .. m_n (requires --residues)")
    parser.add_argument("--method", choices=METHODS, default=None,
                        help="Reconstruction method (default: summation)")
    parser.add_argument("--no-check", action="store_true",
                        help="Skip the pairwise-coprime check on the moduli")
    parser.add_argument("--verify", action="store_true",
                        help="Check the solution against every congruence")
    parser.add_argument("--output-dir", type=str, default=None,
                        help="Write manifest.json and JSONL logs here")
    return parser


def resolve_config(args: argparse.Namespace,
                   parser: argparse.ArgumentParser) -> SystemConfig:
    if (args.residues is None) != (args.moduli is None):
        parser.error("--residues and --moduli must be given together")

    if args.residues is not None:
        if args.system or args.config:
            parser.error("--residues/--moduli cannot be combined with "
                         "--system or --config")
        config = SystemConfig(residues=args.residues, moduli=args.moduli)
    elif args.config:
        config = load_config(args.config)
    else:
        try:
            config = system_config(args.system or DEFAULT_SYSTEM)
        except KeyError as e:
            parser.error(str(e.args[0]))

    if args.method is not None:
        config.method = args.method
    if args.no_check:
        config.check_coprime = False
    return config


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list_systems:
        print("Available systems:")
        for s in SYSTEMS_REGISTRY:
            print(f"  {s['name']:<14} n={len(s['moduli'])}  {s['description']}")
        return 0

    try:
        config = resolve_config(args, parser)
    except (OSError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    t_start = time.time()
    try:
        solution = solve_congruences(
            config.residues, config.moduli,
            check_coprime=config.check_coprime,
            method=config.method,
        )
    except CrtError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    wall = time.time() - t_start

    print(format_solution(solution))

    report = None
    if args.verify:
        report = verify_solution(solution.x, config.residues, config.moduli)
        status = "PASS" if report["verified"] else "FAIL"
        print(f"[{status}] {report['n'] - len(report['failures'])}"
              f"/{report['n']} congruences hold")

    if args.output_dir:
        output_dir = Path(args.output_dir)
        run_id = f"{config.name}_{int(time.time())}"
        create_manifest(run_id, config.to_dict()).save(
            output_dir / "manifest.json")
        with RunLogger(output_dir) as logger:
            extra = {"run_id": run_id, "name": config.name}
            if report is not None:
                extra["verified"] = report["verified"]
            logger.log_solution(solution, **extra)
            logger.log_metrics({
                "run_id": run_id,
                "wall_time": wall,
                "n": len(config.moduli),
                "modulus_bits": solution.modulus.bit_length(),
            })

    if report is not None and not report["verified"]:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
