from __future__ import annotations

"""CLI entry point for scalegen."""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .config.config import ConfigError, load_config, validate_config
from .theory.chromatic import find_chromatic_scale, scale
from .theory.errors import ScaleError
from .theory.patterns import list_patterns, pattern_for

logger = logging.getLogger(__name__)


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Generate musical scales from a tonic and a step pattern")
    p.add_argument("--config", type=str, default=None, help="Path to YAML config")
    p.add_argument("--tonic", type=str, default=None, help="Tonic note, e.g. C, F#, bb")
    group = p.add_mutually_exclusive_group()
    group.add_argument("--pattern", type=str, default=None, help="Step pattern of m/M/A, e.g. MMmMMMm")
    group.add_argument("--name", type=str, default=None, help="Named scale from the catalogue, e.g. dorian")
    group.add_argument("--chromatic", action="store_true", help="Print the chromatic scale for the tonic")
    group.add_argument("--list", action="store_true", help="List named scales and exit")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    return p.parse_args(argv)


def run(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    if args.version:
        print(f"scalegen {__version__}")
        return 0

    try:
        cfg = validate_config(load_config(args.config))
    except ConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(level=cfg.log_level, format="%(levelname)s %(name)s: %(message)s")

    tonic = args.tonic if args.tonic is not None else cfg.tonic
    try:
        if args.list:
            for name in list_patterns(cfg.patterns_path):
                print(f"{name}: {pattern_for(name, cfg.patterns_path)}")
            return 0
        if args.chromatic:
            notes = find_chromatic_scale(tonic)
        else:
            if args.pattern is not None:
                pattern = args.pattern
            elif args.name is not None:
                pattern = pattern_for(args.name, cfg.patterns_path)
            elif cfg.pattern is not None:
                pattern = cfg.pattern
            else:
                pattern = pattern_for(cfg.name or "major", cfg.patterns_path)
            logger.info("Building scale from %s with pattern %s", tonic, pattern)
            notes = scale(tonic, pattern)
    except (ScaleError, OSError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    print(" ".join(notes))
    return 0


def cli() -> None:
    sys.exit(run())


if __name__ == "__main__":
    cli()
