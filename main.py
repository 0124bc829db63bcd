#!/usr/bin/env python3
"""
Tree Trip Planner
=================
Main entry point: load or generate an instance, run the search, and
print the answer with timing.
"""

import argparse
import json
import logging
import sys
import time
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from config import Config
from search_engine import plan_trip
from tree_generators import generate
from utils import ValidationError, load_json, load_yaml, save_json, setup_logging

# Setup logging
logger = logging.getLogger(__name__)

SHAPES = ["demo", "straight", "star", "low-root", "random"]


def load_instance(filepath: str) -> Dict:
    """Load an instance with keys K, C and D from a JSON or YAML file."""
    path = Path(filepath)
    try:
        if path.suffix in ('.yml', '.yaml'):
            data = load_yaml(path)
        elif path.suffix == '.json':
            data = load_json(path)
        else:
            raise ValidationError(f"Unsupported instance file format: {filepath}")
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ValidationError(f"Cannot parse instance file {filepath}: {e}") from e

    if not isinstance(data, dict):
        raise ValidationError(f"Instance file must hold a mapping, got {type(data).__name__}")
    missing = [key for key in ('C', 'D') if key not in data]
    if missing:
        raise ValidationError(f"Instance file is missing keys: {', '.join(missing)}")

    return {
        'K': data.get('K', Config.get('SEARCH.default_max_cities')),
        'C': list(data['C']),
        'D': list(data['D']),
    }


def build_instance(args: argparse.Namespace) -> Dict:
    """Instance from --input or --shape, with -k applied on top."""
    if args.input:
        instance = load_instance(args.input)
    elif args.shape == 'demo':
        instance = {key: (list(value) if isinstance(value, list) else value)
                    for key, value in Config.DEMO.items()}
    else:
        size = args.size or Config.get('GENERATORS.default_size')
        seed = args.seed if args.seed is not None else Config.get('GENERATORS.seed')
        links, weights = generate(args.shape, size, seed=seed)
        instance = {
            'K': Config.get('SEARCH.default_max_cities'),
            'C': links.tolist(),
            'D': weights.tolist(),
        }

    if args.max_cities is not None:
        instance['K'] = args.max_cities
    return instance


def format_array(name: str, values: List[int]) -> str:
    """Render an array as name[n] = [a,b,c]."""
    return f"{name}[{len(values)}] = [{','.join(str(v) for v in values)}]"


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Largest connected, attractiveness-closed trip plan in a road tree",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                   # Solve the demo instance
  %(prog)s --input trip.json                 # Solve an instance file (keys K, C, D)
  %(prog)s --shape straight --size 12 -k 5   # Solve a generated line
  %(prog)s --shape random --seed 7 --output result.json
        """
    )

    parser.add_argument(
        "--input",
        help="Path to a JSON or YAML instance file with keys K, C and D"
    )

    parser.add_argument(
        "--shape",
        choices=SHAPES,
        default="demo",
        help="Generated instance shape when no input file is given (default: demo)"
    )

    parser.add_argument(
        "--size",
        type=int,
        help=f"Number of cities for generated shapes (default: {Config.get('GENERATORS.default_size')})"
    )

    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for the random shape"
    )

    parser.add_argument(
        "-k", "--max-cities",
        type=int,
        help="Maximum number of cities in the trip plan (overrides the instance K)"
    )

    parser.add_argument(
        "--output",
        help="Save the result as JSON at this path"
    )

    parser.add_argument(
        "--config",
        help="Path to configuration file"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )

    args = parser.parse_args(argv)

    if args.config:
        Config.from_file(args.config)

    # Setup logging
    if args.verbose:
        setup_logging("DEBUG")
    else:
        setup_logging(Config.get('LOGGING.level'))

    try:
        instance = build_instance(args)
        print(format_array("C", instance['C']))
        print(format_array("D", instance['D']))

        time1 = time.time()
        result = plan_trip(instance['K'], instance['C'], instance['D'])
        time2 = time.time()
    except (ValidationError, FileNotFoundError) as e:
        logger.error(f"Invalid instance: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    elapsed_ms = int((time2 - time1) * 1000)
    result['elapsed_ms'] = elapsed_ms

    print(f"Answer {result['answer']}  {elapsed_ms}ms")
    print(f"Cities: {result['cities']}")

    if args.output:
        save_json(result, args.output)
        logger.info(f"Saved result to {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
