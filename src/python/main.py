#!/usr/bin/env python3
"""
===============================================================================
HAMILTON - DEMONSTRATION PROGRAM
===============================================================================
Walks through the public quaternion API: accessors, norm and modulus,
conjugate, normalization, inverse, the four arithmetic operators against
quaternions, scalars and complex pairs, complex-pair construction and the
NaN/infinity predicates.

USAGE:
    python main.py                          # Default operands
    python main.py --config my_demo.yaml    # Operands from another file
    python main.py --verbose                # DEBUG logging

CONFIG:
    config/demo_config.yaml - quaternions (components + dtype), complex
    pairs and scalars used by the demonstration.

DEPENDENCIES:
    numpy, pyyaml
    Install: pip install numpy pyyaml

===============================================================================
"""

import sys
import argparse
import logging
from pathlib import Path
from typing import Dict, List

import yaml

# ---------------------------------------------------------------------------
# Path setup: ensure the hamilton package is importable from a checkout
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(PROJECT_ROOT))

from hamilton import Quaternion
from hamilton.functions import (
    conj, inverse, isfinite, isinf, isnan, modulus, norm, normalized
)
from hamilton.promotion import check_component_dtype

logger = logging.getLogger('HAMILTON_DEMO')

DEFAULT_CONFIG = PROJECT_ROOT.parent.parent / 'config' / 'demo_config.yaml'

REQUIRED_QUATERNIONS = ('a', 'b', 'c')
REQUIRED_PAIRS = ('ca', 'cb')
REQUIRED_SCALARS = ('offset', 'factor')


def setup_logging(verbose: bool = False) -> None:
    """Configure root logging for the demo run."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)]
    )


def load_config(config_path: str = None) -> dict:
    """
    Load demonstration operands from a YAML file.

    Args:
        config_path: Path to YAML config. Defaults to config/demo_config.yaml

    Returns:
        Dictionary with 'quaternions', 'complex_pairs' and 'scalars' sections

    Raises:
        ValueError: If a required section or operand is missing
    """
    if config_path is None:
        config_path = str(DEFAULT_CONFIG)

    logger.info(f"Loading configuration from: {config_path}")
    with open(config_path, 'r') as f:
        config = yaml.safe_load(f)

    validate_config(config)
    return config


def validate_config(config: dict) -> None:
    """Check that every operand the demonstration uses is present."""
    if not isinstance(config, dict):
        raise ValueError("Demo config must be a mapping of sections.")

    required = {
        'quaternions': REQUIRED_QUATERNIONS,
        'complex_pairs': REQUIRED_PAIRS,
        'scalars': REQUIRED_SCALARS,
    }
    for section, names in required.items():
        entries = config.get(section)
        if not isinstance(entries, dict):
            raise ValueError(f"Demo config is missing section '{section}'.")
        for name in names:
            if name not in entries:
                raise ValueError(f"Demo config section '{section}' is missing '{name}'.")

    for name, entry in config['quaternions'].items():
        components = entry.get('components') if isinstance(entry, dict) else None
        if not isinstance(components, list) or len(components) != 4:
            raise ValueError(f"Quaternion '{name}' needs 4 components, got {components!r}.")

    for name, pair in config['complex_pairs'].items():
        if not isinstance(pair, list) or len(pair) != 2:
            raise ValueError(f"Complex pair '{name}' needs [real, imag], got {pair!r}.")


def build_operands(config: dict) -> Dict[str, object]:
    """
    Build quaternions, complex pairs and scalars from the configuration.

    Returns:
        Flat dictionary of operand name -> value
    """
    operands = {}

    for name, entry in config['quaternions'].items():
        dtype = check_component_dtype(entry.get('dtype', 'float64'))
        operands[name] = Quaternion(*entry['components'], dtype=dtype)
        logger.debug(f"Quaternion {name} = {operands[name]!r}")

    for name, (re, im) in config['complex_pairs'].items():
        operands[name] = complex(re, im)

    for name, value in config['scalars'].items():
        operands[name] = value

    return operands


def format_complex(z) -> str:
    """Complex pair in (real,imag) form."""
    return f"({z.real},{z.imag})"


def run_demo(operands: Dict[str, object]) -> List[str]:
    """
    Evaluate every demonstrated operation.

    Args:
        operands: Output of build_operands()

    Returns:
        One line of text per operation
    """
    a, b, c = operands['a'], operands['b'], operands['c']
    ca, cb = operands['ca'], operands['cb']
    offset, factor = operands['offset'], operands['factor']

    from_pairs = Quaternion(ca, cb)

    lines = [
        f"Real part of {a} is {a.real}",
        f"Unreal part of {b} is {b.unreal}",
        f"Component of {a} is {a.a}, {a.b}, {a.c}, {a.d}",
        f"Norm of {a} is {norm(a)}",
        f"Modulus of {c} is {modulus(c)}",
        f"Conjugate of {b} is {conj(b)}",
        f"Normalization of {b} is {normalized(b)}",
        f"Inverse of {b} is {inverse(b)}",
        f"{a} + {b} = {a + b}",
        f"{a} + {offset} = {a + offset}",
        f"{b} + complex {format_complex(ca)} = {b + ca}",
        f"{a} - {b} = {a - b}",
        f"{a} * {b} = {a * b}",
        f"{a} * {factor} = {a * factor}",
        f"{a} / {b} = {a / b}",
        f"{a} / {factor} = {a / factor}",
        f"{factor} / {b} = {factor / b}",
        f"Construct quaternion from complex {format_complex(ca)} and "
        f"{format_complex(cb)} = {from_pairs}",
        f"Quaternion {from_pairs} has complex component "
        f"{format_complex(from_pairs.complex_a)} and "
        f"{format_complex(from_pairs.complex_b)}",
        f"{a} is NaN? {str(isnan(a)).lower()}",
        f"{a} is infinite? {str(isinf(a)).lower()}",
        f"{a} is finite? {str(isfinite(a)).lower()}",
    ]
    return lines


def main(argv: List[str] = None) -> int:
    """
    Main entry point. Parses command line arguments, loads the operands
    and prints the demonstration.
    """
    parser = argparse.ArgumentParser(
        description='Hamilton quaternion arithmetic demonstration',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                       Default operands
  python main.py --config ops.yaml     Custom operands
  python main.py --verbose             DEBUG logging
        """
    )
    parser.add_argument('--config', type=str, default=None,
                        help='Path to demo config YAML')
    parser.add_argument('--verbose', action='store_true',
                        help='Enable DEBUG logging')

    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    config = load_config(args.config)
    operands = build_operands(config)

    for line in run_demo(operands):
        print(line)

    logger.info("Demonstration complete")
    return 0


if __name__ == '__main__':
    sys.exit(main())
