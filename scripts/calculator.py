#!/usr/bin/env python3
"""
Matrix & Vector Calculator

Command-line front end for the matcalc engine. Runs a single matrix or vector
operation from the command line, or starts an interactive session where the
matrix and vectors can be edited, randomized, and cleared between operations.
"""

from __future__ import annotations

import argparse
import copy
import json
import logging
import shlex
import sys
from pathlib import Path
from typing import Dict, List, Optional, TextIO

import numpy as np
import yaml

# Add parent directory to path
sys.path.append(str(Path(__file__).resolve().parent.parent))

from matcalc import formatting, inputs, operations


# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format="[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
    handlers=[
        logging.StreamHandler(),
    ],
)
logger = logging.getLogger("calculator")

DEFAULT_CONFIG = {
    "matrix": {"default_size": 3, "singular_eps": 1e-10},
    "random": {"low": -10, "high": 10, "seed": None},
    "display": {"scalar_decimals": 4, "matrix_decimals": 3},
}

HELP_TEXT = """Commands:
  size N               switch to an NxN matrix (2-5) and clear it
  matrix ROWS          set the matrix, rows separated by ';' (e.g. 1 2; 3 4)
  row I VALUES         set row I (0-based)
  v1 VALUES            set vector 1 (e.g. 1 2 3)
  v2 VALUES            set vector 2
  random [vectors]     fill the matrix (or both vectors) with random integers
  clear [vectors]      reset the matrix (or both vectors) to zeros
  show                 print the current matrix and vectors
  determinant | transpose | adjoint | inverse
  dot | cross | cos | sin
  help                 show this message
  quit                 leave the session"""


def load_config(config_path: Optional[str] = None) -> Dict:
    """Load configuration from YAML file.

    Values missing from the file fall back to DEFAULT_CONFIG.

    Args:
        config_path: Path to configuration file

    Returns:
        Configuration dictionary
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    # Default config path
    if config_path is None:
        default_path = Path(__file__).resolve().parent.parent / "config.yaml"
        if not default_path.exists():
            logger.debug(f"No config file at {default_path}, using defaults")
            return config
        config_path = default_path

    with open(config_path, "r") as f:
        loaded = yaml.safe_load(f) or {}

    for section, values in loaded.items():
        if isinstance(values, dict):
            config.setdefault(section, {}).update(values)
        else:
            config[section] = values

    return config


def make_rng(config: Dict, seed: Optional[int] = None) -> np.random.Generator:
    """Create the random generator, preferring an explicit seed over the config."""
    if seed is None:
        seed = config["random"].get("seed")
    return np.random.default_rng(seed)


def render(name: str, result, config: Dict, as_json: bool = False) -> str:
    """Render a result as display text or JSON."""
    if as_json:
        return json.dumps(formatting.result_to_dict(name, result), indent=2, ensure_ascii=False)
    return formatting.format_result(
        name,
        result,
        scalar_decimals=config["display"]["scalar_decimals"],
        matrix_decimals=config["display"]["matrix_decimals"],
    )


def compute_matrix(args: argparse.Namespace, config: Dict):
    """Build the input matrix from arguments and run the requested operation.

    Returns:
        Tuple of (input_matrix, result)
    """
    size = args.size or config["matrix"]["default_size"]
    if args.random:
        M = inputs.random_matrix(
            size,
            low=config["random"]["low"],
            high=config["random"]["high"],
            rng=make_rng(config, args.seed),
        )
    else:
        M = inputs.parse_matrix(args.values or "", size)

    logger.info(f"Running {args.operation} on {size}x{size} matrix")
    kwargs = {}
    if args.operation == "inverse":
        kwargs["eps"] = config["matrix"]["singular_eps"]
    result = operations.run_matrix_operation(args.operation, M, **kwargs)
    return M, result


def compute_vector(args: argparse.Namespace, config: Dict):
    """Build the input vectors from arguments and run the requested operation.

    Returns:
        Tuple of (v1, v2, result)
    """
    if args.random:
        v1, v2 = inputs.random_vectors(
            low=config["random"]["low"],
            high=config["random"]["high"],
            rng=make_rng(config, args.seed),
        )
    else:
        v1 = inputs.parse_vector(args.v1 or "")
        v2 = inputs.parse_vector(args.v2 or "")

    logger.info(f"Running {args.operation} on vectors")
    result = operations.run_vector_operation(args.operation, v1, v2)
    return v1, v2, result


class CalculatorSession:
    """Interactive calculator state: one matrix and two vectors.

    Each command line is handled by execute(), which returns the text to show.
    """

    def __init__(self, config: Dict, rng: Optional[np.random.Generator] = None):
        self.config = config
        self.rng = rng if rng is not None else make_rng(config)
        self.size = inputs.check_size(config["matrix"]["default_size"])
        self.matrix = inputs.zero_matrix(self.size)
        self.v1 = inputs.zero_vector()
        self.v2 = inputs.zero_vector()
        self.running = True

    def _decimals(self) -> int:
        return self.config["display"]["matrix_decimals"]

    def show(self) -> str:
        """Describe the current inputs."""
        return (
            f"Matrix ({self.size}x{self.size}):\n"
            f"{formatting.format_matrix(self.matrix, self._decimals())}\n"
            f"Vector 1: {formatting.format_vector(self.v1, self._decimals())}\n"
            f"Vector 2: {formatting.format_vector(self.v2, self._decimals())}"
        )

    def execute(self, line: str) -> str:
        """Handle one command line.

        Args:
            line: Command text

        Returns:
            Output to display (empty for blank lines)
        """
        try:
            parts = shlex.split(line)
        except ValueError as e:
            return f"Error: {e}"
        if not parts:
            return ""

        command, rest = parts[0].lower(), parts[1:]
        try:
            return self._dispatch(command, rest)
        except ValueError as e:
            logger.warning(f"{command}: {e}")
            return f"Error: {e}"

    def _dispatch(self, command: str, rest: List[str]) -> str:
        text = " ".join(rest)
        low = self.config["random"]["low"]
        high = self.config["random"]["high"]

        if command in ("quit", "exit"):
            self.running = False
            return "Bye."
        if command == "help":
            return HELP_TEXT
        if command == "show":
            return self.show()
        if command == "size":
            if len(rest) != 1:
                raise ValueError("usage: size N")
            self.size = inputs.check_size(int(rest[0]))
            self.matrix = inputs.zero_matrix(self.size)
            return self.show()
        if command == "matrix":
            self.matrix = inputs.parse_matrix(text, self.size)
            return self.show()
        if command == "row":
            if not rest:
                raise ValueError("usage: row I VALUES")
            i = int(rest[0])
            if not 0 <= i < self.size:
                raise ValueError(f"Row index must be in [0, {self.size - 1}], got {i}")
            row = inputs.parse_row(" ".join(rest[1:]), self.size)
            self.matrix = self.matrix.copy()
            self.matrix[i] = row
            return self.show()
        if command in ("v1", "v2"):
            setattr(self, command, inputs.parse_vector(text))
            return self.show()
        if command == "random":
            if rest and rest[0] == "vectors":
                self.v1, self.v2 = inputs.random_vectors(low, high, rng=self.rng)
            else:
                self.matrix = inputs.random_matrix(self.size, low, high, rng=self.rng)
            return self.show()
        if command == "clear":
            if rest and rest[0] == "vectors":
                self.v1 = inputs.zero_vector()
                self.v2 = inputs.zero_vector()
            else:
                self.matrix = inputs.zero_matrix(self.size)
            return self.show()
        if command in operations.MATRIX_OPERATIONS:
            kwargs = {}
            if command == "inverse":
                kwargs["eps"] = self.config["matrix"]["singular_eps"]
            result = operations.run_matrix_operation(command, self.matrix, **kwargs)
            return render(command, result, self.config)
        if command in operations.VECTOR_OPERATIONS:
            result = operations.run_vector_operation(command, self.v1, self.v2)
            return render(command, result, self.config)

        raise ValueError(f"Unknown command: {command} (type 'help')")

    def run(self, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout) -> None:
        """Read commands until quit or end of input."""
        stdout.write("Matrix & Vector Calculator. Type 'help' for commands.\n")
        while self.running:
            stdout.write("> ")
            stdout.flush()
            line = stdin.readline()
            if not line:
                break
            output = self.execute(line)
            if output:
                stdout.write(output + "\n")


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(description="Matrix & Vector Calculator")
    parser.add_argument(
        "--config", "-c", dest="config_path", default=None,
        help="Path to configuration file"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "--json", dest="as_json", action="store_true",
        help="Print the result as JSON"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    matrix_parser = subparsers.add_parser("matrix", help="Square matrix operations")
    matrix_parser.add_argument(
        "operation", choices=list(operations.MATRIX_OPERATIONS),
        help="Operation to run"
    )
    matrix_parser.add_argument(
        "--size", "-n", type=int, default=None, choices=inputs.MATRIX_SIZES,
        help="Matrix size"
    )
    source = matrix_parser.add_mutually_exclusive_group()
    source.add_argument(
        "--values", default=None,
        help="Matrix entries, rows separated by ';' (e.g. \"1 2; 3 4\")"
    )
    source.add_argument(
        "--random", "-r", action="store_true",
        help="Use a random integer matrix"
    )
    matrix_parser.add_argument(
        "--seed", type=int, default=None,
        help="Random seed"
    )

    vector_parser = subparsers.add_parser("vector", help="3D vector operations")
    vector_parser.add_argument(
        "operation", choices=list(operations.VECTOR_OPERATIONS),
        help="Operation to run"
    )
    vector_parser.add_argument("--v1", default=None, help="First vector (e.g. \"1 2 3\")")
    vector_parser.add_argument("--v2", default=None, help="Second vector")
    vector_parser.add_argument(
        "--random", "-r", action="store_true",
        help="Use random integer vectors"
    )
    vector_parser.add_argument(
        "--seed", type=int, default=None,
        help="Random seed"
    )

    subparsers.add_parser("interactive", help="Start an interactive session")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main function to parse arguments and run the calculator."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        config = load_config(args.config_path)

        if args.command == "interactive":
            CalculatorSession(config).run()
            return 0

        if args.command == "matrix":
            M, result = compute_matrix(args, config)
            if not args.as_json:
                print("Input Matrix")
                print(formatting.format_matrix(M, config["display"]["matrix_decimals"]))
        else:
            v1, v2, result = compute_vector(args, config)
            if not args.as_json:
                decimals = config["display"]["matrix_decimals"]
                print(f"Vector 1: {formatting.format_vector(v1, decimals)}")
                print(f"Vector 2: {formatting.format_vector(v2, decimals)}")

        print(render(args.operation, result, config, args.as_json))
    except Exception as e:
        logger.exception(f"Error running calculator: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
