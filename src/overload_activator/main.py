"""Main entry point for the overload activator command line tool."""

import argparse
import ast
import importlib
import sys
from typing import Any, NoReturn

from .application import Activator
from .config import Config
from .domain.errors import ActivatorError
from .infrastructure.logging import LoggerSetup, get_logger, log_timing


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Construct a Python class by resolving one of its constructor overloads "
        "against the given arguments",
        epilog="""
Examples:
  # Construct with literal arguments
  overload-activator fractions:Fraction 3 4

  # Show the overload set instead of constructing
  overload-activator mypkg.shapes:Polygon --list

  # Treat Python ints as 64-bit when matching
  overload-activator mypkg.shapes:Polygon 1 2 3 --int-type Int64

  # Using .env file for configuration
  echo 'ACTIVATOR_VERBOSE=true' > .env
  overload-activator mypkg.shapes:Polygon 1 2
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "target",
        help="Class to construct, as 'module:Class' or 'module.Class'",
    )
    parser.add_argument(
        "args",
        nargs="*",
        metavar="ARG",
        help="Constructor arguments, parsed as Python literals (raw string otherwise)",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="Print the constructor signatures of TARGET and exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=None,
        help="Enable verbose output with debug logs",
    )
    parser.add_argument(
        "--int-type",
        metavar="NAME",
        help="Built-in type used for Python ints (default: Int32)",
    )
    parser.add_argument(
        "--float-type",
        metavar="NAME",
        help="Built-in type used for Python floats (default: Double)",
    )
    return parser.parse_args(argv)


def load_target(target: str) -> type:
    """Import the class named by ``module:Class`` or ``module.Class``.

    Raises:
        ValueError: If the target is malformed or does not name a class
        ImportError: If the module cannot be imported
    """
    if ":" in target:
        module_name, _, qualname = target.partition(":")
    else:
        module_name, _, qualname = target.rpartition(".")
    if not module_name or not qualname:
        raise ValueError(f"Target must look like 'module:Class', got '{target}'")

    obj: Any = importlib.import_module(module_name)
    for attribute in qualname.split("."):
        obj = getattr(obj, attribute, None)
        if obj is None:
            raise ValueError(f"'{qualname}' not found in module '{module_name}'")

    if not isinstance(obj, type):
        raise ValueError(f"'{target}' is not a class")
    return obj


def parse_argument(text: str) -> Any:
    """Parse one command line argument as a Python literal, else keep the string."""
    try:
        return ast.literal_eval(text)
    except (ValueError, SyntaxError):
        return text


@log_timing
def main(argv: list[str] | None = None) -> NoReturn:
    """Main entry point: resolve a constructor of TARGET and print the instance."""
    args = parse_args(argv)

    try:
        config = Config.from_args(
            verbose=args.verbose,
            int_type=args.int_type,
            float_type=args.float_type,
        )
        config.validate()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    LoggerSetup.initialize(config.log_dir, verbose=config.verbose)
    logger = get_logger(__name__)
    logger.debug(f"Integer type: {config.int_type}, float type: {config.float_type}")

    try:
        target = load_target(args.target)
    except (ImportError, ValueError) as e:
        logger.error(f"Cannot load target: {e}")
        sys.exit(1)

    activator = Activator.from_config(config)

    if args.list:
        for signature in activator.list_constructors(target):
            print(signature)
        sys.exit(0)

    arguments = [parse_argument(text) for text in args.args]
    logger.debug(f"Arguments: {arguments!r}")

    try:
        instance = activator.create_instance(target, *arguments)
    except ActivatorError as e:
        logger.error(f"[FAILED] {e}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"[FAILED] Constructor raised {type(e).__name__}: {e}")
        if config.verbose:
            import traceback

            traceback.print_exc()
        sys.exit(1)

    print(repr(instance))
    sys.exit(0)


if __name__ == "__main__":
    main()
