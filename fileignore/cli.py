#!/usr/bin/env python3
"""Command-line interface for fileignore.

Checks paths against the rules of a ``.fileignore`` file and prints one
line per path:

    ignored	build/output.o
    kept	src/main.py

Example:
    >>> from fileignore.cli import parse_arguments
    >>> args = parse_arguments(["--ignore-file", ".fileignore", "build/output.o"])
"""

import argparse
import os
import sys
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from fileignore.core.constants import FILEIGNORE_VERSION, ConfigKey
from fileignore.infrastructure.config_manager import ConfigError, ConfigManager, ConfigSource
from fileignore.infrastructure.logger import Logger, configure_logging
from fileignore.loader import IgnoreFileError, find_ignore_file, load_ignore_file
from fileignore.rules.ruleset import Rule, RuleSet

DESCRIPTION = "fileignore - check paths against .fileignore rules"


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


def parse_arguments(args: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        args: Argument list to parse (defaults to sys.argv[1:])

    Returns:
        Parsed arguments namespace

    Raises:
        SystemExit: On invalid arguments or --help/--version
        CLIError: If a given file does not exist
    """
    parser = argparse.ArgumentParser(
        prog="fileignore",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check paths against the nearest .fileignore
  fileignore build/output.o src/main.py

  # Use a specific ignore file and show which rules matched
  fileignore --ignore-file project/.fileignore --explain build/keep.txt

  # Print only the ignored paths
  fileignore --only-ignored $(git ls-files)
        """,
    )

    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {FILEIGNORE_VERSION}",
    )

    parser.add_argument(
        "-c",
        "--config",
        metavar="FILE",
        type=str,
        help="Configuration file path (YAML format)",
    )

    parser.add_argument(
        "-f",
        "--ignore-file",
        metavar="FILE",
        type=str,
        help="Ignore file (default: nearest .fileignore in the current directory or its parents)",
    )

    parser.add_argument(
        "paths",
        metavar="PATH",
        nargs="+",
        help="Relative paths to check",
    )

    output_group = parser.add_argument_group("output options")

    output_group.add_argument(
        "--explain",
        action="store_true",
        help="Show the rules that matched each path",
    )

    output_group.add_argument(
        "--only-ignored",
        action="store_true",
        help="Print ignored paths only",
    )

    log_group = parser.add_argument_group("logging options")

    log_group.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    log_group.add_argument(
        "--log-file",
        metavar="FILE",
        type=str,
        help="Also write log messages to FILE",
    )

    parsed = parser.parse_args(args)

    _validate_arguments(parsed)

    return parsed


def _validate_arguments(args: argparse.Namespace) -> None:
    """
    Validate parsed arguments.

    Args:
        args: Parsed arguments namespace

    Raises:
        CLIError: If validation fails
    """
    if args.config:
        config_path = Path(args.config)

        if not config_path.exists():
            raise CLIError(f"Configuration file does not exist: {args.config}")

        if not config_path.is_file():
            raise CLIError(f"Configuration path is not a file: {args.config}")

    if args.ignore_file and not Path(args.ignore_file).is_file():
        raise CLIError(f"Ignore file does not exist: {args.ignore_file}")


def build_config_from_args(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Build configuration dictionary from command-line arguments.

    Only options that were given are included, so file and environment
    values still apply to the rest.

    Args:
        args: Parsed arguments namespace

    Returns:
        Configuration dictionary for the CLI_ARGS source
    """
    logging_config: Dict[str, Any] = {}

    if args.debug:
        logging_config["level"] = "DEBUG"

    if args.log_file:
        logging_config["file"] = args.log_file

    if not logging_config:
        return {}

    return {ConfigKey.ROOT: {"logging": logging_config}}


def load_configuration(args: argparse.Namespace) -> ConfigManager:
    """
    Load configuration from file, environment and arguments.

    Args:
        args: Parsed arguments namespace

    Returns:
        Configuration manager with all sources loaded

    Raises:
        ConfigError: If the configuration file cannot be loaded
    """
    config = ConfigManager(args.config)
    config.load_dict(build_config_from_args(args), ConfigSource.CLI_ARGS)
    return config


def setup_logging(config: ConfigManager) -> Logger:
    """
    Setup logging based on configuration.

    Args:
        config: Loaded configuration

    Returns:
        Configured logger instance

    Raises:
        ConfigError: If the configured level is unknown
    """
    level = config.get(ConfigKey.LOG_LEVEL, "WARNING")
    log_file = config.get(ConfigKey.LOG_FILE)

    try:
        return configure_logging(level=str(level), log_file=log_file)
    except KeyError as e:
        raise ConfigError(f"Unknown log level: {level}") from e
    except OSError as e:
        raise ConfigError(f"Cannot open log file: {log_file}: {e}") from e


def resolve_ignore_file(args: argparse.Namespace, config: ConfigManager) -> Path:
    """
    Determine which ignore file to load.

    Args:
        args: Parsed arguments namespace
        config: Loaded configuration

    Returns:
        Path of the ignore file

    Raises:
        CLIError: If no ignore file is given and none is found
    """
    if args.ignore_file:
        return Path(args.ignore_file)

    file_name = config.get(ConfigKey.IGNORE_FILE_NAME)
    found = find_ignore_file(Path.cwd(), file_name)
    if found is None:
        raise CLIError(f"No {file_name} found in {Path.cwd()} or its parents")
    return found


def normalize_cli_path(path: str) -> str:
    """Use ``/`` as separator regardless of platform."""
    if os.sep != "/":
        path = path.replace(os.sep, "/")
    return path


def _describe_rules(rules: Iterable[Rule]) -> str:
    return ", ".join(f"{rule.line_number}:{rule.source}" for rule in rules)


def format_result(rules: RuleSet, path: str, explain: bool = False) -> str:
    """
    Format the decision for one path.

    Args:
        rules: Rule set to evaluate against
        path: Path to check
        explain: Append the rules that matched

    Returns:
        Tab-separated output line
    """
    matches = rules.get_matching_rules(path)
    fields = ["ignored" if matches.ignored else "kept", path]

    if explain:
        matched: List[Rule] = [*matches.ignore, *matches.negation]
        fields.append(_describe_rules(matched) if matched else "-")

    return "\t".join(fields)


def run(args: argparse.Namespace) -> int:
    """
    Check the requested paths and print the results.

    Args:
        args: Parsed arguments namespace

    Returns:
        Exit code
    """
    config = load_configuration(args)
    logger = setup_logging(config)

    ignore_file = resolve_ignore_file(args, config)
    logger.debug("Using ignore file", path=ignore_file)

    rules = load_ignore_file(
        ignore_file,
        file_name=config.get(ConfigKey.IGNORE_FILE_NAME),
        encoding=config.get(ConfigKey.IGNORE_FILE_ENCODING),
    )

    for raw_path in args.paths:
        path = normalize_cli_path(raw_path)
        if args.only_ignored and not rules.is_ignored(path):
            continue
        print(format_result(rules, path, explain=args.explain))

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Process exit code
    """
    try:
        args = parse_arguments(argv)
        return run(args)

    except (CLIError, ConfigError, IgnoreFileError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
