"""
Argument parsing and validation for the relational-config CLI.

This module handles command line argument parsing, validation, and processing
for the connector configuration checker.
"""

import argparse
from pathlib import Path
from typing import Dict, List, Optional


def parse_property_overrides(values: Optional[List[str]]) -> Dict[str, str]:
    """
    Parse KEY=VALUE pairs into a dictionary of option overrides.

    Args:
        values: List of KEY=VALUE strings

    Returns:
        Dictionary of option name to value

    Raises:
        ValueError: If an item has no '=' or an empty key
    """
    overrides = {}
    for item in values or []:
        key, separator, value = item.partition("=")
        key = key.strip()
        if not separator or not key:
            raise ValueError(
                f"Invalid property override '{item}', expected KEY=VALUE"
            )
        overrides[key] = value
    return overrides


def setup_argument_parser():
    """Setup and configure the command line argument parser."""
    parser = argparse.ArgumentParser(
        prog="relational-config",
        description="Validate and resolve relational CDC connector configuration",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument("config_file", help="Path to the YAML configuration file")

    parser.add_argument(
        "--set",
        "-s",
        dest="properties",
        action="append",
        metavar="KEY=VALUE",
        help="Override a connector option, e.g. --set decimal.handling.mode=double. "
             "May be repeated.",
    )

    parser.add_argument(
        "--logging-level",
        "-ll",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level. Acceptable values: DEBUG,INFO,WARNING,ERROR,CRITICAL",
    )

    parser.add_argument(
        "--show-resolved",
        "-r",
        action="store_true",
        help="Print the resolved decimal mode, snapshot overrides and filters as JSON",
    )

    return parser


def parse_and_validate_args(argv=None):
    """
    Parse and validate command line arguments.

    Returns:
        Tuple of (args, property overrides, config path)

    Raises:
        ValueError: If an override is malformed
        FileNotFoundError: If the configuration file does not exist
    """
    parser = setup_argument_parser()
    args = parser.parse_args(argv)

    overrides = parse_property_overrides(args.properties)

    config_path = Path(args.config_file)
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    return args, overrides, config_path
