#!/usr/bin/env python3
"""
Main CLI entry point for relational connector configuration.

This module provides a lightweight CLI wrapper that defers heavy imports
until the command is actually executed.
"""

import sys


def main(argv=None):
    """Main CLI entry point that defers heavy imports."""
    try:
        # Import the actual main function only when needed
        from relational_config.main import main as main_impl

        return main_impl(argv)
    except ImportError as e:
        print(f"Error importing relational_config modules: {e}", file=sys.stderr)
        print(
            "Make sure all dependencies are installed correctly.",
            file=sys.stderr,
        )
        return 1


if __name__ == "__main__":
    sys.exit(main())
