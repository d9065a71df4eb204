"""
Main entry point for the Astra CLI when run as a module.

This allows the CLI to be executed using:
    python -m astra.cli

or the equivalent console script entry point.
"""

from . import main

if __name__ == '__main__':
    main()
