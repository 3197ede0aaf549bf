"""
Main entry point for the pagegen CLI when run as a module.

This allows the CLI to be executed using:
    python -m pagegen.cli
"""

from . import main

if __name__ == '__main__':
    main()
