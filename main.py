"""
Main entry point for the Gamma territory game.
Reads batch or interactive commands from a file (first argument) or stdin.
Run: python main.py [input_file]
"""

import sys

from gamma.cli.main import main

if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        sys.exit(0)
