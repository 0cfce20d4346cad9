"""
Command line entry point for the LaTeX log parser.
This allows running the module as: python -m latex_log_parser
"""

from .main import main
import sys

if __name__ == "__main__":
    sys.exit(main())
