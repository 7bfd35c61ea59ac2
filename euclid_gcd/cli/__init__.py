"""CLI module for euclid-gcd.

Provides the command-line driver that reads two integers and prints their GCD.
"""

from euclid_gcd.cli.main import create_parser, main

__all__ = ["create_parser", "main"]
