"""CLI command implementations.

Each module exposes setup_parser(subparsers) and run(args).
"""
