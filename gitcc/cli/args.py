"""CLI Argument Parsing"""

import argparse
import argcomplete

from gitcc import __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='git-cc',
        description='Write a conventional commit message for the staged changes and commit it',
        epilog='Example: git add -p && git-cc'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')

    # Session options
    parser.add_argument('--fresh', action='store_true', help='Ignore answers saved from a previous run')
    parser.add_argument('--discard', action='store_true', help='Delete answers saved from a previous run and exit')

    # Output options
    parser.add_argument('--dry-run', action='store_true', help='Print the message instead of committing')
    parser.add_argument('--verbose', action='store_true', help='Show debug info (same as DEBUG=true)')

    # Setup/config
    parser.add_argument('--display-config', action='store_true', help='Show current configuration and choices')
    parser.add_argument('--install-completion', action='store_true', help='Install shell tab completion')

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    return parser.parse_args(argv)
