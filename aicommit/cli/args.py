"""CLI Argument Parsing"""

import argparse
import argcomplete

from aicommit import __version__


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='aicommit',
        description='Generate a commit message for staged changes with DeepSeek and commit it',
        epilog='Example: git add -p && aicommit'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--verbose', action='store_true', help='Show model and token usage after generation')
    parser.add_argument('--no-color', action='store_true', help='Disable colored output')

    argcomplete.autocomplete(parser)
    return parser.parse_args(argv)
