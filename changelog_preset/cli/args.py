"""CLI Argument Parsing"""

import argparse
import argcomplete

from changelog_preset import __version__
from changelog_preset.config import VALID_FORMATS

TEMPLATE_NAMES = ['main', 'header', 'commit', 'footer']


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='clp',
        description='Group parsed conventional commits into keep-a-changelog sections',
        epilog='Example: git-log-to-json | clp --owner acme --repository widgets'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('file', nargs='?', metavar='FILE', help='JSON array or JSON Lines of parsed commits (default: stdin)')

    # Repository context
    parser.add_argument('--host', type=str, metavar='URL', help='Host URL used for user links: https://github.com')
    parser.add_argument('--owner', type=str, metavar='OWNER', help='Repository owner')
    parser.add_argument('--repository', type=str, metavar='NAME', help='Repository name (composes host/owner/name)')
    parser.add_argument('--repo-url', type=str, metavar='URL', help='Full repository URL, used when no repository is given')

    # Output options
    parser.add_argument('-f', '--format', type=str, choices=sorted(VALID_FORMATS), help='Output format')
    parser.add_argument('--templates-dir', type=str, metavar='DIR', help='Load template fragments from DIR')
    parser.add_argument('--print-template', type=str, choices=TEMPLATE_NAMES, metavar='NAME',
                        help=f"Print a template fragment ({', '.join(TEMPLATE_NAMES)})")
    parser.add_argument('--verbose', action='store_true', help='Show how many commits were kept and dropped')

    # Setup/config
    parser.add_argument('--setup', action='store_true', help='Configure defaults')
    parser.add_argument('--display-config', action='store_true', help='Show current configuration')
    parser.add_argument('--install-completion', action='store_true', help='Install shell tab completion')

    argcomplete.autocomplete(parser)
    return parser.parse_args(argv)
