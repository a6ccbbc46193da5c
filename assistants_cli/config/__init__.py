"""
Config CLI commands.

Commands for inspecting and creating the client configuration file.
"""

from assistants_cli.config.init import cmd_config_init
from assistants_cli.config.show import cmd_config_show


def setup_parser(subparsers):
    """Setup config command parser."""
    config_parser = subparsers.add_parser(
        'config',
        help='Manage client configuration'
    )
    config_subparsers = config_parser.add_subparsers(
        dest='config_command',
        help='Config command'
    )
    config_subparsers.required = True

    # assistants config show
    show_parser = config_subparsers.add_parser(
        'show',
        help='Show resolved client configuration'
    )
    show_parser.add_argument(
        '--json',
        action='store_true',
        help='Output as JSON'
    )
    show_parser.add_argument(
        '--reveal-keys',
        action='store_true',
        help='Show the API key value (default: masked)'
    )
    show_parser.set_defaults(func=cmd_config_show)

    # assistants config init
    init_parser = config_subparsers.add_parser(
        'init',
        help='Write a default config.yaml'
    )
    init_parser.add_argument(
        '--force',
        action='store_true',
        help='Overwrite existing config'
    )
    init_parser.set_defaults(func=cmd_config_init)


__all__ = [
    'setup_parser',
    'cmd_config_init',
    'cmd_config_show',
]
