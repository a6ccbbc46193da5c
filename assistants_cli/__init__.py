import sys
import argparse

from pydantic import ValidationError

import assistants_cli.config
from assistants import AssistantsError
from assistants_cli.assistant import setup_assistant_parser
from assistants_cli.run import setup_run_parser
from assistants_cli.file import setup_file_parser


def create_parser():
    parser = argparse.ArgumentParser(
        prog='assistants',
        description='Assistants - Inspect assistants, runs and files from the command line',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Configuration
  assistants config init                  # Write ~/.config/assistants/config.yaml
  assistants config show                  # Show resolved config (key masked)
  assistants config show --json --reveal-keys

  # Assistants
  assistants assistant list
  assistants assistant list --limit 20 --order desc
  assistants assistant list --after asst_abc --json

  # Runs
  assistants run list thread_abc
  assistants run show thread_abc run_abc
  assistants run steps thread_abc run_abc
  assistants run cancel thread_abc run_abc

  # Files
  assistants file list --purpose assistants
"""
    )

    subparsers = parser.add_subparsers(dest='command', help='Command namespace')
    subparsers.required = True

    assistants_cli.config.setup_parser(subparsers)
    setup_assistant_parser(subparsers)
    setup_run_parser(subparsers)
    setup_file_parser(subparsers)

    return parser


def main(argv=None):
    parser = create_parser()
    args = parser.parse_args(argv)
    try:
        args.func(args)
    except (AssistantsError, ValidationError) as e:
        print(f"✗ {e}", file=sys.stderr)
        sys.exit(1)
