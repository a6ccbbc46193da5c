import json

from rich.console import Console
from rich.table import Table

from assistants_cli.helpers import dump_models, format_timestamp, get_client

console = Console()


def _format_size(size) -> str:
    if size is None:
        return "-"
    if size < 1024:
        return f"{size} B"
    elif size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    else:
        return f"{size / (1024 * 1024):.1f} MB"


def cmd_file_list(args):
    client = get_client()
    files = client.files.list(purpose=args.purpose)

    if args.json:
        print(json.dumps(dump_models(files.data), indent=2))
        return

    if not files.data:
        print("No files uploaded.")
        return

    table = Table(title=f"Files ({len(files.data)})")
    table.add_column("id", style="cyan")
    table.add_column("filename")
    table.add_column("purpose")
    table.add_column("size", justify="right")
    table.add_column("created")

    for f in files.data:
        table.add_row(f.id, f.filename or "-", f.purpose or "-", _format_size(f.bytes), format_timestamp(f.created_at))

    console.print(table)


def setup_file_parser(subparsers):
    file_parser = subparsers.add_parser('file', help='File commands')
    file_subparsers = file_parser.add_subparsers(dest='file_command', help='File command')
    file_subparsers.required = True

    list_parser = file_subparsers.add_parser('list', help='List uploaded files')
    list_parser.add_argument('--purpose', default='', help='Only files with this purpose')
    list_parser.add_argument('--json', action='store_true', help='Output as JSON')
    list_parser.set_defaults(func=cmd_file_list)
