import json

from rich.console import Console
from rich.table import Table

from assistants_cli.helpers import dump_models, format_timestamp, get_client

console = Console()


def cmd_assistant_list(args):
    client = get_client()
    page = client.assistants.list(
        limit=args.limit,
        order=args.order,
        after=args.after,
        before=args.before,
    )

    if args.json:
        print(json.dumps(dump_models(page.data), indent=2))
        return

    if not page.data:
        print("No assistants found.")
        return

    table = Table(title=f"Assistants ({len(page.data)})")
    table.add_column("id", style="cyan")
    table.add_column("name")
    table.add_column("model")
    table.add_column("tools")
    table.add_column("created")

    for assistant in page.data:
        table.add_row(
            assistant.id,
            assistant.name or "-",
            assistant.model or "-",
            ", ".join(tool.type for tool in assistant.tools) or "-",
            format_timestamp(assistant.created_at),
        )

    console.print(table)

    if page.has_more:
        print(f"\nMore results available. Use --after {page.last_id} to continue.")


def setup_assistant_parser(subparsers):
    assistant_parser = subparsers.add_parser('assistant', help='Assistant commands')
    assistant_subparsers = assistant_parser.add_subparsers(dest='assistant_command', help='Assistant command')
    assistant_subparsers.required = True

    list_parser = assistant_subparsers.add_parser('list', help='List assistants')
    list_parser.add_argument('--limit', type=int, default=0, help='Page size, 1-100 (default: service default)')
    list_parser.add_argument('--order', choices=['asc', 'desc'], default='', help='Sort by creation time')
    list_parser.add_argument('--after', default='', help='Cursor: list items after this id')
    list_parser.add_argument('--before', default='', help='Cursor: list items before this id')
    list_parser.add_argument('--json', action='store_true', help='Output as JSON')
    list_parser.set_defaults(func=cmd_assistant_list)
