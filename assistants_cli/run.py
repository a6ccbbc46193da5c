import json

from rich.console import Console
from rich.table import Table

from assistants_cli.helpers import dump_models, format_timestamp, get_client

console = Console()

STATUS_STYLES = {
    'queued': 'dim',
    'in_progress': 'yellow',
    'requires_action': 'magenta',
    'cancelling': 'yellow',
    'cancelled': 'red',
    'failed': 'red',
    'completed': 'green',
    'expired': 'red',
}


def _status(value: str) -> str:
    style = STATUS_STYLES.get(value)
    return f"[{style}]{value}[/{style}]" if style else value


def cmd_run_list(args):
    client = get_client()
    page = client.runs.list(args.thread_id, limit=args.limit, order=args.order)

    if args.json:
        print(json.dumps(dump_models(page.data), indent=2))
        return

    if not page.data:
        print(f"No runs on thread {args.thread_id}.")
        return

    table = Table(title=f"{args.thread_id} - runs ({len(page.data)})")
    table.add_column("id", style="cyan")
    table.add_column("assistant")
    table.add_column("status")
    table.add_column("created")

    for run in page.data:
        table.add_row(run.id, run.assistant_id or "-", _status(run.status), format_timestamp(run.created_at))

    console.print(table)


def cmd_run_show(args):
    client = get_client()
    run = client.runs.retrieve(args.thread_id, args.run_id)

    if args.json:
        print(json.dumps(run.model_dump(mode="json"), indent=2))
        return

    console.print(f"\n[bold]{run.id}[/bold]  {_status(run.status)}")
    print(f"  thread:    {run.thread_id or '-'}")
    print(f"  assistant: {run.assistant_id or '-'}")
    print(f"  model:     {run.model or '-'}")
    print(f"  created:   {format_timestamp(run.created_at)}")
    print(f"  started:   {format_timestamp(run.started_at)}")
    print(f"  expires:   {format_timestamp(run.expires_at)}")

    for label, value in (("cancelled", run.cancelled_at), ("failed", run.failed_at), ("completed", run.completed_at)):
        if value:
            print(f"  {label}:{' ' * (10 - len(label))} {format_timestamp(value)}")

    if run.last_error is not None:
        console.print(f"  [red]error: {run.last_error.code}: {run.last_error.message}[/red]")

    if run.requires_action:
        print("\n  Pending tool calls:")
        for call in run.required_action.tool_calls if run.required_action else []:
            target = f"{call.function.name}({call.function.arguments})" if call.function else call.type
            print(f"    {call.id}: {target}")
    print()


def cmd_run_steps(args):
    client = get_client()
    page = client.runs.list_steps(args.thread_id, args.run_id, limit=args.limit, order=args.order)

    if args.json:
        print(json.dumps(dump_models(page.data), indent=2))
        return

    if not page.data:
        print(f"No steps for run {args.run_id}.")
        return

    table = Table(title=f"{args.run_id} - steps ({len(page.data)})")
    table.add_column("id", style="cyan")
    table.add_column("type")
    table.add_column("status")
    table.add_column("created")

    for step in page.data:
        table.add_row(step.id, step.type or "-", _status(step.status or "-"), format_timestamp(step.created_at))

    console.print(table)


def cmd_run_cancel(args):
    client = get_client()
    run = client.runs.cancel(args.thread_id, args.run_id)
    console.print(f"✓ Cancellation requested for {run.id}: {_status(run.status)}")


def setup_run_parser(subparsers):
    run_parser = subparsers.add_parser('run', help='Run commands')
    run_subparsers = run_parser.add_subparsers(dest='run_command', help='Run command')
    run_subparsers.required = True

    list_parser = run_subparsers.add_parser('list', help='List runs on a thread')
    list_parser.add_argument('thread_id', help='Thread ID')
    list_parser.add_argument('--limit', type=int, default=0, help='Page size, 1-100')
    list_parser.add_argument('--order', choices=['asc', 'desc'], default='', help='Sort by creation time')
    list_parser.add_argument('--json', action='store_true', help='Output as JSON')
    list_parser.set_defaults(func=cmd_run_list)

    show_parser = run_subparsers.add_parser('show', help='Show one run')
    show_parser.add_argument('thread_id', help='Thread ID')
    show_parser.add_argument('run_id', help='Run ID')
    show_parser.add_argument('--json', action='store_true', help='Output as JSON')
    show_parser.set_defaults(func=cmd_run_show)

    steps_parser = run_subparsers.add_parser('steps', help='List the steps of a run')
    steps_parser.add_argument('thread_id', help='Thread ID')
    steps_parser.add_argument('run_id', help='Run ID')
    steps_parser.add_argument('--limit', type=int, default=0, help='Page size, 1-100')
    steps_parser.add_argument('--order', choices=['asc', 'desc'], default='', help='Sort by creation time')
    steps_parser.add_argument('--json', action='store_true', help='Output as JSON')
    steps_parser.set_defaults(func=cmd_run_steps)

    cancel_parser = run_subparsers.add_parser('cancel', help='Request cancellation of a run')
    cancel_parser.add_argument('thread_id', help='Thread ID')
    cancel_parser.add_argument('run_id', help='Run ID')
    cancel_parser.set_defaults(func=cmd_run_cancel)
