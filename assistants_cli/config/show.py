"""
assistants config show command - Display resolved client configuration.
"""

import json

from assistants.config import ConfigManager, get_config_dir, load_config


def cmd_config_show(args):
    """Show client configuration."""
    manager = ConfigManager(get_config_dir())
    config = load_config()

    data = config.model_dump()
    if not args.reveal_keys:
        data['api_key'] = mask_key(data['api_key'])

    if args.json:
        print(json.dumps(data, indent=2, default=str))
        return

    source = manager.config_path if manager.exists() else "(defaults + environment)"
    print(f"\n📋 Client Configuration")
    print(f"   Source: {source}\n")
    for key, value in data.items():
        print(f"  {key}: {value if value is not None else '(not set)'}")
    print()


def mask_key(value: str) -> str:
    """Mask an API key for display."""
    if not value:
        return "(not set)"
    if len(value) <= 8:
        return "****"
    return value[:4] + "..." + value[-4:]
