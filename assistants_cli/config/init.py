"""
assistants config init command - Create the client configuration file.
"""

from assistants.config import ConfigManager, default_settings, get_config_dir


def cmd_config_init(args):
    """Initialize client configuration."""
    manager = ConfigManager(get_config_dir())

    if manager.exists() and not args.force:
        print(f"✗ Config already exists at: {manager.config_path}")
        print("  Use --force to overwrite")
        return

    settings = default_settings()
    manager.save(settings)
    print(f"✓ Created config at: {manager.config_path}")

    print("\nConfiguration summary:")
    for key, value in settings.items():
        print(f"  {key}: {value}")
