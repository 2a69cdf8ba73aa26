"""Main module entrypoint for local and container runtime execution.

This module validates startup configuration and launches the Django ASGI
application under uvicorn.
"""

import argparse
import json
import os

import uvicorn

from app.config import config_load_settings


def main(argv: list[str] | None = None) -> None:
    """Run selected runtime command with validated startup configuration.

    Args:
        argv: Optional argument list; defaults to the process arguments.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
    """

    argument_parser = argparse.ArgumentParser(description="Django Tailwind starter runtime entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="serve",
        choices=("serve", "check-config"),
        help="Runtime command: `serve` starts the web server, `check-config` validates and prints settings",
        type=str,
    )
    argument_parser.add_argument(
        "--reload",
        dest="reload",
        action="store_true",
        help="Restart the server when Python files change (`serve` only)",
    )
    parsed_arguments = argument_parser.parse_args(argv)

    settings = config_load_settings()

    if parsed_arguments.command == "check-config":
        print(json.dumps(settings.config_redacted_summary(), indent=2, sort_keys=True))
        return

    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "app.settings")
    uvicorn.run(
        "app.asgi:application",
        host=settings.application_host,
        port=settings.application_port,
        reload=parsed_arguments.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
