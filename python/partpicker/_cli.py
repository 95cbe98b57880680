"""CLI entry point that serves the part picker with uvicorn."""

import sys

import uvicorn
from pydantic import ValidationError

from partpicker.app import create_app
from partpicker.config import get_settings
from partpicker.log import configure_logging, get_logger


def main():
    """Run the part picker. Configuration comes from PARTPICKER_* environment variables."""
    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Error: invalid configuration\n{e}", file=sys.stderr)
        sys.exit(1)

    configure_logging(level=settings.log_level, json_logs=settings.json_logs)
    get_logger(__name__).info("Serving %s page on http://%s:%d", settings.page_name, settings.host, settings.port)

    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
