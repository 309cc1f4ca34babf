"""Run the API server: python -m sportspage [--host HOST] [--port PORT]."""

import argparse

import uvicorn

from sportspage.api import create_app
from sportspage.config import Settings
from sportspage.utilities import setup_logging


def main() -> None:
    parser = argparse.ArgumentParser(description="The Sports Page API server")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args()

    settings = Settings.from_env()
    setup_logging(settings.log_level)
    uvicorn.run(create_app(settings), host=args.host, port=args.port, log_config=None)


if __name__ == "__main__":
    main()
