#!/usr/bin/env python3
"""
Console entry point
Loads configuration, applies command-line overrides and serves the app with uvicorn
"""

import argparse
import logging
import sys

from .core.config import get_console_config, setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Combination Console')
    parser.add_argument('--host', help='Interface to bind (default from config)')
    parser.add_argument('--port', type=int, help='Port to listen on (default from config)')
    parser.add_argument('--api-base', help='Base URL of the sentence-template API, e.g. http://localhost:8080/api')
    parser.add_argument('--api-timeout', type=float, help='Total timeout per API request in seconds')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level')
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = get_console_config().with_overrides(
            host=args.host,
            port=args.port,
            api_base=args.api_base,
            api_timeout=args.api_timeout,
            log_level=args.log_level,
        )
    except ValueError as e:
        print(f"[ERROR] Invalid configuration: {e}", file=sys.stderr)
        return 2

    setup_logging(config)
    logger.info(f"Starting console on {config.host}:{config.port} (API: {config.api_base})")

    import uvicorn
    from .web_apps.console_app import create_app

    uvicorn.run(create_app(config), host=config.host, port=config.port,
                log_level=config.log_level.lower())
    return 0


if __name__ == "__main__":
    sys.exit(main())
