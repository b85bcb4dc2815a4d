"""CLI entry point for the build and test commands."""

import argparse
import asyncio
import json
import logging
import sys

from icie.config import IcieConfig
from icie.hosts.loading import open_host
from icie.session import Session

COMMANDS = ("build", "test")


async def run(
    command: str,
    host_key: str,
    host_config_json: str,
    config_json: str,
) -> int:
    """Run one command against the selected host and return exit code."""
    log = logging.getLogger("icie")

    log.info("Loading host: %s", host_key)
    config = IcieConfig.model_validate(json.loads(config_json))

    async with open_host(host_key, json.loads(host_config_json)) as host:
        session = Session.create(host, config)
        if command == "build":
            success = await session.build()
        else:
            success = await session.test()

    return 0 if success else 1


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Build and test a single source file with the ci tool"
    )
    parser.add_argument("command", choices=COMMANDS, help="Command to run")
    parser.add_argument(
        "--host",
        default="terminal",
        help="Host key (default: terminal)",
    )
    parser.add_argument(
        "--host-config",
        default="{}",
        help="JSON configuration for the host",
    )
    parser.add_argument(
        "--config",
        default="{}",
        help="JSON configuration for the orchestrators",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log tool output",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    exit_code = asyncio.run(
        run(
            command=args.command,
            host_key=args.host,
            host_config_json=args.host_config,
            config_json=args.config,
        )
    )
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
