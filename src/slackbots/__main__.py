"""Command line entry point.

Usage:
    slackbots [--config PATH] channels
    slackbots [--config PATH] groups
    slackbots [--config PATH] users
    slackbots [--config PATH] resolve NAME [--channel | --group | --user]
    slackbots [--config PATH] post NAME TEXT [--channel | --group | --user] [--as-user]
    slackbots [--config PATH] listen
"""

import argparse
import asyncio
import logging
import signal
import sys
from collections.abc import Sequence

from slackbots.application import DirectoryClient
from slackbots.config import ConfigError, LoggingConfig, load_config
from slackbots.domain.entities import Event, Message, Namespace, PostParams
from slackbots.domain.exceptions import SlackBotError

# Default logging for early startup
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def configure_logging(config: LoggingConfig | None) -> None:
    """Configure logging based on config.

    Args:
        config: Logging configuration. If None, uses defaults.
    """
    if config is None:
        return

    root_logger = logging.getLogger()

    level = getattr(logging, config.level.upper(), logging.INFO)
    root_logger.setLevel(level)

    if root_logger.handlers:
        formatter = logging.Formatter(config.format)
        for handler in root_logger.handlers:
            handler.setFormatter(formatter)

    if config.loggers:
        for logger_name, logger_level in config.loggers.items():
            individual_logger = logging.getLogger(logger_name)
            individual_level = getattr(logging, logger_level.upper(), logging.INFO)
            individual_logger.setLevel(individual_level)
            logger.debug(
                "Set logger '%s' to level %s", logger_name, logger_level.upper()
            )


def _add_namespace_flags(parser: argparse.ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group()
    for namespace in Namespace:
        group.add_argument(
            f"--{namespace.value}",
            dest="namespace",
            action="store_const",
            const=namespace,
            help=f"resolve NAME as a {namespace.value} only",
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slackbots",
        description="Look up Slack channels, groups and users and post messages",
    )
    parser.add_argument(
        "--config", default="config.yaml", help="config file (default: config.yaml)"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("channels", help="list public channels")
    subparsers.add_parser("groups", help="list private groups")
    subparsers.add_parser("users", help="list users")

    resolve = subparsers.add_parser("resolve", help="resolve a name to an ID")
    resolve.add_argument("name")
    _add_namespace_flags(resolve)

    post = subparsers.add_parser("post", help="post a message to a named destination")
    post.add_argument("name")
    post.add_argument("text")
    post.add_argument("--as-user", action="store_true", help="post as the bot user")
    _add_namespace_flags(post)

    subparsers.add_parser("listen", help="print real-time events until interrupted")
    return parser


async def _listen(client: DirectoryClient) -> None:
    async def print_event(event: Event) -> None:
        if isinstance(event, Message):
            print(f"[{event.channel}] {event.user}: {event.text}")
        else:
            print(f"{event.type} channel={event.channel} user={event.user}")

    client.add_event_handler(print_event)
    await client.connect()

    stop_event = asyncio.Event()
    loop = asyncio.get_running_loop()

    def shutdown_handler() -> None:
        logger.info("Received shutdown signal...")
        stop_event.set()

    loop.add_signal_handler(signal.SIGINT, shutdown_handler)
    loop.add_signal_handler(signal.SIGTERM, shutdown_handler)
    try:
        await stop_event.wait()
    finally:
        await client.close()


async def run_command(client: DirectoryClient, args: argparse.Namespace) -> None:
    """Log in and run one CLI command."""
    await client.login()

    if args.command == "channels":
        for channel in (await client.list_channels()).channels:
            if not channel.is_archived:
                print(f"{channel.id}\t#{channel.name}")
    elif args.command == "groups":
        for group in (await client.list_groups()).groups:
            if not group.is_archived:
                print(f"{group.id}\t{group.name}")
    elif args.command == "users":
        for user in (await client.list_users()).members:
            if not user.deleted:
                print(f"{user.id}\t@{user.name}")
    elif args.command == "resolve":
        destination = await client.resolve(args.name, args.namespace)
        print(f"{destination.namespace.value}\t{destination.id}\t{destination.channel_id}")
    elif args.command == "post":
        destination = await client.resolve(args.name, args.namespace)
        params = PostParams(as_user=True) if args.as_user else None
        response = await client.send(destination, args.text, params)
        print(f"{response.channel}\t{response.ts}")
    elif args.command == "listen":
        await _listen(client)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the exit status."""
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except (ConfigError, FileNotFoundError) as e:
        logger.error("Failed to load config: %s", e)
        return 1

    configure_logging(config.logging)
    client = DirectoryClient.from_config(config)

    try:
        asyncio.run(run_command(client, args))
    except SlackBotError as e:
        logger.error("%s", e)
        return 1
    except KeyboardInterrupt:
        logger.info("Shutting down...")
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
