"""Command-line parsing.

Usage errors go through ArgumentParser.error: usage on stderr, exit code 2.
"""

import argparse

from pydantic import ValidationError

from sqsreceiver.core.models import DEFAULT_MAX_RECEIVE_COUNT, DEFAULT_RECEIVE_WAIT_TIME, QueueOptions

MAX_ARGS = 3

TOO_MANY_ARGUMENTS = "Too many command-line arguments.\n  Run the command with no arguments to see help."
MISSING_QUEUE_NAME = "You must supply a queue name.\n  Run the command with no arguments to see help."


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sqs-receiver",
        description="Create an SQS queue with a dead-letter queue, send example messages and poll the queue.",
        usage="%(prog)s -q <queue-name> [-d <dead-letter-queue>] [-m <max-receive-count>] [-w <wait-time>]",
        argument_default=argparse.SUPPRESS,
    )

    parser.add_argument(
        "-q", "--queue-name", dest="queue_name", help="The name of the queue you want to create."
    )
    parser.add_argument(
        "-d",
        "--dead-letter-queue",
        dest="dead_letter_queue",
        help="The URL of an existing queue to be used as the dead-letter queue. "
        "If this argument isn't supplied, a new dead-letter queue will be created.",
    )
    parser.add_argument(
        "-m",
        "--max-receive-count",
        dest="max_receive_count",
        help=f"The value for maxReceiveCount in the RedrivePolicy of the queue. Default is {DEFAULT_MAX_RECEIVE_COUNT}.",
    )
    parser.add_argument(
        "-w",
        "--wait-time",
        dest="wait_time",
        help="The value for ReceiveMessageWaitTimeSeconds of the queue for long polling. "
        f"Default is {DEFAULT_RECEIVE_WAIT_TIME}.",
    )

    return parser


def parse_command_line(argv: list[str] | None, parser: argparse.ArgumentParser | None = None) -> dict[str, str]:
    """
    Parse raw tokens into a mapping of the flags that were given.

    Args:
        argv: Command-line tokens without the program name (None reads sys.argv)
        parser: Parser to use, defaults to build_parser()

    Returns:
        Flag dest name -> value, only for flags present on the command line
    """
    parser = parser or build_parser()
    return dict(vars(parser.parse_args(argv)))


def get_argument(parsed: dict[str, str], default: str | None, name: str) -> str | None:
    value = parsed.get(name)
    return value if value else default


def resolve_options(parsed: dict[str, str], parser: argparse.ArgumentParser | None = None) -> QueueOptions:
    """
    Turn parsed flags into QueueOptions, applying defaults.

    Raises:
        SystemExit: Too many arguments or no queue name (usage error)
    """
    parser = parser or build_parser()

    if len(parsed) > MAX_ARGS:
        parser.error(TOO_MANY_ARGUMENTS)

    queue_name = get_argument(parsed, None, "queue_name")
    if not queue_name:
        parser.error(MISSING_QUEUE_NAME)

    try:
        return QueueOptions(
            queue_name=queue_name,
            dead_letter_queue_url=get_argument(parsed, None, "dead_letter_queue"),
            max_receive_count=get_argument(parsed, DEFAULT_MAX_RECEIVE_COUNT, "max_receive_count"),
            wait_time=get_argument(parsed, DEFAULT_RECEIVE_WAIT_TIME, "wait_time"),
        )
    except ValidationError as e:
        parser.error(str(e))
