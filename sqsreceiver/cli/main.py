"""sqs-receiver: create a queue and its dead-letter queue, seed it and poll it.

Example:
    sqs-receiver -q orders
    sqs-receiver -q orders -d https://sqs.us-east-2.amazonaws.com/123456789012/orders-dlq -m 5
"""

import logging
import sys
from collections.abc import Callable

from sqsreceiver.cli.arguments import build_parser, parse_command_line, resolve_options
from sqsreceiver.core.config import config
from sqsreceiver.core.console import key_watcher
from sqsreceiver.core.models import QueueOptions, ReceivedMessage
from sqsreceiver.sqs.client import SQSClient
from sqsreceiver.sqs.poller import MessagePoller
from sqsreceiver.sqs.provisioner import QueueProvisioner
from sqsreceiver.sqs.seeder import MessageSeeder

logger = logging.getLogger(__name__)

LIST_QUEUES_PROMPT = "Do you want to see the list of current queues? ((y) or n): "


def show_all_attributes(client: SQSClient, queue_url: str) -> None:
    attributes = client.get_all_attributes(queue_url)
    print(f"Queue: {queue_url}")
    for name, value in attributes.items():
        print(f"\t{name}: {value}")


def show_queues(client: SQSClient) -> None:
    print()
    for queue_url in client.list_queues():
        show_all_attributes(client, queue_url)


def offer_queue_listing(client: SQSClient, read_line: Callable[[str], str] | None = None) -> bool:
    """Ask whether to list existing queues; an empty answer means yes."""
    read_line = read_line or input
    response = read_line(LIST_QUEUES_PROMPT)
    if not response or response.lower() == "y":
        show_queues(client)
        return True
    return False


def create_queues(client: SQSClient, options: QueueOptions) -> str:
    """Provision the queues and print their attributes. Returns the main queue URL."""
    if not options.dead_letter_queue_url:
        print("\nNo dead-letter queue was specified. Creating one...")

    queues = QueueProvisioner(client).provision(options)

    if queues.created_dead_letter_queue:
        print("Your new dead-letter queue:")
        show_all_attributes(client, queues.dead_letter_queue_url)

    print("Your new message queue:")
    show_all_attributes(client, queues.queue_url)
    return queues.queue_url


def print_message(message: ReceivedMessage) -> bool:
    print(f"\nMessage body of {message.message_id}:")
    print(message.body)
    print(f"\nDeleting message {message.message_id} from queue...")
    return True


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    parser = build_parser()
    parsed = parse_command_line(argv, parser)
    client = SQSClient()

    if not parsed:
        parser.print_help()
        print("\nNo arguments specified.")
        offer_queue_listing(client)
        return 0

    options = resolve_options(parsed, parser)
    queue_url = create_queues(client, options)

    seeder = MessageSeeder(client, queue_url)
    seeder.send_example_messages()
    seeder.interact()

    if config.purge_before_poll:
        print(f"\nPurging messages from queue\n  {queue_url}...")
        client.purge_queue(queue_url)

    print(f"Reading messages from queue\n  {queue_url}")
    print("Press any key to stop. (Response might be slightly delayed.)")

    poller = MessagePoller(client, queue_url)
    with key_watcher() as key_pressed:
        processed = poller.poll(print_message, key_pressed)

    logger.info(f"Processed {processed} messages from {queue_url}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
