"""Example and interactive message sending.

NO try-catch blocks - let exceptions bubble up.
"""

import logging
from collections.abc import Callable

from sqsreceiver.core.models import BatchResult
from sqsreceiver.sqs.client import SQSClient

logger = logging.getLogger(__name__)

JSON_MESSAGE = '{"product":[{"name":"Product A","price": "32"},{"name": "Product B","price": "27"}]}'
XML_MESSAGE = '<products><product name="Product A" price="32" /><product name="Product B" price="27" /></products>'
CUSTOM_MESSAGE = "||product|Product A|32||product|Product B|27||"
TEXT_MESSAGE = "Just a plain text message."

BATCH_MESSAGES = {
    "xmlMsg": XML_MESSAGE,
    "customMsg": CUSTOM_MESSAGE,
    "textMsg": TEXT_MESSAGE,
}

EXIT_COMMAND = "exit"
PROMPT = '\nType a message for the queue or "exit" to quit:'


class MessageSeeder:
    """Sends messages to a single queue."""

    def __init__(self, client: SQSClient, queue_url: str):
        self.client = client
        self.queue_url = queue_url

    def send(self, message_body: str) -> str:
        """Send one message and report it on the console."""
        message_id = self.client.send_message(self.queue_url, message_body)
        print(f"Message added to queue\n  {self.queue_url}")
        return message_id

    def send_batch(self, messages: dict[str, str]) -> BatchResult:
        """
        Send messages as one batch, keyed by entry id.

        Failed entries are not inspected or retried.
        """
        print(f"\nSending a batch of messages to queue\n  {self.queue_url}")
        entries = [{"Id": entry_id, "MessageBody": body} for entry_id, body in messages.items()]

        result = self.client.send_batch(self.queue_url, entries)
        for entry_id in result.successful:
            print(f"Message {entry_id} successfully queued.")
        return result

    def send_example_messages(self) -> BatchResult:
        """
        Send the JSON example on its own, then the XML, custom and text examples as a batch.

        Raises:
            ClientError: If SQS send fails
        """
        self.send(JSON_MESSAGE)
        return self.send_batch(BATCH_MESSAGES)

    def interact(self, read_line: Callable[[], str] | None = None) -> int:
        """
        Forward console lines as messages until the user types "exit".

        Args:
            read_line: Source of user input, called once per prompt (default: input)

        Returns:
            Number of messages sent

        Raises:
            ClientError: If SQS send fails
        """
        read_line = read_line or input
        sent = 0

        while True:
            print(PROMPT)
            try:
                line = read_line()
            except EOFError:
                break

            if line.lower() == EXIT_COMMAND:
                break

            self.send(line)
            sent += 1

        logger.info(f"Interactive session sent {sent} messages")
        return sent
