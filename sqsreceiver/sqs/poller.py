"""Receive-and-delete polling loop.

NO try-catch blocks - let exceptions bubble up.
"""

import logging
from collections.abc import Callable

from sqsreceiver.core.config import config
from sqsreceiver.core.models import ReceivedMessage
from sqsreceiver.sqs.client import SQSClient

logger = logging.getLogger(__name__)


class MessagePoller:
    """Polls a queue, hands each message to a handler and deletes it."""

    def __init__(
        self,
        client: SQSClient,
        queue_url: str,
        max_messages: int | None = None,
        wait_time: int | None = None,
    ):
        self.client = client
        self.queue_url = queue_url
        self.max_messages = max_messages or config.max_messages
        self.wait_time = config.poll_wait_seconds if wait_time is None else wait_time

    def receive(self) -> list[ReceivedMessage]:
        """
        One long-poll receive call.

        Raises:
            ClientError: If receive fails
        """
        return self.client.receive_messages(self.queue_url, self.max_messages, self.wait_time)

    def delete(self, message: ReceivedMessage) -> None:
        logger.info(f"Deleting message {message.message_id}")
        self.client.delete_message(self.queue_url, message.receipt_handle)

    def poll(
        self,
        handler: Callable[[ReceivedMessage], bool],
        should_stop: Callable[[], bool],
    ) -> int:
        """
        Receive messages until should_stop() returns True.

        should_stop is checked after each receive call, never during one.

        Args:
            handler: Called per message; the message is deleted if it returns True
            should_stop: Polled between iterations

        Returns:
            Number of messages deleted

        Raises:
            ClientError: If receive or delete fails
        """
        processed = 0

        while True:
            for message in self.receive():
                if handler(message):
                    self.delete(message)
                    processed += 1

            if should_stop():
                break

        logger.info(f"Polling stopped after {processed} messages")
        return processed
