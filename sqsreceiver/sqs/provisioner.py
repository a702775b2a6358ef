"""Queue creation with a dead-letter queue.

NO try-catch blocks - let exceptions bubble up. A dead-letter queue created
before a failing main-queue call is left in place.
"""

import logging

from sqsreceiver.core.models import (
    DEFAULT_MAX_RECEIVE_COUNT,
    DEFAULT_RECEIVE_WAIT_TIME,
    ProvisionedQueues,
    QueueOptions,
    RedrivePolicy,
)
from sqsreceiver.sqs.client import SQSClient

logger = logging.getLogger(__name__)

DEAD_LETTER_SUFFIX = "__dlq"


class QueueProvisioner:
    """Creates a message queue and its dead-letter queue."""

    def __init__(self, client: SQSClient):
        self.client = client

    def create_queue(
        self,
        queue_name: str,
        dead_letter_queue_url: str | None = None,
        max_receive_count: str | None = None,
        receive_wait_time: str | None = None,
    ) -> str:
        """
        Create a queue, attaching a redrive policy when a dead-letter queue is given.

        Args:
            queue_name: Name of the queue
            dead_letter_queue_url: URL of the dead-letter queue, or None for a plain queue
            max_receive_count: maxReceiveCount of the redrive policy
            receive_wait_time: ReceiveMessageWaitTimeSeconds of the queue

        Returns:
            Queue URL

        Raises:
            ClientError: If the ARN lookup or queue creation fails
        """
        attributes = {}

        if dead_letter_queue_url:
            policy = RedrivePolicy(
                dead_letter_target_arn=self.client.get_queue_arn(dead_letter_queue_url),
                max_receive_count=max_receive_count or DEFAULT_MAX_RECEIVE_COUNT,
            )
            attributes["ReceiveMessageWaitTimeSeconds"] = receive_wait_time or DEFAULT_RECEIVE_WAIT_TIME
            attributes["RedrivePolicy"] = policy.to_attribute()

        return self.client.create_queue(queue_name, attributes)

    def provision(self, options: QueueOptions) -> ProvisionedQueues:
        """
        Create the dead-letter queue (unless one was supplied) and the main queue.

        Args:
            options: Resolved command-line options

        Returns:
            ProvisionedQueues with both URLs

        Raises:
            ClientError: If any SQS call fails
        """
        dead_letter_queue_url = options.dead_letter_queue_url
        created_dead_letter_queue = False

        if not dead_letter_queue_url:
            logger.info(f"No dead-letter queue given for {options.queue_name}, creating one")
            dead_letter_queue_url = self.create_queue(options.queue_name + DEAD_LETTER_SUFFIX)
            created_dead_letter_queue = True

        queue_url = self.create_queue(
            options.queue_name,
            dead_letter_queue_url,
            options.max_receive_count,
            options.wait_time,
        )

        return ProvisionedQueues(
            queue_url=queue_url,
            dead_letter_queue_url=dead_letter_queue_url,
            created_dead_letter_queue=created_dead_letter_queue,
        )
