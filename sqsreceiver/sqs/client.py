"""SQS client wrapper.

NO try-catch blocks - let boto3 exceptions bubble up.
"""

import logging

import boto3

from sqsreceiver.core.config import config
from sqsreceiver.core.models import BatchResult, ReceivedMessage

logger = logging.getLogger(__name__)


class SQSClient:
    """High-level SQS operations."""

    def __init__(self, region: str | None = None, profile: str | None = None, endpoint_url: str | None = None):
        self.region = region or config.aws_region
        session = boto3.Session(profile_name=profile or config.aws_profile, region_name=self.region)
        self.sqs = session.client("sqs", endpoint_url=endpoint_url or config.endpoint_url)

    def create_queue(self, queue_name: str, attributes: dict[str, str] | None = None) -> str:
        """
        Create a queue.

        Args:
            queue_name: Name of the queue
            attributes: Queue attributes set at creation

        Returns:
            Queue URL

        Raises:
            ClientError: If queue creation fails
        """
        response = self.sqs.create_queue(QueueName=queue_name, Attributes=attributes or {})
        queue_url = response["QueueUrl"]
        logger.info(f"Created queue {queue_url}")
        return queue_url

    def list_queues(self) -> list[str]:
        """
        List URLs of all queues in the account and region.

        Raises:
            ClientError: If listing fails
        """
        urls = []
        paginator = self.sqs.get_paginator("list_queues")
        for page in paginator.paginate():
            urls.extend(page.get("QueueUrls", []))
        return urls

    def get_all_attributes(self, queue_url: str) -> dict[str, str]:
        """
        Get every attribute of a queue.

        Raises:
            ClientError: If get attributes fails
        """
        response = self.sqs.get_queue_attributes(QueueUrl=queue_url, AttributeNames=["All"])
        return response.get("Attributes", {})

    def get_queue_arn(self, queue_url: str) -> str:
        """
        Get the ARN of a queue.

        Raises:
            ClientError: If get attributes fails
        """
        response = self.sqs.get_queue_attributes(QueueUrl=queue_url, AttributeNames=["QueueArn"])
        return response["Attributes"]["QueueArn"]

    def send_message(self, queue_url: str, message_body: str) -> str:
        """
        Send single message to queue.

        Args:
            queue_url: Target queue URL
            message_body: Message body, sent verbatim

        Returns:
            Message ID

        Raises:
            ClientError: If SQS send fails
        """
        response = self.sqs.send_message(
            QueueUrl=queue_url,
            MessageBody=message_body,
        )
        logger.info(f"Sent message {response['MessageId']} to {queue_url}")
        return response["MessageId"]

    def send_batch(self, queue_url: str, entries: list[dict]) -> BatchResult:
        """
        Send batch of messages (max 10).

        Args:
            queue_url: Target queue URL
            entries: List of message entries with 'Id' and 'MessageBody'

        Returns:
            BatchResult with successful and failed entry ids

        Raises:
            ClientError: If SQS batch send fails
        """
        response = self.sqs.send_message_batch(
            QueueUrl=queue_url,
            Entries=entries,
        )

        result = BatchResult(
            successful=[entry["Id"] for entry in response.get("Successful", [])],
            failed=[entry["Id"] for entry in response.get("Failed", [])],
        )
        logger.info(f"Batch to {queue_url}: {len(result.successful)} sent, {len(result.failed)} failed")
        return result

    def receive_messages(self, queue_url: str, max_messages: int = 1, wait_time: int = 0) -> list[ReceivedMessage]:
        """
        Receive messages with long polling.

        Args:
            queue_url: Queue URL
            max_messages: MaxNumberOfMessages (1-10)
            wait_time: Seconds to wait for a message before returning empty

        Returns:
            Received messages, possibly empty

        Raises:
            ClientError: If receive fails
        """
        response = self.sqs.receive_message(
            QueueUrl=queue_url,
            MaxNumberOfMessages=max_messages,
            WaitTimeSeconds=wait_time,
        )
        return [ReceivedMessage.model_validate(msg) for msg in response.get("Messages", [])]

    def delete_message(self, queue_url: str, receipt_handle: str) -> None:
        """
        Delete a received message.

        Raises:
            ClientError: If the receipt handle is invalid or delete fails
        """
        self.sqs.delete_message(QueueUrl=queue_url, ReceiptHandle=receipt_handle)

    def purge_queue(self, queue_url: str) -> None:
        """
        Purge all messages from queue.

        Raises:
            ClientError: If purge fails
        """
        self.sqs.purge_queue(QueueUrl=queue_url)
        logger.info(f"Purged queue {queue_url}")
