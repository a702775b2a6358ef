"""SQS operations for SQS Receiver."""

from sqsreceiver.sqs.client import SQSClient
from sqsreceiver.sqs.poller import MessagePoller
from sqsreceiver.sqs.provisioner import QueueProvisioner
from sqsreceiver.sqs.seeder import MessageSeeder

__all__ = ["SQSClient", "QueueProvisioner", "MessageSeeder", "MessagePoller"]
