"""Core configuration and models for SQS Receiver."""

from sqsreceiver.core.config import config
from sqsreceiver.core.models import BatchResult, ProvisionedQueues, QueueOptions, ReceivedMessage, RedrivePolicy

__all__ = ["config", "QueueOptions", "RedrivePolicy", "ReceivedMessage", "BatchResult", "ProvisionedQueues"]
