"""SQS Receiver - create an SQS queue with a dead-letter queue, seed it and poll it."""

__version__ = "1.0.0"

from sqsreceiver.core.config import config
from sqsreceiver.core.models import QueueOptions, ReceivedMessage

__all__ = ["config", "QueueOptions", "ReceivedMessage", "__version__"]
