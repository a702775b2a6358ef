"""Pydantic models - Single source of truth for data structures.

NO try-catch blocks - Pydantic validates automatically and raises ValidationError.
"""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_MAX_RECEIVE_COUNT = "10"
DEFAULT_RECEIVE_WAIT_TIME = "2"


class QueueOptions(BaseModel):
    """Options resolved from the command line."""

    queue_name: str = Field(..., min_length=1, description="Name of the queue to create")
    dead_letter_queue_url: str | None = Field(default=None, description="URL of an existing dead-letter queue")
    max_receive_count: str = Field(default=DEFAULT_MAX_RECEIVE_COUNT, description="maxReceiveCount of the redrive policy")
    wait_time: str = Field(default=DEFAULT_RECEIVE_WAIT_TIME, description="ReceiveMessageWaitTimeSeconds")


class RedrivePolicy(BaseModel):
    """RedrivePolicy queue attribute."""

    model_config = ConfigDict(populate_by_name=True)

    dead_letter_target_arn: str = Field(..., alias="deadLetterTargetArn")
    max_receive_count: str = Field(default=DEFAULT_MAX_RECEIVE_COUNT, alias="maxReceiveCount")

    def to_attribute(self) -> str:
        """Serialize to the JSON string SQS expects."""
        return self.model_dump_json(by_alias=True)


class ReceivedMessage(BaseModel):
    """A message returned by receive_message."""

    model_config = ConfigDict(populate_by_name=True)

    message_id: str = Field(..., alias="MessageId")
    receipt_handle: str = Field(..., alias="ReceiptHandle")
    body: str = Field(default="", alias="Body")


class BatchResult(BaseModel):
    """Outcome of a send_message_batch call."""

    successful: list[str] = Field(default_factory=list)
    failed: list[str] = Field(default_factory=list)


class ProvisionedQueues(BaseModel):
    """URLs of the queues set up for a run."""

    queue_url: str
    dead_letter_queue_url: str
    created_dead_letter_queue: bool = False
