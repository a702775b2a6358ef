"""Shared pytest fixtures."""

import os

import pytest
from moto import mock_aws

# Fake credentials before importing sqsreceiver modules so nothing reaches AWS
os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-2")
os.environ.pop("AWS_PROFILE", None)
os.environ.pop("SQS_RECEIVER_ENDPOINT_URL", None)

from sqsreceiver.sqs.client import SQSClient  # noqa: E402

REGION = "us-east-2"


@pytest.fixture
def sqs_client():
    """SQSClient backed by moto's in-memory SQS."""
    with mock_aws():
        yield SQSClient(region=REGION)


@pytest.fixture
def queue_url(sqs_client):
    """A plain queue with no redrive policy."""
    return sqs_client.create_queue("test-queue")


@pytest.fixture
def mock_client(mocker):
    """MagicMock standing in for SQSClient."""
    return mocker.MagicMock(spec=SQSClient)


@pytest.fixture(autouse=True)
def reset_env():
    """Reset environment variables after each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)
