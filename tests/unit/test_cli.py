"""Tests for sqsreceiver/cli/main.py."""

import json
from contextlib import contextmanager

import pytest

from sqsreceiver.cli import main as cli
from sqsreceiver.core.models import ReceivedMessage
from sqsreceiver.sqs.seeder import JSON_MESSAGE


@contextmanager
def stop_immediately():
    yield lambda: True


@pytest.fixture
def no_key_watch(mocker):
    """Replace the terminal key watcher with one that stops after the first receive."""
    return mocker.patch("sqsreceiver.cli.main.key_watcher", side_effect=stop_immediately)


@pytest.fixture
def mocked_sqs(sqs_client, mocker):
    """Make main() build its client inside the moto context."""
    mocker.patch("sqsreceiver.cli.main.SQSClient", return_value=sqs_client)
    return sqs_client


class TestNoArguments:
    """Running with zero arguments prints help and offers the queue listing."""

    def test_declined_listing(self, mocked_sqs, mocker, capsys):
        mocked_sqs.create_queue("existing")
        mocker.patch("builtins.input", return_value="n")

        assert cli.main([]) == 0

        out = capsys.readouterr().out
        assert "usage: sqs-receiver -q <queue-name>" in out
        assert "No arguments specified." in out
        assert "Queue:" not in out

    def test_empty_answer_lists_queues(self, mocked_sqs, mocker, capsys):
        url = mocked_sqs.create_queue("existing")
        mocker.patch("builtins.input", return_value="")

        assert cli.main([]) == 0

        out = capsys.readouterr().out
        assert f"Queue: {url}" in out
        assert "\tQueueArn: " in out

    def test_nothing_created_without_arguments(self, mocked_sqs, mocker):
        mocker.patch("builtins.input", return_value="Y")

        cli.main([])

        assert mocked_sqs.list_queues() == []


    def test_listing_prompt_reads_console_input(self, mock_client, mocker):
        mock_input = mocker.patch("builtins.input", return_value="n")

        assert cli.offer_queue_listing(mock_client) is False

        mock_input.assert_called_once_with(cli.LIST_QUEUES_PROMPT)
        mock_client.list_queues.assert_not_called()


class TestUsageErrors:
    """Usage errors exit before any queue is created."""

    def test_too_many_arguments(self, mocked_sqs):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["-q", "orders", "-d", "http://queue/dlq", "-m", "3", "-w", "1"])

        assert exc_info.value.code == 2
        assert mocked_sqs.list_queues() == []

    def test_missing_queue_name(self, mocked_sqs):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["-m", "3"])

        assert exc_info.value.code == 2


class TestFullRun:
    """End-to-end run against moto."""

    def test_creates_queues_seeds_and_polls(self, mocked_sqs, mocker, no_key_watch, capsys):
        mocker.patch("builtins.input", side_effect=["typed by user", "exit"])

        assert cli.main(["-q", "orders", "-w", "0"]) == 0

        urls = mocked_sqs.list_queues()
        queue_url = next(url for url in urls if url.endswith("/orders"))
        dlq_url = next(url for url in urls if url.endswith("/orders__dlq"))
        policy = json.loads(mocked_sqs.get_all_attributes(queue_url)["RedrivePolicy"])
        assert policy["deadLetterTargetArn"] == mocked_sqs.get_queue_arn(dlq_url)

        out = capsys.readouterr().out
        assert "No dead-letter queue was specified. Creating one..." in out
        assert "Your new dead-letter queue:" in out
        assert "Your new message queue:" in out
        assert "Message xmlMsg successfully queued." in out
        assert "Message body of " in out
        assert "Deleting message " in out

        # Five were sent, one was received and deleted before the key press
        attributes = mocked_sqs.get_all_attributes(queue_url)
        assert int(attributes["ApproximateNumberOfMessages"]) == 4

    def test_supplied_dead_letter_queue_is_reused(self, mocked_sqs, mocker, no_key_watch, capsys):
        dlq_url = mocked_sqs.create_queue("shared-dlq")
        mocker.patch("builtins.input", return_value="exit")

        cli.main(["-q", "orders", "-d", dlq_url])

        assert not any(url.endswith("/orders__dlq") for url in mocked_sqs.list_queues())
        assert "Your new dead-letter queue:" not in capsys.readouterr().out

    def test_purge_before_poll(self, mocked_sqs, mocker, no_key_watch, capsys):
        mocker.patch("sqsreceiver.cli.main.config.purge_before_poll", True)
        mocker.patch("builtins.input", return_value="exit")
        poll = mocker.patch("sqsreceiver.cli.main.MessagePoller.poll", return_value=0)

        cli.main(["-q", "orders"])

        queue_url = next(url for url in mocked_sqs.list_queues() if url.endswith("/orders"))
        assert mocked_sqs.get_all_attributes(queue_url)["ApproximateNumberOfMessages"] == "0"
        assert "Purging messages from queue" in capsys.readouterr().out
        poll.assert_called_once()


class TestPrintMessage:
    """Tests for print_message handler."""

    def test_prints_body_and_id(self, capsys):
        message = ReceivedMessage(message_id="m-1", receipt_handle="rh", body=JSON_MESSAGE)

        assert cli.print_message(message) is True

        out = capsys.readouterr().out
        assert "Message body of m-1:" in out
        assert JSON_MESSAGE in out
