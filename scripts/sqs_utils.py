#!/usr/bin/env python3
"""
SQS Utility Functions

Housekeeping for queues created by sqs-receiver.

Usage:
    python sqs_utils.py list                   # List queues with their attributes
    python sqs_utils.py purge <queue-url>      # Clear all messages from a queue
"""

import argparse
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqsreceiver.cli.main import show_queues  # noqa: E402
from sqsreceiver.sqs.client import SQSClient  # noqa: E402


def purge_queue(client: SQSClient, queue_url: str, confirm: bool = True) -> bool:
    """
    Purge all messages from queue.

    Args:
        client: SQS client
        queue_url: SQS queue URL
        confirm: Require confirmation before purging

    Returns:
        True if the queue was purged
    """
    if confirm:
        print("⚠️  WARNING: This will delete ALL messages from the queue!")
        print(f"   Queue: {queue_url}")
        response = input("   Type 'yes' to confirm: ")
        if response.lower() != "yes":
            print("Cancelled.")
            return False

    client.purge_queue(queue_url)
    print("✓ Queue purged successfully")
    return True


def main():
    parser = argparse.ArgumentParser(description="SQS utility functions")
    parser.add_argument("--region", help="AWS region (default: from SQS_RECEIVER_AWS_REGION)")
    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    subparsers.add_parser("list", help="List queues with all attributes")

    purge_parser = subparsers.add_parser("purge", help="Purge all messages from queue")
    purge_parser.add_argument("queue_url", help="URL of the queue to purge")
    purge_parser.add_argument("--force", action="store_true", help="Skip confirmation prompt")

    args = parser.parse_args()
    client = SQSClient(region=args.region)

    if args.command == "list":
        show_queues(client)
    elif args.command == "purge":
        purge_queue(client, args.queue_url, confirm=not args.force)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
