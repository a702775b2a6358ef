"""Command-line entry point for SQS Receiver."""
