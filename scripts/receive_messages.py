#!/usr/bin/env python3
"""Create a queue with a dead-letter queue, seed it and poll it.

Example:
    python scripts/receive_messages.py -q orders
    python scripts/receive_messages.py -q orders -d https://sqs.us-east-2.amazonaws.com/123456789012/orders-dlq
"""

import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqsreceiver.cli.main import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
