"""
Package: sqs_sender
Description: Publish JSON-encoded messages to Amazon SQS.

Exports the async and blocking senders, the batch result model and the
exceptions callers are expected to handle.
"""

from .exceptions import (
    ConfigurationError,
    MessageEncodingError,
    PartialBatchFailureError,
    SQSSenderError,
)
from .models.message import BatchSendResult
from .sqs_queue.sqs import SQSSender
from .sqs_queue.sync_sqs import SyncSQSSender
from .utils.logger import configure_logging

__all__ = [
    "BatchSendResult",
    "ConfigurationError",
    "MessageEncodingError",
    "PartialBatchFailureError",
    "SQSSender",
    "SQSSenderError",
    "SyncSQSSender",
    "configure_logging",
]
