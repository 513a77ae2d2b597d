"""
Package: sqs_queue
Description: SQS senders for JSON messages.

Provides the async SQSSender, the blocking SyncSQSSender and the JSON
encoding they share.
"""

from .encoding import MessageEncoder
from .sqs import SQSSender
from .sync_sqs import SyncSQSSender

__all__ = ["MessageEncoder", "SQSSender", "SyncSQSSender"]
