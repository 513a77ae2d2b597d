"""
Module: models
Description: Package initialization for Pydantic data models.

This package contains the models exchanged with SQS batch sends:
- BatchEntry: Positional entry of a batch request
- BatchSendResult: Per-entry outcome of a batch call
"""

from .message import BatchEntry, BatchEntryFailure, BatchEntrySuccess, BatchSendResult

__all__ = [
    "BatchEntry",
    "BatchEntryFailure",
    "BatchEntrySuccess",
    "BatchSendResult",
]
