"""
Module: exceptions.py
Description: Exceptions raised by the SQS sender.

Service and transport failures are not wrapped: botocore's ClientError
and BotoCoreError reach the caller unchanged.
"""

from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from sqs_sender.models.message import BatchEntryFailure


class SQSSenderError(Exception):
    """Base exception for the SQS sender."""

    pass


class ConfigurationError(SQSSenderError):
    """Exception raised when AWS configuration or the destination cannot be resolved."""

    pass


class MessageEncodingError(SQSSenderError):
    """
    Exception raised when a value cannot be converted to JSON.

    Attributes:
        index: Position of the offending value in a batch, None for single sends
    """

    def __init__(self, message: str, index: Optional[int] = None):
        super().__init__(message)
        self.index = index


class PartialBatchFailureError(SQSSenderError):
    """
    Exception raised when SQS rejected some entries of a batch.

    Attributes:
        failures: Rejected entries as reported by SQS
    """

    def __init__(self, failures: List["BatchEntryFailure"]):
        ids = ", ".join(failure.id for failure in failures)
        super().__init__(f"{len(failures)} batch entries rejected by SQS: {ids}")
        self.failures = failures
