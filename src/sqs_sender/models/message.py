"""
Module: message.py
Description: Batch entry and batch result models for SQS sends.

Defines the request entries built for SendMessageBatch and the parsed
per-entry outcome of that call.

Key Components:
- BatchEntry: One positional entry of a batch request
- BatchEntrySuccess / BatchEntryFailure: Per-entry outcomes reported by SQS
- BatchSendResult: Aggregate outcome of one batch call

Dependencies: pydantic, typing
"""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field

from sqs_sender.exceptions import PartialBatchFailureError


class BatchEntry(BaseModel):
    """
    One entry of a SendMessageBatch request.

    Attributes:
        id: Positional identifier, unique within its batch
        message_body: JSON text of the value
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Entry identifier within the batch")
    message_body: str = Field(..., description="JSON encoded message body")

    def to_request(self) -> Dict[str, str]:
        """Render the entry in the shape SendMessageBatch expects."""
        return {'Id': self.id, 'MessageBody': self.message_body}


class BatchEntrySuccess(BaseModel):
    """Entry accepted by SQS."""

    model_config = ConfigDict(frozen=True)

    id: str
    message_id: str


class BatchEntryFailure(BaseModel):
    """
    Entry rejected by SQS.

    Attributes:
        id: Identifier of the rejected entry
        code: SQS error code
        message: SQS error message, when provided
        sender_fault: True when the request itself was at fault
    """

    model_config = ConfigDict(frozen=True)

    id: str
    code: str
    message: str = ""
    sender_fault: bool = False


class BatchSendResult(BaseModel):
    """Per-entry outcome of one batch send."""

    model_config = ConfigDict(frozen=True)

    successful: List[BatchEntrySuccess] = Field(default_factory=list)
    failed: List[BatchEntryFailure] = Field(default_factory=list)

    @classmethod
    def from_response(cls, response: Dict[str, Any]) -> "BatchSendResult":
        """
        Parse a SendMessageBatch response.

        Args:
            response: Response dictionary returned by the SQS client

        Returns:
            BatchSendResult with accepted and rejected entries
        """
        return cls(
            successful=[
                BatchEntrySuccess(id=entry['Id'], message_id=entry['MessageId'])
                for entry in response.get('Successful', [])
            ],
            failed=[
                BatchEntryFailure(
                    id=entry['Id'],
                    code=entry['Code'],
                    message=entry.get('Message', ''),
                    sender_fault=entry.get('SenderFault', False)
                )
                for entry in response.get('Failed', [])
            ]
        )

    @property
    def all_succeeded(self) -> bool:
        return not self.failed

    def raise_for_failures(self) -> None:
        """
        Raise if SQS rejected any entry.

        Raises:
            PartialBatchFailureError: If the batch has rejected entries
        """
        if self.failed:
            raise PartialBatchFailureError(list(self.failed))
