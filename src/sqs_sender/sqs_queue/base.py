"""
Module: base.py
Description: Behaviour shared by the async and blocking SQS senders.

Holds the destination queue URL and encoder, and the request building,
response parsing and logging that do not depend on how the SQS call
itself is awaited.
"""

from typing import Any, Dict, Generic, Optional, Sequence, Type, TypeVar

from botocore.exceptions import ClientError

from sqs_sender.models.message import BatchSendResult
from sqs_sender.sqs_queue.encoding import MessageEncoder, build_batch_entries
from sqs_sender.utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar('T')


class BaseSQSSender(Generic[T]):
    """
    Base class for senders publishing JSON messages to one SQS queue.

    Attributes:
        client: SQS client (boto3 or aioboto3)
        queue_url: Destination queue URL
        encoder: Encoder turning payloads into JSON message bodies
    """

    def __init__(self, client: Any, queue_url: str, payload_type: Optional[Type[T]] = None):
        """
        Initialize the sender.

        Args:
            client: SQS client used for every call
            queue_url: URL of the destination queue
            payload_type: Optional payload type enforced during encoding

        Raises:
            ValueError: If queue_url is empty or invalid
        """
        if not queue_url or not isinstance(queue_url, str):
            raise ValueError("queue_url must be a non-empty string")

        self.client = client
        self.queue_url = queue_url
        self.encoder: MessageEncoder[T] = MessageEncoder(payload_type)

        logger.info(
            "SQS sender initialized",
            sender=type(self).__name__,
            queue_url=queue_url,
            payload_type=getattr(payload_type, '__name__', None)
        )

    def _send_message_request(self, value: T) -> Dict[str, Any]:
        return {
            'QueueUrl': self.queue_url,
            'MessageBody': self.encoder.encode(value)
        }

    def _send_batch_request(self, values: Sequence[T]) -> Dict[str, Any]:
        entries = build_batch_entries(self.encoder, values)
        return {
            'QueueUrl': self.queue_url,
            'Entries': [entry.to_request() for entry in entries]
        }

    def _log_sent(self, response: Dict[str, Any]) -> str:
        message_id = response['MessageId']
        logger.info(
            "Message sent to SQS",
            message_id=message_id,
            queue_url=self.queue_url
        )
        return message_id

    def _log_batch_sent(self, response: Dict[str, Any], entry_count: int) -> BatchSendResult:
        result = BatchSendResult.from_response(response)
        if result.failed:
            logger.warning(
                "SQS rejected batch entries",
                queue_url=self.queue_url,
                entry_count=entry_count,
                failed_ids=[failure.id for failure in result.failed],
                failed_codes=sorted({failure.code for failure in result.failed})
            )
        logger.info(
            "Batch sent to SQS",
            queue_url=self.queue_url,
            entry_count=entry_count,
            successful_count=len(result.successful),
            failed_count=len(result.failed)
        )
        return result

    def _log_failure(self, operation: str, error: Exception, **context: Any) -> None:
        if isinstance(error, ClientError):
            logger.error(
                f"Failed to {operation} to SQS",
                queue_url=self.queue_url,
                error_code=error.response['Error'].get('Code'),
                error_message=error.response['Error'].get('Message'),
                **context
            )
        else:
            logger.error(
                f"Unexpected error during {operation} to SQS",
                queue_url=self.queue_url,
                error=str(error),
                **context
            )
