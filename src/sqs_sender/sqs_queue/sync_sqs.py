"""
Module: sync_sqs.py
Description: Blocking SQS sender for JSON messages.

Synchronous counterpart of SQSSender on a plain boto3 client, for
scripts and Lambda handlers that do not run an event loop.
"""

from typing import Any, Iterable, Optional, Type, TypeVar

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from sqs_sender.config.aws import load_session
from sqs_sender.config.settings import Settings, settings as default_settings
from sqs_sender.exceptions import ConfigurationError
from sqs_sender.models.message import BatchSendResult
from sqs_sender.sqs_queue.base import BaseSQSSender

T = TypeVar('T')


class SyncSQSSender(BaseSQSSender[T]):
    """
    Blocking sender publishing JSON messages to one SQS queue.

    Example:
        >>> with SyncSQSSender.from_settings() as sender:
        ...     sender.send({"id": 1, "name": "a"})
    """

    @classmethod
    def from_settings(
        cls,
        queue_url: Optional[str] = None,
        settings: Optional[Settings] = None,
        payload_type: Optional[Type[T]] = None,
        **client_kwargs: Any
    ) -> "SyncSQSSender[T]":
        """
        Create a sender from ambient AWS configuration.

        Args:
            queue_url: Destination queue URL; settings.queue_url when omitted
            settings: Sender settings; the module-level settings when omitted
            payload_type: Optional payload type enforced during encoding
            **client_kwargs: Extra arguments for session.client('sqs', ...)

        Raises:
            ConfigurationError: If no queue URL is configured or ambient AWS
                configuration cannot be resolved
        """
        settings = settings or default_settings
        queue_url = queue_url or settings.queue_url
        if not queue_url:
            raise ConfigurationError("No destination queue URL configured")

        session = load_session(settings)
        if settings.aws_endpoint_url:
            client_kwargs.setdefault('endpoint_url', settings.aws_endpoint_url)
        return cls.from_session(session, queue_url, payload_type=payload_type, **client_kwargs)

    @classmethod
    def from_session(
        cls,
        session: boto3.Session,
        queue_url: str,
        payload_type: Optional[Type[T]] = None,
        **client_kwargs: Any
    ) -> "SyncSQSSender[T]":
        """Create a sender from an explicit boto3 session."""
        return cls(session.client('sqs', **client_kwargs), queue_url, payload_type=payload_type)

    def __enter__(self) -> "SyncSQSSender[T]":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connections."""
        self.client.close()

    def send(self, value: T) -> str:
        """
        Send one value as a JSON message.

        Returns:
            Message ID from SQS

        Raises:
            MessageEncodingError: If the value cannot be encoded; nothing is sent
            ClientError: If SQS rejects the request
            BotoCoreError: If the request could not be made
        """
        request = self._send_message_request(value)

        try:
            response = self.client.send_message(**request)
        except (ClientError, BotoCoreError) as e:
            self._log_failure("send message", e)
            raise

        return self._log_sent(response)

    def send_batch(self, values: Iterable[T]) -> BatchSendResult:
        """
        Send values as one SendMessageBatch call.

        Returns:
            Per-entry outcome; empty when values is empty

        Raises:
            MessageEncodingError: If any value cannot be encoded; nothing is sent
            ClientError: If SQS rejects the request as a whole
            BotoCoreError: If the request could not be made
        """
        values = list(values)
        if not values:
            return BatchSendResult()

        request = self._send_batch_request(values)

        try:
            response = self.client.send_message_batch(**request)
        except (ClientError, BotoCoreError) as e:
            self._log_failure("send batch", e, entry_count=len(values))
            raise

        return self._log_batch_sent(response, len(values))
