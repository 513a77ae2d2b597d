"""
Module: sqs.py
Description: Async SQS sender for JSON messages.

Publishes JSON-encoded values to a single SQS queue, one at a time or
as one SendMessageBatch call. Nothing is retried: encoding errors raise
MessageEncodingError before any request, and SQS errors are logged and
re-raised unchanged. Cancelling the awaiting task aborts the request.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Iterable, Optional, Type, TypeVar

import aioboto3
from botocore.exceptions import BotoCoreError, ClientError

from sqs_sender.config.aws import load_session
from sqs_sender.config.settings import Settings, settings as default_settings
from sqs_sender.exceptions import ConfigurationError
from sqs_sender.models.message import BatchSendResult
from sqs_sender.sqs_queue.base import BaseSQSSender

T = TypeVar('T')


class SQSSender(BaseSQSSender[T]):
    """
    Async sender publishing JSON messages to one SQS queue.

    Wraps an open aioboto3 SQS client. Use connect() to build one from
    ambient AWS configuration and close the client on exit.

    Example:
        >>> async with SQSSender.connect("https://sqs.us-east-1.amazonaws.com/123/orders") as sender:
        ...     await sender.send({"id": 1, "name": "a"})
        ...     await sender.send_batch([{"id": 2}, {"id": 3}])
    """

    @classmethod
    @asynccontextmanager
    async def connect(
        cls,
        queue_url: Optional[str] = None,
        *,
        settings: Optional[Settings] = None,
        session: Optional[aioboto3.Session] = None,
        payload_type: Optional[Type[T]] = None,
        **client_kwargs: Any
    ) -> AsyncIterator["SQSSender[T]"]:
        """
        Open an SQS client and yield a sender bound to it.

        Args:
            queue_url: Destination queue URL; settings.queue_url when omitted
            settings: Sender settings; the module-level settings when omitted
            session: Explicit aioboto3 session; ambient configuration is loaded when omitted
            payload_type: Optional payload type enforced during encoding
            **client_kwargs: Extra arguments for session.client('sqs', ...)

        Yields:
            Ready-to-use SQSSender

        Raises:
            ConfigurationError: If no queue URL is configured or ambient AWS
                configuration cannot be resolved
        """
        settings = settings or default_settings
        queue_url = queue_url or settings.queue_url
        if not queue_url:
            raise ConfigurationError("No destination queue URL configured")

        if session is None:
            ambient = load_session(settings)
            session = aioboto3.Session(
                region_name=ambient.region_name,
                profile_name=settings.aws_profile
            )
        if settings.aws_endpoint_url:
            client_kwargs.setdefault('endpoint_url', settings.aws_endpoint_url)

        async with session.client('sqs', **client_kwargs) as client:
            yield cls(client, queue_url, payload_type=payload_type)

    async def send(self, value: T) -> str:
        """
        Send one value as a JSON message.

        Args:
            value: JSON-serializable value

        Returns:
            Message ID from SQS

        Raises:
            MessageEncodingError: If the value cannot be encoded; nothing is sent
            ClientError: If SQS rejects the request
            BotoCoreError: If the request could not be made
        """
        request = self._send_message_request(value)

        try:
            response = await self.client.send_message(**request)
        except (ClientError, BotoCoreError) as e:
            self._log_failure("send message", e)
            raise

        return self._log_sent(response)

    async def send_batch(self, values: Iterable[T]) -> BatchSendResult:
        """
        Send values as one SendMessageBatch call.

        Entry i carries id str(i). Batches are not chunked, so exceeding
        SQS batch limits surfaces as a ClientError.

        Args:
            values: JSON-serializable values; any iterable, consumed once

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
            response = await self.client.send_message_batch(**request)
        except (ClientError, BotoCoreError) as e:
            self._log_failure("send batch", e, entry_count=len(values))
            raise

        return self._log_batch_sent(response, len(values))
