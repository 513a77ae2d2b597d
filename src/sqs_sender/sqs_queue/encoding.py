"""
Module: encoding.py
Description: JSON encoding of message payloads.

Turns application values into compact JSON message bodies and builds
the positional entries of a batch request.

Key Components:
- MessageEncoder: Encodes a single value, optionally through a pydantic TypeAdapter
- build_batch_entries(): Encodes a sequence into BatchEntry objects

Dependencies: json, dataclasses, pydantic
"""

import dataclasses
import json
import math
from typing import Any, Generic, List, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel, TypeAdapter

from sqs_sender.exceptions import MessageEncodingError
from sqs_sender.models.message import BatchEntry

T = TypeVar('T')


def _default(value: Any) -> Any:
    """Fallback for values json.dumps does not handle natively."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode='json')
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _reject_non_finite(value: Any) -> None:
    """Raise on NaN or Infinity anywhere in a python-mode dump."""
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"Out of range float values are not JSON compliant: {value!r}")
    if isinstance(value, dict):
        for item in value.values():
            _reject_non_finite(item)
    elif isinstance(value, (list, tuple, set, frozenset)):
        for item in value:
            _reject_non_finite(item)


class MessageEncoder(Generic[T]):
    """
    Encode payloads of type T to JSON text.

    Without a payload type any value json.dumps accepts is encoded, plus
    pydantic models and dataclass instances. With a payload type, values
    are serialized through a pydantic TypeAdapter and values that do not
    match the type are rejected.

    Example:
        >>> MessageEncoder().encode({"id": 1, "name": "a"})
        '{"id":1,"name":"a"}'
    """

    def __init__(self, payload_type: Optional[Type[T]] = None):
        self.payload_type = payload_type
        self._adapter = TypeAdapter(payload_type) if payload_type is not None else None

    def encode(self, value: T) -> str:
        """
        Encode a value to compact JSON.

        Args:
            value: Value to encode

        Returns:
            JSON text

        Raises:
            MessageEncodingError: If the value cannot be represented as JSON
        """
        try:
            if self._adapter is not None:
                _reject_non_finite(self._adapter.dump_python(value, warnings='error'))
                body = self._adapter.dump_json(value, warnings='error').decode('utf-8')
            else:
                body = json.dumps(
                    value,
                    separators=(',', ':'),
                    ensure_ascii=False,
                    allow_nan=False,
                    default=_default
                )
            # Lone surrogates survive json.dumps but cannot be sent as UTF-8
            body.encode('utf-8')
        except (TypeError, ValueError) as e:
            raise MessageEncodingError(f"failed to convert to json: {e}") from e
        return body


def build_batch_entries(encoder: MessageEncoder[T], values: Sequence[T]) -> List[BatchEntry]:
    """
    Encode values into positional batch entries.

    Entry i carries id str(i). Encoding stops at the first value that
    cannot be encoded.

    Args:
        encoder: Encoder used for every value
        values: Values to encode

    Returns:
        One BatchEntry per value, in input order

    Raises:
        MessageEncodingError: If any value cannot be encoded; index names the value
    """
    entries = []
    for i, value in enumerate(values):
        try:
            body = encoder.encode(value)
        except MessageEncodingError as e:
            raise MessageEncodingError(
                f"failed to convert to json: entry {i}: {e.__cause__}", index=i
            ) from e.__cause__
        entries.append(BatchEntry(id=str(i), message_body=body))
    return entries
