"""
Module: test_message.py
Description: Unit tests for batch entry and batch result models.
"""

import pytest
from pydantic import ValidationError

from sqs_sender.exceptions import PartialBatchFailureError
from sqs_sender.models.message import BatchEntry, BatchEntryFailure, BatchSendResult


class TestBatchEntry:
    """Test cases for BatchEntry."""

    def test_to_request(self):
        """Test the SendMessageBatch entry shape."""
        entry = BatchEntry(id="0", message_body='{"id":1}')

        assert entry.to_request() == {'Id': '0', 'MessageBody': '{"id":1}'}

    def test_empty_id_rejected(self):
        """Test entries need an identifier."""
        with pytest.raises(ValidationError):
            BatchEntry(id="", message_body="{}")

    def test_frozen(self):
        """Test entries cannot be modified after creation."""
        entry = BatchEntry(id="0", message_body="{}")

        with pytest.raises(ValidationError):
            entry.id = "1"


class TestBatchSendResult:
    """Test cases for BatchSendResult."""

    def test_from_response(self):
        """Test parsing of Successful and Failed lists."""
        result = BatchSendResult.from_response({
            'Successful': [
                {'Id': '0', 'MessageId': 'msg-a', 'MD5OfMessageBody': 'x'},
                {'Id': '2', 'MessageId': 'msg-c', 'MD5OfMessageBody': 'z'},
            ],
            'Failed': [
                {'Id': '1', 'Code': 'InvalidParameterValue', 'Message': 'Too long', 'SenderFault': True},
            ],
            'ResponseMetadata': {'HTTPStatusCode': 200}
        })

        assert [entry.id for entry in result.successful] == ['0', '2']
        assert result.successful[1].message_id == 'msg-c'
        assert result.failed == [
            BatchEntryFailure(id='1', code='InvalidParameterValue', message='Too long', sender_fault=True)
        ]
        assert not result.all_succeeded

    def test_from_response_without_failures(self):
        """Test responses omitting Failed parse as fully successful."""
        result = BatchSendResult.from_response({
            'Successful': [{'Id': '0', 'MessageId': 'msg-a'}]
        })

        assert result.all_succeeded
        result.raise_for_failures()

    def test_empty_result(self):
        """Test the result of an empty batch."""
        result = BatchSendResult()

        assert result.successful == []
        assert result.failed == []
        assert result.all_succeeded

    def test_raise_for_failures(self):
        """Test rejected entries raise PartialBatchFailureError."""
        result = BatchSendResult.from_response({
            'Failed': [
                {'Id': '3', 'Code': 'InternalError', 'SenderFault': False},
                {'Id': '5', 'Code': 'InternalError', 'SenderFault': False},
            ]
        })

        with pytest.raises(PartialBatchFailureError, match="2 batch entries rejected by SQS: 3, 5") as exc_info:
            result.raise_for_failures()

        assert [failure.id for failure in exc_info.value.failures] == ['3', '5']
