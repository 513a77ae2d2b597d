"""
Module: conftest.py
Description: Shared pytest fixtures for SQS sender tests.

Provides isolated AWS environments, test settings, moto-backed SQS
queues and mocked async clients. Uses moto for AWS service mocking so
no test reaches a real AWS account.
"""

import pytest
from moto import mock_aws
import boto3
from unittest.mock import AsyncMock, MagicMock

from sqs_sender.config.settings import Settings
from sqs_sender.sqs_queue.sqs import SQSSender
from sqs_sender.sqs_queue.sync_sqs import SyncSQSSender

TEST_REGION = "us-east-1"
TEST_QUEUE_URL = "https://sqs.us-east-1.amazonaws.com/123456789012/test-queue"

_AMBIENT_AWS_VARIABLES = (
    "AWS_ACCESS_KEY_ID",
    "AWS_SECRET_ACCESS_KEY",
    "AWS_SESSION_TOKEN",
    "AWS_SECURITY_TOKEN",
    "AWS_PROFILE",
    "AWS_DEFAULT_PROFILE",
    "AWS_REGION",
    "AWS_DEFAULT_REGION",
    "AWS_ENDPOINT_URL",
    "AWS_ENDPOINT_URL_SQS",
    "AWS_WEB_IDENTITY_TOKEN_FILE",
    "AWS_ROLE_ARN",
    "AWS_CONTAINER_CREDENTIALS_RELATIVE_URI",
    "AWS_CONTAINER_CREDENTIALS_FULL_URI",
    "QUEUE_URL",
    "LOG_LEVEL",
    "APP_NAME",
)


@pytest.fixture(autouse=True)
def isolated_aws_environment(monkeypatch, tmp_path):
    """
    Strip ambient AWS configuration from the environment.

    Points the shared config/credentials files at paths that do not exist
    and disables instance metadata lookups, so every test starts from an
    environment with no region and no credentials.
    """
    for name in _AMBIENT_AWS_VARIABLES:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("AWS_CONFIG_FILE", str(tmp_path / "missing-config"))
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(tmp_path / "missing-credentials"))
    monkeypatch.setenv("AWS_EC2_METADATA_DISABLED", "true")


@pytest.fixture
def aws_credentials(monkeypatch):
    """Provide fake AWS credentials and region through the environment."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", TEST_REGION)


@pytest.fixture
def test_settings():
    """
    Provide test configuration settings.

    Disables .env loading for predictable tests.
    """
    return Settings(
        _env_file=None,
        app_name="sqs-json-sender-test",
        log_level="DEBUG",
        aws_region=TEST_REGION,
        queue_url=TEST_QUEUE_URL
    )


@pytest.fixture
def sample_order():
    """Provide a typical order payload."""
    return {
        "order_id": "12345",
        "customer_id": "67890",
        "amount": 99.99,
        "currency": "USD",
        "items": [{"sku": "A-1", "quantity": 2}]
    }


@pytest.fixture
def sqs_queue(aws_credentials):
    """
    Create a mock SQS queue.

    Yields a boto3 SQS client and the URL of a freshly created queue
    inside an active moto mock.
    """
    with mock_aws():
        client = boto3.client("sqs", region_name=TEST_REGION)
        queue_url = client.create_queue(QueueName="test-queue")["QueueUrl"]
        yield client, queue_url


@pytest.fixture
def sync_sender(sqs_queue, test_settings):
    """Provide a SyncSQSSender bound to the mock queue."""
    _, queue_url = sqs_queue
    sender = SyncSQSSender.from_settings(queue_url=queue_url, settings=test_settings)
    yield sender
    sender.close()


@pytest.fixture
def mock_sqs_client():
    """Provide a mocked aioboto3 SQS client with successful responses."""
    client = MagicMock()
    client.send_message = AsyncMock(return_value={"MessageId": "msg-0001"})
    client.send_message_batch = AsyncMock(return_value={"Successful": [], "Failed": []})
    return client


@pytest.fixture
def async_sender(mock_sqs_client):
    """Provide an SQSSender wrapping the mocked client."""
    return SQSSender(mock_sqs_client, TEST_QUEUE_URL)


@pytest.fixture
def queue_bodies(sqs_queue):
    """Provide a helper draining up to ten message bodies from the mock queue."""
    client, queue_url = sqs_queue

    def receive():
        response = client.receive_message(QueueUrl=queue_url, MaxNumberOfMessages=10)
        return [message["Body"] for message in response.get("Messages", [])]

    return receive
