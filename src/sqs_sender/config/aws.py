"""
Module: aws.py
Description: Ambient AWS configuration loading.

Resolves region, profile and credentials through boto3's default chain
(environment, shared config/credentials files, container and instance
metadata) and fails early when any of them is missing, so a sender is
never built around a client that cannot authenticate.
"""

from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError, ProfileNotFound

from sqs_sender.config.settings import Settings, settings as default_settings
from sqs_sender.exceptions import ConfigurationError
from sqs_sender.utils.logger import get_logger

logger = get_logger(__name__)


def load_session(settings: Optional[Settings] = None) -> boto3.Session:
    """
    Build a boto3 session from ambient AWS configuration.

    Args:
        settings: Sender settings; the module-level settings when omitted

    Returns:
        boto3 Session with a resolved region and credentials

    Raises:
        ConfigurationError: If the profile, region or credentials cannot be resolved
    """
    settings = settings or default_settings

    try:
        session = boto3.Session(
            region_name=settings.aws_region,
            profile_name=settings.aws_profile
        )
    except ProfileNotFound as e:
        raise ConfigurationError(f"AWS profile not found: {settings.aws_profile}") from e

    if not session.region_name:
        raise ConfigurationError(
            "No AWS region configured; set AWS_REGION or a region in the AWS profile"
        )

    try:
        credentials = session.get_credentials()
    except BotoCoreError as e:
        raise ConfigurationError(f"Failed to load AWS credentials: {e}") from e

    if credentials is None:
        raise ConfigurationError("Unable to locate AWS credentials")

    logger.debug(
        "AWS configuration loaded",
        region=session.region_name,
        profile=session.profile_name,
        credential_method=credentials.method
    )

    return session
