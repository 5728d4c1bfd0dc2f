# Thin wrapper around AWS Rekognition image moderation
import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .exceptions import ModerationServiceError

logger = logging.getLogger(__name__)


class RekognitionModerationClient:
    """Submits image bytes to Rekognition DetectModerationLabels."""

    def __init__(self, config, client=None):
        """
        Args:
            config (AdapterConfig): Credentials and region for this invocation.
                Unset credentials fall back to boto3's default credential chain.
            client (optional): A preconfigured Rekognition client.
        """
        self.config = config
        self._client = client

    @property
    def client(self):
        if self._client is None:
            self._client = boto3.client(
                "rekognition",
                aws_access_key_id=self.config.aws_access_key_id,
                aws_secret_access_key=self.config.aws_secret_access_key,
                region_name=self.config.aws_region,
            )
        return self._client

    def detect_moderation_labels(self, image_bytes):
        """Classifies an image and returns the raw moderation output.

        Args:
            image_bytes (bytes): The image content.

        Returns:
            dict: The Rekognition response without boto3's ResponseMetadata,
                i.e. ModerationLabels and ModerationModelVersion.
        """
        logger.info(f"Requesting moderation labels for {len(image_bytes)} byte image")
        try:
            response = self.client.detect_moderation_labels(Image={"Bytes": image_bytes})
        except ClientError as e:
            error = e.response.get("Error", {})
            raise ModerationServiceError(
                f"Rekognition request failed: {error.get('Message', str(e))}",
                {"aws_error_code": error.get("Code")},
            ) from e
        except BotoCoreError as e:
            raise ModerationServiceError(f"Rekognition request failed: {e}") from e

        result = {key: value for key, value in response.items() if key != "ResponseMetadata"}
        result.setdefault("ModerationLabels", [])
        logger.info(f"Rekognition returned {len(result['ModerationLabels'])} moderation labels")
        return result
