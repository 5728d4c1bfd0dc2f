import os
import logging
from dataclasses import dataclass

from dotenv import load_dotenv

# Load environment variables from .env file for local development
load_dotenv()

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Default job run ID used in envelopes when the request did not carry one
DEFAULT_JOB_RUN_ID = "1"


def configure_logging():
    """Configures root logging once; the cloud runtimes may already have handlers."""
    if not logging.getLogger().hasHandlers():
        logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)


@dataclass(frozen=True)
class AdapterConfig:
    """Credentials and endpoints for a single invocation."""
    aws_access_key_id: str = None
    aws_secret_access_key: str = None
    aws_region: str = None
    ipfs_gateway_url: str = None

    @classmethod
    def from_env(cls, environ=None):
        """Reads the adapter configuration from the process environment.

        Args:
            environ (dict, optional): Mapping to read from. Defaults to os.environ.

        Returns:
            AdapterConfig: A fresh configuration snapshot.
        """
        environ = os.environ if environ is None else environ
        return cls(
            aws_access_key_id=environ.get("AWS_ACCESS_KEY_ID"),
            aws_secret_access_key=environ.get("AWS_SECRET_ACCESS_KEY"),
            aws_region=environ.get("AWS_REGION"),
            ipfs_gateway_url=environ.get("IPFS_GATEWAY_URL"),
        )
