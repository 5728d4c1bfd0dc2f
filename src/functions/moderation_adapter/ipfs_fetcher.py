# Fetches content-addressed objects from an IPFS HTTP gateway
import logging

import requests

from .exceptions import ConfigurationError, ContentFetchError

logger = logging.getLogger(__name__)


def build_content_url(gateway, content_hash):
    """Builds the gateway URL for a content hash."""
    return f"https://{gateway}/ipfs/{content_hash}"


class IpfsFetcher:
    """Downloads the full body of an IPFS object through a public gateway."""

    def __init__(self, gateway_url, session=None):
        self.gateway_url = gateway_url
        self.session = session or requests

    def fetch(self, content_hash):
        """Fetches the raw bytes stored under content_hash.

        Args:
            content_hash (str): The IPFS content identifier.

        Returns:
            bytes: The complete response body.

        Raises:
            ConfigurationError: If no gateway is configured.
            ContentFetchError: On network errors or a non-2xx response.
        """
        if not self.gateway_url:
            raise ConfigurationError("IPFS_GATEWAY_URL environment variable not set")

        url = build_content_url(self.gateway_url, content_hash)
        logger.info(f"Fetching content from IPFS gateway: {url}")
        try:
            response = self.session.get(url)
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            raise ContentFetchError(
                f"IPFS gateway returned HTTP {e.response.status_code} for {content_hash}",
                {"url": url, "status_code": e.response.status_code},
            ) from e
        except requests.exceptions.RequestException as e:
            raise ContentFetchError(f"Failed to fetch {content_hash} from IPFS gateway: {e}", {"url": url}) from e

        logger.info(f"Fetched {len(response.content)} bytes for {content_hash}")
        return response.content
