"""
Request handler for the IPFS image moderation adapter.

Validates a Chainlink job request, fetches the referenced image from IPFS,
classifies it with Rekognition and answers with the moderation output plus the
normalized result string.
"""

import logging

from . import requester
from .config import AdapterConfig, configure_logging
from .exceptions import AdapterError, InvalidRequestError
from .ipfs_fetcher import IpfsFetcher
from .label_normalizer import convert_labels_to_result
from .rekognition_client import RekognitionModerationClient

configure_logging()
logger = logging.getLogger(__name__)


def validate_request(request_json):
    """
    Validates the incoming job request.

    Args:
        request_json (dict): The job request ({"id": ..., "data": {"hash": ...}})

    Returns:
        tuple: (job_run_id, content_hash)

    Raises:
        InvalidRequestError: For the first missing field, in the order
            data, id, data.hash.
    """
    data = request_json.get("data")
    if data is None or (not data and not isinstance(data, dict)):
        raise InvalidRequestError("No data")

    job_run_id = request_json.get("id")
    if job_run_id is None:
        raise InvalidRequestError("Job run ID required")

    content_hash = data.get("hash") if isinstance(data, dict) else None
    if content_hash is None:
        raise InvalidRequestError("Content hash required")

    return job_run_id, content_hash


def perform_request(request_json, fetcher, moderation_client):
    """
    Runs the fetch, classify and normalize pipeline for one job request.

    Args:
        request_json (dict): The job request.
        fetcher: Object with fetch(content_hash) -> bytes.
        moderation_client: Object with detect_moderation_labels(bytes) -> dict.

    Returns:
        AdapterResponse: 200 with the success envelope, or 500 with an errored one.
    """
    if not isinstance(request_json, dict):
        request_json = {}
    job_run_id = request_json.get("id")

    try:
        job_run_id, content_hash = validate_request(request_json)
    except InvalidRequestError as e:
        logger.warning(f"Rejected job request {job_run_id}: {e.message}")
        return requester.errored(job_run_id, e)

    try:
        image_bytes = fetcher.fetch(content_hash)
        moderation_output = moderation_client.detect_moderation_labels(image_bytes)

        response_data = dict(moderation_output)
        response_data["result"] = convert_labels_to_result(moderation_output.get("ModerationLabels"))
        logger.info(f"Job {job_run_id} moderation result for {content_hash}: {response_data['result']}")
        return requester.success(job_run_id, response_data)

    except AdapterError as e:
        logger.error(f"Job {job_run_id} failed ({e.code}): {e.message}", exc_info=True)
        return requester.errored(job_run_id, e)
    except Exception as e:
        logger.error(f"Unexpected error processing job {job_run_id}: {e}", exc_info=True)
        return requester.errored(job_run_id, e)


def create_request(request_json, config=None):
    """
    Entry point shared by all host adapters.

    Loads the configuration for this invocation (unless one is given) and wires
    the IPFS fetcher and Rekognition client from it.

    Args:
        request_json (dict): The job request.
        config (AdapterConfig, optional): Configuration override.

    Returns:
        AdapterResponse: The response for the host adapter to translate.
    """
    if config is None:
        config = AdapterConfig.from_env()

    return perform_request(
        request_json,
        fetcher=IpfsFetcher(config.ipfs_gateway_url),
        moderation_client=RekognitionModerationClient(config),
    )
