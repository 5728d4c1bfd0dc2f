# Translations between serverless invocation conventions and the request handler
import json
import logging

from . import requester
from .request_handler import create_request

logger = logging.getLogger(__name__)

JSON_HEADERS = {
    'Content-Type': 'application/json'
}


def http_adapter(request, handle=create_request):
    """
    Generic HTTP adapter (Google Cloud Functions, or any Flask request).

    Args:
        request (flask.Request): HTTP request whose JSON body is the job request.
        handle (callable): request dict -> AdapterResponse.

    Returns:
        tuple: (response body, status code, headers) for make_response.
    """
    request_json = request.get_json(silent=True)
    response = handle(request_json)
    return (json.dumps(response.payload), response.status_code, JSON_HEADERS)


def lambda_adapter(event, context, handle=create_request):
    """Legacy AWS Lambda adapter: the event is the job request, only the payload is returned."""
    response = handle(event)
    return response.payload


def lambda_proxy_adapter(event, context, handle=create_request):
    """
    AWS Lambda proxy adapter: the job request is JSON in event['body'].

    Returns:
        dict: A Lambda proxy integration response.
    """
    body = (event or {}).get('body')
    try:
        request_json = json.loads(body) if body else {}
    except (TypeError, ValueError) as e:
        logger.warning(f"Could not parse Lambda event body as JSON: {e}")
        response = requester.errored(None, "Invalid JSON in request body")
    else:
        response = handle(request_json)

    return {
        'statusCode': response.status_code,
        'body': json.dumps(response.payload),
        'isBase64Encoded': False
    }
