# main.py - Serverless entry points for the IPFS image moderation adapter

import functions_framework

# Import the host adapters from the module within the src package
from src.functions.moderation_adapter import host_adapters
from src.functions.moderation_adapter.request_handler import create_request, perform_request


@functions_framework.http
def gcpservice(request):
    """Entry point for Google Cloud Functions (HTTP trigger).

    Args:
         request (flask.Request): HTTP request carrying the job request as JSON.
    """
    return host_adapters.http_adapter(request)


def handler(event, context):
    """Entry point for AWS Lambda when the event is the job request itself."""
    return host_adapters.lambda_adapter(event, context)


def handlerv2(event, context):
    """Entry point for AWS Lambda proxy integrations (job request in event['body'])."""
    return host_adapters.lambda_proxy_adapter(event, context)

# create_request and perform_request are re-exported for local servers and tests
__all__ = ["gcpservice", "handler", "handlerv2", "create_request", "perform_request"]
