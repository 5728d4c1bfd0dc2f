"""Exception hierarchy for the moderation adapter.

Every failure the adapter can report is an AdapterError. The request handler
turns these into errored envelopes; the status code is always 500 because the
calling node only distinguishes success from failure.
"""


class AdapterError(Exception):
    """Base class for all adapter-level exceptions."""
    status_code = 500
    code = "ADAPTER_ERROR"

    def __init__(self, message, details=None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidRequestError(AdapterError):
    """Raised when the job request is missing a required field."""
    code = "INVALID_REQUEST"


class ConfigurationError(AdapterError):
    """Raised when a required environment variable is not set."""
    code = "CONFIG_ERROR"


class ContentFetchError(AdapterError):
    """Raised when the IPFS gateway cannot return the content."""
    code = "CONTENT_FETCH_ERROR"


class ModerationServiceError(AdapterError):
    """Raised when Rekognition fails to classify the image."""
    code = "MODERATION_ERROR"
