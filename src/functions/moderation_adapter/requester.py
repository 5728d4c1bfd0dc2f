# Response envelopes understood by the Chainlink node
from dataclasses import dataclass

from .config import DEFAULT_JOB_RUN_ID


@dataclass(frozen=True)
class AdapterResponse:
    """Outcome of one adapter invocation: an HTTP-style status and its payload."""
    status_code: int
    payload: dict

    @property
    def ok(self):
        return self.status_code == 200


def success(job_run_id, data, status_code=200):
    """Builds a success envelope around the response data.

    Args:
        job_run_id (str): The job run ID from the request.
        data (dict): Response data; its 'result' key is echoed at the top level.
        status_code (int): HTTP-style status to report.

    Returns:
        AdapterResponse: The success response.
    """
    if job_run_id is None:
        job_run_id = DEFAULT_JOB_RUN_ID
    payload = {
        "jobRunID": job_run_id,
        "data": data,
        "result": data.get("result"),
        "statusCode": status_code,
    }
    return AdapterResponse(status_code, payload)


def errored(job_run_id, error, status_code=500):
    """Builds an errored envelope. Exceptions are reduced to their message."""
    if job_run_id is None:
        job_run_id = DEFAULT_JOB_RUN_ID
    if isinstance(error, BaseException):
        error = getattr(error, "message", None) or str(error)
    payload = {
        "jobRunID": job_run_id,
        "status": "errored",
        "error": error,
        "statusCode": status_code,
    }
    return AdapterResponse(status_code, payload)
