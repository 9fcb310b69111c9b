"""Error handling utilities for HTTP responses."""

import httpx

from github_artifact_client.errors.exceptions import (
    ClientError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    RetrievalError,
    ServerError,
    UnauthorizedError,
)
from github_artifact_client.errors.models import GitHubErrorDetail, request_url


def _is_rate_limited(response: httpx.Response) -> bool:
    # GitHub reports an exhausted primary rate limit as 403
    return response.status_code == 429 or (
        response.status_code == 403 and response.headers.get("x-ratelimit-remaining") == "0"
    )


def _parse_retry_after(response: httpx.Response) -> int | None:
    if "retry-after" not in response.headers:
        return None
    try:
        return int(response.headers["retry-after"])
    except (ValueError, TypeError):
        return None


def raise_for_status(response: httpx.Response) -> None:
    """Raise appropriate exception for HTTP error responses.

    Parses the GitHub error body if present, otherwise uses the response
    text. The response body must already be read.

    Args:
        response: HTTP response object

    Raises:
        RetrievalError subclass based on status code
    """
    if response.is_success:
        return

    detail = GitHubErrorDetail.from_response(response)
    status_code = response.status_code
    url = request_url(response)

    exception_map = {
        401: UnauthorizedError,
        403: ForbiddenError,
        404: NotFoundError,
        429: RateLimitError,
    }

    # Determine exception class
    if _is_rate_limited(response):
        exc_class = RateLimitError
    elif status_code in exception_map:
        exc_class = exception_map[status_code]
    elif 400 <= status_code < 500:
        exc_class = ClientError
    elif 500 <= status_code < 600:
        exc_class = ServerError
    else:
        exc_class = RetrievalError

    # Build error message
    if detail:
        message = f"HTTP {status_code}: {detail.to_exception_message()}"
    else:
        response_text = response.text[:200]
        message = f"HTTP {status_code}: {response_text}" if response_text else f"HTTP {status_code}"

    if exc_class is RateLimitError:
        raise exc_class(
            message=message,
            retry_after=_parse_retry_after(response),
            url=url,
            status_code=status_code,
            response=response,
            detail=detail,
        )

    raise exc_class(
        message=message,
        url=url,
        status_code=status_code,
        response=response,
        detail=detail,
    )


def raise_for_empty_body(response: httpx.Response) -> None:
    """Raise RetrievalError if a read response has no body.

    Args:
        response: HTTP response object (its body must already be read)
    """
    if not response.content:
        raise RetrievalError(
            f"HTTP {response.status_code}: empty response body",
            url=request_url(response),
            status_code=response.status_code,
            response=response,
        )
