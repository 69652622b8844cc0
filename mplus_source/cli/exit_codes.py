"""Deterministic process exit-code mapping for the CLI."""

from mplus_source.errors import ApiError, DecodeError, FetchError, NotFoundError, SourceError

SUCCESS = 0
USER_ERROR = 2
NOT_FOUND = 3
EXTERNAL_FAILURE = 4
DECODE_FAILURE = 5


def exit_code_for(error: SourceError) -> int:
    """Return the exit code reported for a source failure of this kind."""
    if isinstance(error, NotFoundError):
        return NOT_FOUND
    if isinstance(error, (ApiError, FetchError)):
        return EXTERNAL_FAILURE
    if isinstance(error, DecodeError):
        return DECODE_FAILURE
    return EXTERNAL_FAILURE
