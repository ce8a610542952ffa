"""Error kinds shared by the rating core and the store."""

from __future__ import annotations

from enum import Enum


class RejectionReason(str, Enum):
    NOT_AUTHORIZED = "NotAuthorized"
    MISSING_INPUT = "MissingInput"
    AMBIGUOUS_USERNAME = "AmbiguousUsername"


class MutationFailed(RuntimeError):
    """Store write was rejected or the store was unreachable.

    The original error is kept on ``cause`` and its text is used verbatim.
    """

    def __init__(self, cause: BaseException | str) -> None:
        self.cause = cause
        super().__init__(str(cause))
