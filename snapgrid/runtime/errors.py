"""Shared exception policy helpers."""

from __future__ import annotations

import logging
from typing import TypeAlias

# Bounded set of failures tolerated when talking to surface collaborators.
RecoverableCollaboratorErrors: TypeAlias = tuple[type[BaseException], ...]
RECOVERABLE_COLLABORATOR_ERRORS: RecoverableCollaboratorErrors = (
    RuntimeError,
    ValueError,
    TypeError,
    AttributeError,
    KeyError,
)


def log_recoverable(
    logger: logging.Logger,
    message: str,
    *,
    level: int = logging.DEBUG,
) -> None:
    """Emit structured observability for tolerated recoverable exceptions."""
    logger.log(level, message, exc_info=True)
