"""
Error Handling - Per-file failure policies for the search pipeline.

A file that cannot be read or decoded is skipped with a logged
diagnostic. Its siblings keep scanning and the stream carries on with
fewer results. Only an error outside the table (a bug, not an I/O
problem) aborts the search.
"""

import logging
from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional
from pathlib import Path


logger = logging.getLogger(__name__)


class ErrorAction(Enum):
    """What to do when an error occurs."""
    SKIP = auto()           # Contribute zero occurrences, continue
    ABORT = auto()          # Stop the search and re-raise to the consumer


@dataclass
class ErrorPolicy:
    """Policy for handling a specific error type."""
    action: ErrorAction
    log_level: int
    message_template: str = "{file}: {error}"


# Checked in order: subclasses before OSError
ERROR_POLICIES: dict[type, ErrorPolicy] = {
    PermissionError: ErrorPolicy(
        action=ErrorAction.SKIP,
        log_level=logging.WARNING,
        message_template="Permission denied: {file}"
    ),
    FileNotFoundError: ErrorPolicy(
        action=ErrorAction.SKIP,
        log_level=logging.DEBUG,
        message_template="File not found (possibly deleted): {file}"
    ),
    IsADirectoryError: ErrorPolicy(
        action=ErrorAction.SKIP,
        log_level=logging.DEBUG,
        message_template="Expected file, got directory: {file}"
    ),
    UnicodeDecodeError: ErrorPolicy(
        action=ErrorAction.SKIP,
        log_level=logging.DEBUG,
        message_template="Cannot decode file (binary?): {file}"
    ),
    OSError: ErrorPolicy(
        action=ErrorAction.SKIP,
        log_level=logging.WARNING,
        message_template="OS error reading file: {file} - {error}"
    ),
}

UNEXPECTED_ERROR_POLICY = ErrorPolicy(
    action=ErrorAction.ABORT,
    log_level=logging.ERROR,
    message_template="Unexpected error: {file} - {error}"
)


def policy_for(error: Exception) -> ErrorPolicy:
    """Look up the policy for an error type (or its base classes)."""
    for error_type, policy in ERROR_POLICIES.items():
        if isinstance(error, error_type):
            return policy
    return UNEXPECTED_ERROR_POLICY


def handle_error(
    error: Exception,
    file_path: Optional[Path] = None,
    context: str = ""
) -> ErrorAction:
    """
    Handle an error according to the defined policies.

    Args:
        error: The exception that occurred
        file_path: Path to the file being processed (if applicable)
        context: Additional context for logging

    Returns:
        The action to take (SKIP or ABORT)
    """
    policy = policy_for(error)

    file_str = str(file_path) if file_path else "<unknown>"
    message = policy.message_template.format(file=file_str, error=str(error))
    if context:
        message = f"[{context}] {message}"

    logger.log(policy.log_level, message)

    return policy.action
