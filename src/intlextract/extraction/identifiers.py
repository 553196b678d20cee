"""Content-derived message ids.

An id is the hex SHA-1 of the default message followed by the description
(when non-empty), both UTF-8 encoded. The same content yields the same id
across runs, machines and units.

Python 3.13+. Zero external dependencies.
"""

import hashlib

from intlextract.diagnostics import ErrorTemplate, MissingMessageFieldError
from intlextract.syntax.ast import SourceLocation

from .descriptor import MessageDescriptor

__all__ = ["generate_message_id"]


def generate_message_id(
    descriptor: MessageDescriptor, location: SourceLocation | None = None
) -> str:
    """Derive a stable id from a descriptor's text.

    Args:
        descriptor: Descriptor with a default message
        location: Declaration site, reported if generation is impossible

    Returns:
        40-character lowercase hex digest

    Raises:
        MissingMessageFieldError: If the default message is absent or empty

    Example:
        >>> generate_message_id(MessageDescriptor(default_message="Hello"))
        'f7ff9e8b7bb2e09b70935a5d785e0cc5d9d0abf0'
    """
    if not descriptor.default_message:
        span = location.to_span() if location is not None else None
        raise MissingMessageFieldError(ErrorTemplate.cannot_generate_id(span))

    digest = hashlib.sha1(usedforsecurity=False)
    digest.update(descriptor.default_message.encode("utf-8"))
    if descriptor.description:
        digest.update(descriptor.description.encode("utf-8"))
    return digest.hexdigest()
