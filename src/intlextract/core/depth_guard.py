"""Unified depth limiting for recursion protection.

Provides reusable depth tracking to prevent stack overflow from:
- Deeply nested host syntax trees during traversal (sized from the
  recursion limit, see traversal_depth)
- Long operator chains during constant evaluation
- Deeply nested plural/select options in message text

Thread-safe: uses explicit state, no thread-local storage.
Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

from intlextract.constants import MAX_DEPTH
from intlextract.diagnostics import ExtractionError
from intlextract.diagnostics.templates import ErrorTemplate

__all__ = ["DepthGuard", "DepthLimitExceededError", "depth_clamp", "traversal_depth"]

logger = logging.getLogger(__name__)


class DepthLimitExceededError(ExtractionError):
    """Raised when maximum nesting depth is exceeded.

    This error indicates either:
    - A generated or minified source with pathological nesting
    - Malformed programmatic tree construction
    """


@dataclass(slots=True)
class DepthGuard:
    """Context manager for tracking and limiting recursion depth.

    Usage:
        guard = DepthGuard()
        with guard:
            self.visit(child)

    Mutability Note:
        Intentionally mutable (not frozen=True) to enable stateful depth
        tracking via context manager protocol. The current_depth field is
        incremented/decremented on __enter__/__exit__.

    Attributes:
        max_depth: Maximum allowed depth (default: MAX_DEPTH)
        current_depth: Current recursion depth
    """

    max_depth: int = MAX_DEPTH
    current_depth: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        """Clamp max_depth against Python recursion limit."""
        self.max_depth = depth_clamp(self.max_depth)

    def __enter__(self) -> DepthGuard:
        """Enter guarded section, increment depth.

        Validates depth limit BEFORE incrementing: __exit__ is not called
        when __enter__ raises, so incrementing first would leave
        current_depth permanently elevated.
        """
        self.check()
        self.current_depth += 1
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Exit guarded section, decrement depth."""
        self.current_depth -= 1

    @property
    def depth(self) -> int:
        """Current depth (alias for current_depth)."""
        return self.current_depth

    def check(self) -> None:
        """Explicitly check depth and raise if exceeded.

        Raises:
            DepthLimitExceededError: If depth limit exceeded
        """
        if self.current_depth >= self.max_depth:
            raise DepthLimitExceededError(ErrorTemplate.depth_exceeded(self.max_depth))

    def reset(self) -> None:
        """Reset depth to zero (useful for reuse across multiple operations)."""
        self.current_depth = 0


def depth_clamp(requested_depth: int, reserve_frames: int = 50) -> int:
    """Clamp requested depth against Python recursion limit.

    Each guarded level costs several Python frames (visit, dispatch,
    generic_visit), so the usable depth is a fraction of the limit.

    Args:
        requested_depth: Desired maximum depth
        reserve_frames: Stack frames to reserve for call overhead (default: 50)

    Returns:
        Safe depth value, clamped if necessary

    Example:
        >>> import sys
        >>> sys.setrecursionlimit(1000)
        >>> depth_clamp(100)
        100
        >>> depth_clamp(500)
        316
    """
    max_safe_depth = (sys.getrecursionlimit() - reserve_frames) // 3
    if requested_depth > max_safe_depth:
        logger.warning(
            "Requested depth %d exceeds Python recursion limit (%d). "
            "Clamping to %d to prevent RecursionError.",
            requested_depth,
            sys.getrecursionlimit(),
            max_safe_depth,
        )
        return max_safe_depth
    return requested_depth


def traversal_depth(frames_per_level: int = 4, reserve_frames: int = 100) -> int:
    """Deepest tree a visitor can walk under the current recursion limit.

    Host trees nest far deeper than message syntax: a long `a + b + ...`
    chain or an `else if` ladder adds one level per operand. A transformer
    spends up to four frames per level (visit, a visit_* override,
    generic_visit, _transform_list).

    Args:
        frames_per_level: Python frames consumed per tree level
        reserve_frames: Stack frames to reserve for callers (default: 100)

    Returns:
        Traversal depth limit, at least 1

    Example:
        >>> import sys
        >>> sys.setrecursionlimit(1000)
        >>> traversal_depth()
        225
    """
    return max(1, (sys.getrecursionlimit() - reserve_frames) // frames_per_level)
