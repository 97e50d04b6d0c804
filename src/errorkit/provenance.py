"""Source provenance: where an attribute was attached (pure data + frame capture)."""

from __future__ import annotations

import inspect
import sys
from pathlib import Path
from types import FrameType

from pydantic import BaseModel, ConfigDict, Field


class SourceProvenance(BaseModel):
    """Immutable source location of an attachment call.

    Equal (and hash-equal) when file id, line and column all match.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    file_id: str
    line: int = Field(ge=0)
    column: int | None = Field(default=None, ge=0)

    def __str__(self) -> str:
        """Render as ``file_id:line`` or ``file_id:line:column``."""
        if self.column is None:
            return f"{self.file_id}:{self.line}"
        return f"{self.file_id}:{self.line}:{self.column}"


def _caller_frame(stacklevel: int) -> FrameType:
    """Return the frame ``stacklevel`` levels above the function asking.

    Args:
        stacklevel: 1 is the caller of the function that calls
            ``capture_provenance``.

    Returns:
        Resolved frame, clamped to the outermost frame.
    """
    # 0 is this helper, 1 is capture_provenance, 2 is the function asking.
    frame = sys._getframe(2)  # noqa: SLF001
    for _ in range(max(stacklevel, 0)):
        if frame.f_back is None:
            break
        frame = frame.f_back
    return frame


def _file_id(frame: FrameType) -> str:
    """Build ``<top-level package>/<file name>`` for a frame.

    Scripts run directly (``__main__``) have no package; their bare file name
    is used.
    """
    filename = Path(frame.f_code.co_filename).name
    module = frame.f_globals.get("__name__") or ""
    package = module.split(".", 1)[0]
    if not package or package == "__main__":
        return filename
    return f"{package}/{filename}"


def capture_provenance(
    stacklevel: int = 1, *, with_column: bool = False
) -> SourceProvenance:
    """Capture the source location of a caller.

    Args:
        stacklevel: Which caller to record. 1 records the caller of the
            function invoking this one, as ``warnings.warn`` does.
        with_column: Also record the 1-based column of the call expression.

    Returns:
        Captured provenance.
    """
    frame = _caller_frame(stacklevel)
    try:
        column: int | None = None
        if with_column:
            positions = inspect.getframeinfo(frame, context=0).positions
            if positions is not None and positions.col_offset is not None:
                column = positions.col_offset + 1
        return SourceProvenance(
            file_id=_file_id(frame),
            line=frame.f_lineno or 0,
            column=column,
        )
    finally:
        del frame
