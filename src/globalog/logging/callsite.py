"""
Call-site coordinates for log entries.

The emission functions record where they were called from so the backend
can attribute each entry to the caller rather than to this package.
"""

import sys
from typing import NamedTuple, Optional


class CallSite(NamedTuple):
    """Source location of a log statement."""

    file: str
    function: str
    line: int

    @classmethod
    def capture(cls, depth: int = 1) -> "CallSite":
        """Capture the location of the frame ``depth`` levels above the caller.

        ``depth=1`` is the function that called ``capture``'s caller, which
        is what a logging function wants when it asks for its own call site.
        """
        try:
            frame = sys._getframe(depth + 1)
        except ValueError:
            return UNKNOWN_CALL_SITE
        code = frame.f_code
        return cls(code.co_filename, code.co_name, frame.f_lineno)

    def override(
        self,
        file: Optional[str] = None,
        function: Optional[str] = None,
        line: Optional[int] = None,
    ) -> "CallSite":
        """Return a copy with any explicitly supplied coordinates replaced."""
        return CallSite(
            self.file if file is None else file,
            self.function if function is None else function,
            self.line if line is None else line,
        )


UNKNOWN_CALL_SITE = CallSite("(unknown file)", "(unknown function)", 0)
