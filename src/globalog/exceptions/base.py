"""
Base exception for globalog.

Errors carry an optional hint and suggested action which the CLI prints
below the message, and a code tests and callers can match on.
"""

from typing import Optional


class GlobalogError(Exception):
    """Base exception for all globalog errors.

    Attributes:
        message: The error message
        help_text: Optional guidance on what went wrong
        error_code: Optional code for programmatic handling
        user_action: Optional command or step that resolves the issue
    """

    def __init__(
        self,
        message: str,
        help_text: Optional[str] = None,
        error_code: Optional[str] = None,
        user_action: Optional[str] = None,
    ):
        self.message = message
        self.help_text = help_text
        self.error_code = error_code
        self.user_action = user_action
        super().__init__(message)

    def __str__(self) -> str:
        lines = [self.message]
        if self.help_text:
            lines.append(f"Help: {self.help_text}")
        if self.user_action:
            lines.append(f"Action: {self.user_action}")
        return "\n\n".join(lines)
