"""Root of the patternplayer exception hierarchy."""

from typing import Optional


class PatternPlayerError(Exception):
    """
    Base exception for every error raised by patternplayer itself.

    The media pipeline never fails, so these errors come from the layers
    around it: configuration files and the command line.

    Attributes:
        user_message: Short message shown on the terminal
        technical_message: Message written to the log file
        recoverable: True when fixing the input and re-running is enough
        recovery_hint: What the user should change, if known
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def get_full_message(self) -> str:
        """User message followed by the recovery hint, when there is one."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n\nSuggestion: {self.recovery_hint}"
