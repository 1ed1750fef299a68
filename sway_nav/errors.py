"""
Error handling for sway-nav.

Every failure is terminal for the invocation: errors carry the operation that
was being attempted and map to a process exit code.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(Enum):
    """
    Error codes for sway-nav.

    - 1400-1499: Sway IPC errors
    - 1500-1599: Command errors
    """

    # Sway IPC errors (1400-1499)
    SWAY_SOCKET_UNDEFINED = 1400
    SWAY_CONNECT_FAILED = 1401
    SWAY_IPC_FAILED = 1402
    PAYLOAD_DECODE_FAILED = 1403

    # Command errors (1500-1599)
    COMMAND_REJECTED = 1500


class NavError(Exception):
    """Base exception for sway-nav errors."""

    exit_code = 1

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        operation: str,
        suggestion: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize navigation error.

        Args:
            code: Error code from ErrorCode enum
            message: Human-readable error message
            operation: What was being attempted, e.g. "fetching layout tree"
            suggestion: Suggested recovery action
            context: Additional context for debugging
        """
        self.code = code
        self.message = message
        self.operation = operation
        self.suggestion = suggestion
        self.context = context or {}
        super().__init__(f"Failed {operation}: {message}")

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert error to dictionary for JSON output.

        Returns:
            Error dictionary with code, message, operation, suggestion and context
        """
        result = {
            "code": self.code.value,
            "message": self.message,
            "operation": self.operation,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.context:
            result["context"] = self.context
        return result


class TransportError(NavError):
    """Connecting to sway, talking to it, or decoding its reply failed."""

    exit_code = 2


class CommandRejected(NavError):
    """Sway received the batch but reported a command as unsuccessful."""

    exit_code = 1

    def __init__(self, index: int, command: Optional[str], error: Optional[str], parse_error: Optional[bool] = None):
        """
        Args:
            index: Position of the failing command in the batch
            command: The failing command, if known
            error: Error text reported by sway
            parse_error: Whether sway failed to parse the command
        """
        self.index = index
        self.command = command
        self.error = error
        super().__init__(
            ErrorCode.COMMAND_REJECTED,
            f"Failure reported by sway: {error or 'unknown error'}",
            operation="running navigation command",
            context={
                "index": index,
                "command": command,
                "parse_error": parse_error,
            },
        )
