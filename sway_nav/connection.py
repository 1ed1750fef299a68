"""Sway IPC transport.

Thin wrapper around a synchronous `i3ipc.Connection` exposing the two
exchanges navigation needs: fetching the layout tree and running a command
batch. Raw replies are validated into the models of `sway_nav.models`.
"""

import logging
import os
from typing import List, Mapping, Optional

import i3ipc
from pydantic import ValidationError

from .constants import NavDefaults
from .errors import ErrorCode, TransportError
from .models import CommandResult, LayoutNode

logger = logging.getLogger(__name__)


def resolve_socket_path(
    socket_path: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> str:
    """Determine the sway IPC socket path.

    Args:
        socket_path: Explicit path (takes precedence)
        environ: Environment to read SWAYSOCK from (default: os.environ)

    Returns:
        Socket path

    Raises:
        TransportError: If no path is given and SWAYSOCK is unset or empty
    """
    if socket_path:
        return socket_path

    env = os.environ if environ is None else environ
    path = env.get(NavDefaults.SOCKET_ENV_VAR, "")
    if not path:
        raise TransportError(
            ErrorCode.SWAY_SOCKET_UNDEFINED,
            f"Environment variable '{NavDefaults.SOCKET_ENV_VAR}' which specifies "
            "the path to the sway socket is not defined",
            operation="connecting to sway",
            suggestion="Run inside a sway session or pass --socket PATH",
        )
    return path


class SwayConnection:
    """Single-use connection to sway.

    The underlying socket is opened on the first exchange.

    Example:
        >>> conn = SwayConnection()
        >>> tree = conn.fetch_tree()
        >>> results = conn.submit_commands("focus parent; focus left")
    """

    def __init__(self, socket_path: Optional[str] = None, conn: Optional[i3ipc.Connection] = None):
        """Initialize the connection.

        Args:
            socket_path: Sway IPC socket path (default: $SWAYSOCK)
            conn: Already connected i3ipc Connection to use instead
        """
        self.socket_path = socket_path
        self._conn = conn

    @property
    def is_connected(self) -> bool:
        return self._conn is not None

    def connect(self) -> i3ipc.Connection:
        """Connect to sway if not connected yet.

        Raises:
            TransportError: If the socket path is unknown or connecting fails
        """
        if self._conn is not None:
            return self._conn

        path = resolve_socket_path(self.socket_path)
        try:
            self._conn = i3ipc.Connection(socket_path=path)
        except Exception as e:
            raise TransportError(
                ErrorCode.SWAY_CONNECT_FAILED,
                f"Failed opening socket '{path}': {e}",
                operation="connecting to sway",
                context={"socket_path": path},
            ) from e

        logger.debug(f"Connected to sway at {path}")
        return self._conn

    def fetch_tree(self) -> LayoutNode:
        """Fetch the layout tree with GET_TREE.

        Raises:
            TransportError: On connection, IPC or decoding failure
        """
        conn = self.connect()
        operation = "fetching layout tree"
        try:
            tree = conn.get_tree()
        except Exception as e:
            raise TransportError(
                ErrorCode.SWAY_IPC_FAILED,
                f"{type(e).__name__}: {e}",
                operation=operation,
            ) from e

        try:
            root = LayoutNode.model_validate(tree.ipc_data)
        except ValidationError as e:
            raise TransportError(
                ErrorCode.PAYLOAD_DECODE_FAILED,
                f"Unexpected GET_TREE reply: {e.error_count()} validation error(s)\n{e}",
                operation=operation,
            ) from e

        logger.debug(f"Fetched layout tree rooted at {root.label()}")
        return root

    def submit_commands(self, batch: str) -> List[CommandResult]:
        """Run `batch` with RUN_COMMAND.

        Args:
            batch: Commands separated by semicolons

        Returns:
            One CommandResult per command, in submission order

        Raises:
            TransportError: On connection, IPC or decoding failure
        """
        conn = self.connect()
        operation = "running navigation command"
        logger.debug(f"Submitting: {batch}")
        try:
            replies = conn.command(batch)
        except Exception as e:
            raise TransportError(
                ErrorCode.SWAY_IPC_FAILED,
                f"{type(e).__name__}: {e}",
                operation=operation,
                context={"batch": batch},
            ) from e

        try:
            return [CommandResult.model_validate(reply.ipc_data) for reply in replies]
        except ValidationError as e:
            raise TransportError(
                ErrorCode.PAYLOAD_DECODE_FAILED,
                f"Unexpected RUN_COMMAND reply: {e}",
                operation=operation,
                context={"batch": batch},
            ) from e
