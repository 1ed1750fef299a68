"""
Sway IPC transport tests.

i3ipc is replaced by MagicMock stand-ins; no sway instance is needed.
"""

from unittest.mock import MagicMock, patch

import pytest

from fixtures.mock_ipc import command_replies, tree_reply
from fixtures.sample_trees import sample_workspace_tree
from sway_nav.connection import SwayConnection, resolve_socket_path
from sway_nav.errors import ErrorCode, TransportError
from sway_nav.models import CommandResult, LayoutNode


class TestResolveSocketPath:
    def test_explicit_path_wins(self):
        assert resolve_socket_path("/tmp/explicit.sock", {"SWAYSOCK": "/tmp/env.sock"}) == "/tmp/explicit.sock"

    def test_path_from_environment(self):
        assert resolve_socket_path(None, {"SWAYSOCK": "/run/user/1000/sway-ipc.sock"}) == "/run/user/1000/sway-ipc.sock"

    @pytest.mark.parametrize("environ", [{}, {"SWAYSOCK": ""}])
    def test_missing_or_empty_variable(self, environ):
        with pytest.raises(TransportError) as exc_info:
            resolve_socket_path(None, environ)

        assert exc_info.value.code is ErrorCode.SWAY_SOCKET_UNDEFINED
        assert "SWAYSOCK" in exc_info.value.message
        assert exc_info.value.exit_code == 2

    def test_reads_os_environ_by_default(self, monkeypatch):
        monkeypatch.setenv("SWAYSOCK", "/tmp/from-os.sock")
        assert resolve_socket_path() == "/tmp/from-os.sock"


class TestConnect:
    def test_connects_once(self):
        with patch("sway_nav.connection.i3ipc.Connection") as connection_cls:
            conn = SwayConnection(socket_path="/tmp/sway.sock")
            assert not conn.is_connected

            first = conn.connect()
            second = conn.connect()

        connection_cls.assert_called_once_with(socket_path="/tmp/sway.sock")
        assert first is second
        assert conn.is_connected

    def test_connect_failure_names_socket(self):
        with patch("sway_nav.connection.i3ipc.Connection", side_effect=FileNotFoundError("No such file")):
            conn = SwayConnection(socket_path="/tmp/missing.sock")
            with pytest.raises(TransportError) as exc_info:
                conn.connect()

        error = exc_info.value
        assert error.code is ErrorCode.SWAY_CONNECT_FAILED
        assert "/tmp/missing.sock" in error.message
        assert error.operation == "connecting to sway"
        assert isinstance(error.__cause__, FileNotFoundError)

    def test_missing_socket_fails_before_connecting(self, monkeypatch):
        monkeypatch.delenv("SWAYSOCK", raising=False)
        with patch("sway_nav.connection.i3ipc.Connection") as connection_cls:
            with pytest.raises(TransportError):
                SwayConnection().connect()
        connection_cls.assert_not_called()


class TestFetchTree:
    def test_decodes_tree(self):
        mock = MagicMock()
        mock.get_tree.return_value = tree_reply(sample_workspace_tree())

        root = SwayConnection(conn=mock).fetch_tree()

        assert isinstance(root, LayoutNode)
        assert root.nodes[0].name == "eDP-1"
        mock.get_tree.assert_called_once_with()

    def test_ipc_failure(self, mock_i3_connection):
        mock_i3_connection.get_tree.side_effect = ConnectionResetError("connection reset by peer")

        with pytest.raises(TransportError) as exc_info:
            SwayConnection(conn=mock_i3_connection).fetch_tree()

        assert exc_info.value.code is ErrorCode.SWAY_IPC_FAILED
        assert exc_info.value.operation == "fetching layout tree"
        assert "connection reset" in str(exc_info.value)

    def test_malformed_payload(self, mock_i3_connection):
        mock_i3_connection.get_tree.return_value = tree_reply({"id": 1, "layout": "spiral"})

        with pytest.raises(TransportError) as exc_info:
            SwayConnection(conn=mock_i3_connection).fetch_tree()

        assert exc_info.value.code is ErrorCode.PAYLOAD_DECODE_FAILED


class TestSubmitCommands:
    def test_one_result_per_command(self, mock_i3_connection):
        mock_i3_connection.command.return_value = command_replies(
            {"success": True},
            {"success": False, "parse_error": False, "error": "No parent"},
        )

        results = SwayConnection(conn=mock_i3_connection).submit_commands("focus parent; focus left")

        mock_i3_connection.command.assert_called_once_with("focus parent; focus left")
        assert results == [
            CommandResult(success=True),
            CommandResult(success=False, parse_error=False, error="No parent"),
        ]

    def test_ipc_failure(self, mock_i3_connection):
        mock_i3_connection.command.side_effect = BrokenPipeError("broken pipe")

        with pytest.raises(TransportError) as exc_info:
            SwayConnection(conn=mock_i3_connection).submit_commands("focus left")

        assert exc_info.value.code is ErrorCode.SWAY_IPC_FAILED
        assert exc_info.value.context["batch"] == "focus left"

    def test_malformed_reply(self, mock_i3_connection):
        mock_i3_connection.command.return_value = command_replies({"error": "no success flag"})

        with pytest.raises(TransportError) as exc_info:
            SwayConnection(conn=mock_i3_connection).submit_commands("focus left")

        assert exc_info.value.code is ErrorCode.PAYLOAD_DECODE_FAILED
