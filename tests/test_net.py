"""test_net.py: tests for the _net helpers."""
import socket
from unittest.mock import MagicMock, patch

import pytest

from topoalias._net import join_host_port, lookup_host


@pytest.mark.parametrize("host,port,expected", [
    ("localhost", 3306, "localhost:3306"),
    ("10.0.0.1", 17100, "10.0.0.1:17100"),
    ("", 3306, ":3306"),
    ("::1", 3306, "[::1]:3306"),
    ("2001:db8::68", 0, "[2001:db8::68]:0"),
])
def test_join_host_port(host: str, port: int, expected: str) -> None:
    """Only hosts containing a colon are bracketed.

    Args:
        host: Host to join.
        port: Port to join.
        expected: The joined address.
    """
    assert join_host_port(host, port) == expected


@patch("socket.getaddrinfo")
def test_lookup_host_keeps_resolver_order(mock_getaddrinfo: MagicMock) -> None:
    """Addresses come back in resolver order, without duplicates.

    Args:
        mock_getaddrinfo: A MagicMock for socket.getaddrinfo.
    """
    mock_getaddrinfo.return_value = [
        (socket.AF_INET6, socket.SOCK_STREAM, 6, "", ("::1", 0, 0, 0)),
        (socket.AF_INET, socket.SOCK_STREAM, 6, "", ("127.0.0.1", 0)),
        (socket.AF_INET, socket.SOCK_STREAM, 6, "", ("127.0.0.1", 0)),
    ]

    assert lookup_host("localhost") == ["::1", "127.0.0.1"]
    mock_getaddrinfo.assert_called_once_with(
        "localhost", None, proto=socket.IPPROTO_TCP)


@patch("socket.getaddrinfo")
def test_lookup_host_propagates_errors(mock_getaddrinfo: MagicMock) -> None:
    """Resolver errors are not caught here.

    Args:
        mock_getaddrinfo: A MagicMock for socket.getaddrinfo.
    """
    mock_getaddrinfo.side_effect = socket.gaierror(
        socket.EAI_NONAME, "Name or service not known")

    with pytest.raises(socket.gaierror):
        lookup_host("no-such-host.invalid")
