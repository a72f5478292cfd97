"""_net.py: host/port helpers for reaching a tablet's MySQL server."""
import socket

from loguru import logger


def join_host_port(host: str, port: int) -> str:
    """Joins host and port into "host:port".

    A host containing a colon (a literal IPv6 address) is wrapped in
    brackets: "[::1]:3306".
    """
    if ":" in host:
        return f"[{host}]:{port}"
    return f"{host}:{port}"


def lookup_host(host: str) -> list[str]:
    """Resolves host to its addresses, in the order the resolver gave them.

    This blocks for as long as the resolver does; there is no timeout.

    Raises:
        OSError: (socket.gaierror usually) if the lookup fails.
        UnicodeError: if a non-ASCII host cannot be IDNA encoded.
    """
    logger.debug(f"resolving {host}")
    infos = socket.getaddrinfo(host, None, proto=socket.IPPROTO_TCP)
    addrs: list[str] = []
    for _family, _type, _proto, _canonname, sockaddr in infos:
        addr = str(sockaddr[0])
        if addr not in addrs:
            addrs.append(addr)
    logger.debug(f"{host} resolved to {addrs}")
    return addrs
