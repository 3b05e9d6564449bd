"""Endpoint specifications (TCP, UDP, Unix sockets) and opening them as sockets."""

from __future__ import annotations

import contextlib
import re
import socket
from collections.abc import Iterator
from dataclasses import dataclass

INVALID_SPEC_MESSAGE = (
    "Invalid input - Expected TCPS<port> or UDPS<port> or UDSS<type(D/S)><socket_path> "
    "or TCPC<server_ip>,<server_port> or UDPC<server_ip>,<server_port> "
    "or UDSC<type(D/S)><socket_path>"
)

_ATOI = re.compile(r"\s*[+-]?\d+")


class EndpointError(Exception):
    """Raised when an endpoint cannot be parsed or opened."""


@dataclass(frozen=True)
class EndpointSpec:
    """A parsed endpoint: its kind and the address parts it uses."""

    kind: str
    host: str | None = None
    port: int | str | None = None
    path: str | None = None
    datagram: bool = False


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group()) if match else 0


def parse_hostname_port(value: str) -> tuple[str, str]:
    """Split "<host>,<port>"; empty fields between commas are skipped."""
    fields = [field for field in value.split(",") if field]
    if not fields:
        raise EndpointError("Invalid server IP/hostname")
    if len(fields) < 2:
        raise EndpointError("Invalid server port")
    return fields[0], fields[1]


def parse_spec(value: str) -> EndpointSpec:
    """Parse an endpoint such as TCPS4050, TCPClocalhost,4050 or UDSSD/tmp/sock."""
    kind, rest = value[:4], value[4:]
    if kind in ("TCPS", "UDPS"):
        return EndpointSpec(kind, port=_atoi(rest))
    if kind in ("TCPC", "UDPC"):
        host, port = parse_hostname_port(rest)
        return EndpointSpec(kind, host=host, port=port)
    if kind in ("UDSS", "UDSC"):
        socket_type = rest[:1]
        if socket_type not in ("D", "S"):
            raise EndpointError(f"{kind} needs a socket type of D or S")
        return EndpointSpec(kind, path=rest[1:], datagram=socket_type == "D")
    raise EndpointError(INVALID_SPEC_MESSAGE)


def _new_socket(family: int, kind: int, proto: int = 0) -> socket.socket:
    try:
        return socket.socket(family, kind, proto)
    except OSError as error:
        raise EndpointError(f"error creating socket: {error}") from error


@contextlib.contextmanager
def _guard(sock: socket.socket, message: str) -> Iterator[None]:
    try:
        yield
    except OSError as error:
        sock.close()
        raise EndpointError(f"{message}: {error}") from error


def tcp_server(port: int) -> socket.socket:
    """Listen on all interfaces at ``port`` and return the first accepted connection."""
    listener = _new_socket(socket.AF_INET, socket.SOCK_STREAM)
    with _guard(listener, "setsockopt"):
        listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    with _guard(listener, "error binding socket"):
        listener.bind(("", port))
    with _guard(listener, "error listening on socket"):
        listener.listen(1)
    with _guard(listener, "error accepting connection"):
        connection, _ = listener.accept()
    listener.close()
    return connection


def _resolve(host: str, port: int | str, kind: int) -> list[tuple]:
    try:
        return socket.getaddrinfo(host, port, type=kind)
    except socket.gaierror as error:
        raise EndpointError(f"getaddrinfo: {error.strerror or error}") from error


def tcp_client(host: str, port: int | str) -> socket.socket:
    """Connect to the first address of ``host`` that accepts a TCP connection."""
    for family, kind, proto, _, address in _resolve(host, port, socket.SOCK_STREAM):
        try:
            sock = socket.socket(family, kind, proto)
        except OSError:
            continue
        try:
            sock.connect(address)
        except OSError:
            sock.close()
            continue
        return sock
    raise EndpointError("failed to connect")


def udp_server(port: int) -> socket.socket:
    """Bind a UDP socket, wait for one datagram and connect back to its sender."""
    sock = _new_socket(socket.AF_INET, socket.SOCK_DGRAM)
    with _guard(sock, "setsockopt"):
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    with _guard(sock, "error binding socket"):
        sock.bind(("", port))
    with _guard(sock, "error receiving data"):
        _, client_address = sock.recvfrom(1024)
    with _guard(sock, "error connecting to client"):
        sock.connect(client_address)
    return sock


def udp_client(host: str, port: int | str) -> socket.socket:
    """Open a UDP socket to ``host``, announce itself and fix the peer address."""
    for family, kind, proto, _, address in _resolve(host, port, socket.SOCK_DGRAM):
        try:
            sock = socket.socket(family, kind, proto)
        except OSError:
            continue
        with contextlib.suppress(OSError):
            sock.sendto(b"Conn msg\n", address)
        with contextlib.suppress(OSError):
            sock.connect(address)
        return sock
    raise EndpointError("failed to connect")


def uds_server_stream(path: str) -> socket.socket:
    """Listen on a Unix stream socket at ``path`` and return the accepted connection."""
    listener = _new_socket(socket.AF_UNIX, socket.SOCK_STREAM)
    with _guard(listener, "error binding socket"):
        listener.bind(path)
    with _guard(listener, "error listening on socket"):
        listener.listen(1)
    with _guard(listener, "error accepting connection"):
        connection, _ = listener.accept()
    listener.close()
    return connection


def uds_server_datagram(path: str) -> socket.socket:
    """Bind a Unix datagram socket at ``path`` and wait for the first datagram."""
    sock = _new_socket(socket.AF_UNIX, socket.SOCK_DGRAM)
    with _guard(sock, f"error binding socket {path}"):
        sock.bind(path)
    with _guard(sock, "error receiving data"):
        sock.recvfrom(1024)
    return sock


def uds_client_stream(path: str) -> socket.socket:
    """Connect a Unix stream socket to ``path``."""
    sock = _new_socket(socket.AF_UNIX, socket.SOCK_STREAM)
    with _guard(sock, "error connecting to server"):
        sock.connect(path)
    return sock


def uds_client_datagram(path: str) -> socket.socket:
    """Connect a Unix datagram socket to ``path``."""
    sock = _new_socket(socket.AF_UNIX, socket.SOCK_DGRAM)
    with _guard(sock, "error connecting socket"):
        sock.connect(path)
    return sock


def open_endpoint(spec: EndpointSpec) -> socket.socket:
    """Open the socket that ``spec`` describes."""
    if spec.kind == "TCPS":
        return tcp_server(int(spec.port or 0))
    if spec.kind == "TCPC":
        return tcp_client(str(spec.host), str(spec.port))
    if spec.kind == "UDPS":
        return udp_server(int(spec.port or 0))
    if spec.kind == "UDPC":
        return udp_client(str(spec.host), str(spec.port))
    if spec.kind == "UDSS":
        opener = uds_server_datagram if spec.datagram else uds_server_stream
        return opener(str(spec.path))
    if spec.kind == "UDSC":
        opener = uds_client_datagram if spec.datagram else uds_client_stream
        return opener(str(spec.path))
    raise EndpointError(INVALID_SPEC_MESSAGE)