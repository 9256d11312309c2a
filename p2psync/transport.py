"""Network transports that move raw bytes between peers."""

from __future__ import annotations

import abc
import asyncio
import enum
import logging
from dataclasses import dataclass

log = logging.getLogger(__name__)

Address = tuple[str, int]
IncomingMessage = tuple[Address, bytes]

INCOMING_QUEUE_SIZE = 100
READ_CHUNK_SIZE = 65536


class NetworkError(Exception):
    """A transport operation failed."""


class TransportType(enum.Enum):
    """The kind of network transport to use."""

    TCP = "tcp"
    UDP = "udp"
    WEBSOCKET = "websocket"
    WEBRTC = "webrtc"


def _normalize(addr: Address) -> Address:
    return (str(addr[0]), int(addr[1]))


class Transport(abc.ABC):
    """A way of sending bytes to and receiving bytes from network addresses."""

    @abc.abstractmethod
    async def start(self) -> None:
        """Start the transport."""

    @abc.abstractmethod
    async def stop(self) -> None:
        """Stop the transport."""

    @abc.abstractmethod
    async def send_to(self, addr: Address, data: bytes) -> None:
        """Send data to the given address."""

    @abc.abstractmethod
    def local_addr(self) -> Address:
        """Return the local address of this transport."""

    @abc.abstractmethod
    def incoming(self) -> asyncio.Queue[IncomingMessage] | None:
        """Hand out the queue of incoming (address, data) pairs, once."""


class _DummyTransport(Transport):
    """Logs operations but sends nothing and never receives."""

    def __init__(self, transport_type: TransportType, bind_addr: Address) -> None:
        self.transport_type = transport_type
        self._bind_addr = _normalize(bind_addr)

    def __repr__(self) -> str:
        return f"_DummyTransport({self.transport_type.name}, {self._bind_addr!r})"

    async def start(self) -> None:
        log.info("Dummy %s transport started on %s", self.transport_type.name, self._bind_addr)

    async def stop(self) -> None:
        log.info("Dummy %s transport stopped", self.transport_type.name)

    async def send_to(self, addr: Address, data: bytes) -> None:
        log.info(
            "Dummy %s transport would send %d bytes to %s",
            self.transport_type.name,
            len(data),
            addr,
        )
        log.debug("Would send data: %r", data)

    def local_addr(self) -> Address:
        return self._bind_addr

    def incoming(self) -> None:
        return None


@dataclass
class _Connection:
    reader: asyncio.StreamReader
    writer: asyncio.StreamWriter
    task: asyncio.Task | None


def _peer_address(writer: asyncio.StreamWriter) -> Address:
    peer = writer.get_extra_info("peername")
    return (str(peer[0]), int(peer[1]))


class TcpTransport(Transport):
    """A transport over TCP connections, one per remote address."""

    def __init__(self, bind_addr: Address) -> None:
        self._bind_addr = _normalize(bind_addr)
        self._bound_addr: Address | None = None
        self._connections: dict[Address, _Connection] = {}
        self._server: asyncio.AbstractServer | None = None
        self._shutdown = False
        self._incoming: asyncio.Queue[IncomingMessage] = asyncio.Queue(INCOMING_QUEUE_SIZE)
        self._incoming_taken = False

    def __repr__(self) -> str:
        return f"TcpTransport({self.local_addr()!r})"

    async def start(self) -> None:
        log.info("Starting TCP transport on %s", self._bind_addr)
        self._shutdown = False
        host, port = self._bind_addr
        try:
            self._server = await asyncio.start_server(self._accept, host, port)
        except OSError as exc:
            raise NetworkError(f"cannot listen on {host}:{port}: {exc}") from exc
        sockname = self._server.sockets[0].getsockname()
        self._bound_addr = (str(sockname[0]), int(sockname[1]))
        log.info("TCP listener bound to %s", self._bound_addr)

    async def _accept(self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        addr = _peer_address(writer)
        log.info("Accepted TCP connection from %s", addr)
        self._connections[addr] = _Connection(reader, writer, asyncio.current_task())
        await self._read_loop(addr, reader)

    async def _read_loop(self, addr: Address, reader: asyncio.StreamReader) -> None:
        log.info("Handling TCP connection with %s", addr)
        while not self._shutdown:
            try:
                data = await reader.read(READ_CHUNK_SIZE)
            except OSError as exc:
                log.error("Error reading from %s: %s", addr, exc)
                break
            if not data:
                log.info("Peer %s disconnected", addr)
                break
            log.debug("Received %d bytes from %s", len(data), addr)
            await self._incoming.put((addr, data))
        log.info("Connection handler for %s terminated", addr)

    async def stop(self) -> None:
        log.info("Stopping TCP transport")
        self._shutdown = True
        server, self._server = self._server, None
        if server is not None:
            server.close()

        connections = list(self._connections.items())
        self._connections.clear()
        current = asyncio.current_task()
        tasks = []
        for addr, connection in connections:
            task = connection.task
            if task is not None and task is not current:
                if not task.done():
                    task.cancel()
                tasks.append(task)
            connection.writer.close()
            log.debug("Connection with %s closed", addr)
        await asyncio.gather(*tasks, return_exceptions=True)

        if server is not None:
            await server.wait_closed()
        self._bound_addr = None
        log.info("TCP transport stopped")

    async def send_to(self, addr: Address, data: bytes) -> None:
        addr = _normalize(addr)
        log.debug("Sending %d bytes over TCP to %s", len(data), addr)
        connection = self._connections.get(addr)
        if connection is None:
            log.info("Opening TCP connection to %s", addr)
            try:
                reader, writer = await asyncio.open_connection(*addr)
            except OSError as exc:
                raise NetworkError(f"cannot connect to {addr[0]}:{addr[1]}: {exc}") from exc
            task = asyncio.create_task(self._read_loop(addr, reader))
            connection = _Connection(reader, writer, task)
            self._connections[addr] = connection
        try:
            connection.writer.write(bytes(data))
            await connection.writer.drain()
        except OSError as exc:
            raise NetworkError(f"cannot send to {addr[0]}:{addr[1]}: {exc}") from exc
        log.debug("Sent %d bytes to %s", len(data), addr)

    def local_addr(self) -> Address:
        """Return the listening address once started, else the configured one."""
        return self._bound_addr or self._bind_addr

    def incoming(self) -> asyncio.Queue[IncomingMessage] | None:
        if self._incoming_taken:
            return None
        self._incoming_taken = True
        return self._incoming


def create_transport(transport_type: TransportType, bind_addr: Address) -> Transport:
    """Create a transport of the given type bound to the given address."""
    log.info("Creating %s transport for %s", transport_type.name, bind_addr)
    if transport_type is TransportType.TCP:
        return TcpTransport(bind_addr)
    log.debug("Creating %s transport (dummy implementation)", transport_type.name)
    return _DummyTransport(transport_type, bind_addr)