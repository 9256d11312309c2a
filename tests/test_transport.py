import asyncio
import socket

import pytest

from p2psync.transport import (
    NetworkError,
    TcpTransport,
    TransportType,
    create_transport,
)

LOCAL = ("127.0.0.1", 0)


def _unused_port():
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


def test_factory_creates_tcp_transport():
    transport = create_transport(TransportType.TCP, LOCAL)
    assert isinstance(transport, TcpTransport)
    assert transport.local_addr() == LOCAL


@pytest.mark.parametrize(
    "kind", [TransportType.UDP, TransportType.WEBSOCKET, TransportType.WEBRTC]
)
def test_factory_creates_dummy_for_other_types(kind):
    addr = ("127.0.0.1", 4000)
    transport = create_transport(kind, addr)
    assert not isinstance(transport, TcpTransport)
    assert transport.incoming() is None
    assert transport.local_addr() == addr


def test_incoming_is_handed_out_once():
    transport = TcpTransport(LOCAL)
    queue = transport.incoming()
    assert isinstance(queue, asyncio.Queue)
    assert transport.incoming() is None


@pytest.mark.asyncio
async def test_local_addr_reports_bound_port():
    transport = TcpTransport(LOCAL)
    await transport.start()
    try:
        host, port = transport.local_addr()
        assert host == "127.0.0.1"
        assert port > 0
    finally:
        await transport.stop()
    assert transport.local_addr() == LOCAL


@pytest.mark.asyncio
async def test_round_trip_between_two_transports():
    server = TcpTransport(LOCAL)
    client = TcpTransport(LOCAL)
    await server.start()
    await client.start()
    try:
        server_queue = server.incoming()
        client_queue = client.incoming()

        await client.send_to(server.local_addr(), b"hello")
        addr, data = await asyncio.wait_for(server_queue.get(), 5)
        assert data == b"hello"
        assert addr[0] == "127.0.0.1"

        await server.send_to(addr, b"pong")
        reply_addr, reply = await asyncio.wait_for(client_queue.get(), 5)
        assert reply == b"pong"
        assert reply_addr == server.local_addr()
    finally:
        await client.stop()
        await server.stop()


@pytest.mark.asyncio
async def test_send_to_unreachable_address_raises():
    transport = TcpTransport(LOCAL)
    with pytest.raises(NetworkError):
        await transport.send_to(("127.0.0.1", _unused_port()), b"data")


@pytest.mark.asyncio
async def test_start_on_busy_port_raises():
    with socket.socket() as blocker:
        blocker.bind(("127.0.0.1", 0))
        blocker.listen()
        transport = TcpTransport(blocker.getsockname())
        with pytest.raises(NetworkError):
            await transport.start()


@pytest.mark.asyncio
async def test_stopped_transport_refuses_connections():
    server = TcpTransport(LOCAL)
    await server.start()
    addr = server.local_addr()
    await server.stop()

    client = TcpTransport(LOCAL)
    with pytest.raises(NetworkError):
        await client.send_to(addr, b"late")