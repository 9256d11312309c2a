import logging

import pytest

from p2psync.service import DefaultP2PService, P2PService

WARNING_TEXT = "Using DefaultP2PService - no actual network communication will occur"


def _warnings(caplog):
    return [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]


def test_p2p_service_is_abstract():
    with pytest.raises(TypeError):
        P2PService()


def test_local_peer_id_kept():
    service = DefaultP2PService("local-peer")
    assert service.local_peer_id == "local-peer"
    assert "local-peer" in repr(service)


@pytest.mark.asyncio
async def test_get_peers_empty():
    service = DefaultP2PService("local-peer")
    assert await service.get_peers() == []


@pytest.mark.asyncio
async def test_start_stop_cycle_keeps_no_peers():
    service = DefaultP2PService("local-peer")
    await service.start()
    await service.stop()
    assert await service.get_peers() == []


@pytest.mark.asyncio
async def test_send_message_warns(caplog):
    caplog.set_level(logging.DEBUG, logger="p2psync.service")
    service = DefaultP2PService("local-peer")
    result = await service.send_message("remote", b"data")
    assert result is None
    assert WARNING_TEXT in _warnings(caplog)


@pytest.mark.asyncio
async def test_broadcast_message_warns(caplog):
    caplog.set_level(logging.DEBUG, logger="p2psync.service")
    service = DefaultP2PService("local-peer")
    await service.broadcast_message(b"data")
    assert WARNING_TEXT in _warnings(caplog)
    debugs = [r.getMessage() for r in caplog.records if r.levelno == logging.DEBUG]
    assert any("b'data'" in text for text in debugs)


@pytest.mark.asyncio
async def test_send_message_logs_peer(caplog):
    caplog.set_level(logging.INFO, logger="p2psync.service")
    service = DefaultP2PService("local-peer")
    await service.send_message("remote-x", "hello")
    infos = [r.getMessage() for r in caplog.records if r.levelno == logging.INFO]
    assert any("remote-x" in text and "not actually sent" in text for text in infos)


@pytest.mark.asyncio
async def test_default_service_broadcast_reaches_no_peers():
    service = DefaultP2PService("local-peer")
    assert isinstance(service, P2PService)
    assert await service.broadcast_message("m") is None
    assert await service.get_peers() == []