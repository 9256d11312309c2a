import logging

import pytest

from p2psync.discovery import (
    DefaultPeerDiscovery,
    PeerDiscovery,
    create_peer_discovery,
)


@pytest.mark.asyncio
async def test_factory_returns_default_discovery():
    discovery = create_peer_discovery()
    assert isinstance(discovery, DefaultPeerDiscovery)
    assert isinstance(discovery, PeerDiscovery)
    assert await discovery.get_discovered_peers() == []


def test_abstract_discovery_cannot_be_instantiated():
    with pytest.raises(TypeError):
        PeerDiscovery()


@pytest.mark.asyncio
async def test_default_discovery_finds_no_peers():
    discovery = DefaultPeerDiscovery()
    await discovery.start()
    assert await discovery.get_discovered_peers() == []
    await discovery.stop()
    assert await discovery.get_discovered_peers() == []


@pytest.mark.asyncio
async def test_start_warns_that_nothing_is_discovered(caplog):
    discovery = create_peer_discovery()
    with caplog.at_level(logging.WARNING, logger="p2psync.discovery"):
        await discovery.start()
    assert "no actual peer discovery will occur" in caplog.text


@pytest.mark.asyncio
async def test_discovered_peers_are_fresh_lists():
    discovery = DefaultPeerDiscovery()
    first = await discovery.get_discovered_peers()
    first.append("peer")
    assert await discovery.get_discovered_peers() == []