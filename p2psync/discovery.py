"""Peer discovery mechanisms."""

from __future__ import annotations

import abc
import logging

log = logging.getLogger(__name__)


class PeerDiscovery(abc.ABC):
    """Finds peers in the network."""

    @abc.abstractmethod
    async def start(self) -> None:
        """Start discovering peers."""

    @abc.abstractmethod
    async def stop(self) -> None:
        """Stop discovering peers."""

    @abc.abstractmethod
    async def get_discovered_peers(self) -> list:
        """Return the peers discovered so far."""


class DefaultPeerDiscovery(PeerDiscovery):
    """Discovery that finds nothing; it tracks whether it is running and logs its calls."""

    def __init__(self) -> None:
        self.running = False

    def __repr__(self) -> str:
        return "DefaultPeerDiscovery()"

    async def start(self) -> None:
        log.info("DefaultPeerDiscovery.start() called - this is a no-op implementation")
        log.warning("Using DefaultPeerDiscovery - no actual peer discovery will occur")
        self.running = True

    async def stop(self) -> None:
        log.info("DefaultPeerDiscovery.stop() called - this is a no-op implementation")
        self.running = False

    async def get_discovered_peers(self) -> list:
        log.info("DefaultPeerDiscovery.get_discovered_peers() called - returning empty list")
        return []


def create_peer_discovery() -> PeerDiscovery:
    """Create the configured peer discovery mechanism."""
    return DefaultPeerDiscovery()