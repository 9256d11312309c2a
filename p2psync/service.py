"""The P2P service interface and a placeholder implementation."""

from __future__ import annotations

import abc
import logging
from collections.abc import Hashable
from typing import Any

from p2psync.handler import _message_type

log = logging.getLogger(__name__)


class P2PService(abc.ABC):
    """Core operations of a peer-to-peer network service."""

    @abc.abstractmethod
    async def start(self) -> None:
        """Start the service and begin accepting connections."""

    @abc.abstractmethod
    async def stop(self) -> None:
        """Stop the service gracefully."""

    @abc.abstractmethod
    async def send_message(self, peer_id: Hashable, message: Any) -> None:
        """Send a message to one peer."""

    @abc.abstractmethod
    async def broadcast_message(self, message: Any) -> None:
        """Send a message to every connected peer."""

    @abc.abstractmethod
    async def get_peers(self) -> list:
        """Return the currently connected peers."""


class DefaultP2PService(P2PService):
    """A service that tracks its running state, logs its calls and never touches the network."""

    def __init__(self, local_peer_id: Hashable) -> None:
        self.local_peer_id = local_peer_id
        self.running = False

    def __repr__(self) -> str:
        return f"DefaultP2PService({self.local_peer_id!r})"

    async def start(self) -> None:
        log.info("Starting default P2P service")
        self.running = True

    async def stop(self) -> None:
        log.info("Stopping default P2P service")
        self.running = False

    async def send_message(self, peer_id: Hashable, message: Any) -> None:
        log.info(
            "DefaultP2PService.send_message() called for peer %r with %s - "
            "message not actually sent",
            peer_id,
            _message_type(message),
        )
        log.debug("Would send message: %r", message)
        log.warning("Using DefaultP2PService - no actual network communication will occur")

    async def broadcast_message(self, message: Any) -> None:
        log.info(
            "DefaultP2PService.broadcast_message() called with %s - "
            "message not actually broadcast",
            _message_type(message),
        )
        log.debug("Would broadcast message: %r", message)
        log.warning("Using DefaultP2PService - no actual network communication will occur")

    async def get_peers(self) -> list:
        log.info("DefaultP2PService.get_peers() called - returning empty list")
        return []