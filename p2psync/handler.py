"""Handlers for messages arriving from peers."""

from __future__ import annotations

import abc
import logging
from collections.abc import Hashable
from typing import Any

log = logging.getLogger(__name__)


def _message_type(message: Any) -> str:
    describe = getattr(message, "message_type", None)
    if callable(describe):
        return str(describe())
    return type(message).__name__


class MessageHandler(abc.ABC):
    """Receives messages from the network and acts on them."""

    @abc.abstractmethod
    async def handle_message(self, peer_id: Hashable, message: Any) -> None:
        """Handle a message that arrived from the given peer."""


class DefaultMessageHandler(MessageHandler):
    """A handler that only logs what it receives and processes nothing."""

    def __repr__(self) -> str:
        return "DefaultMessageHandler()"

    async def handle_message(self, peer_id: Hashable, message: Any) -> None:
        log.info(
            "Received message of type %s from peer %r, but no handler is configured",
            _message_type(message),
            peer_id,
        )
        log.debug("Message content: %r", message)
        log.warning("Using DefaultMessageHandler - this won't process messages")