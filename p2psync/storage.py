"""Storage of blocks received during synchronisation."""

from __future__ import annotations

import abc
import logging
from collections.abc import Iterable
from typing import Any

log = logging.getLogger(__name__)

ZERO_STATE_ROOT = bytes(32)


def _block_number(block: Any) -> int:
    return block.header.block_number


class BlockStorage(abc.ABC):
    """Stores and retrieves blocks by number."""

    @abc.abstractmethod
    async def store_block(self, block: Any) -> None:
        """Store a block."""

    @abc.abstractmethod
    async def get_block(self, block_number: int) -> Any | None:
        """Return the block with the given number, or None."""

    @abc.abstractmethod
    async def get_latest_block_number(self) -> int:
        """Return the highest block number stored."""

    @abc.abstractmethod
    async def get_state_root(self, block_number: int) -> Any | None:
        """Return the state root of the given block, or None."""

    @abc.abstractmethod
    async def get_latest_state_root(self) -> Any:
        """Return the state root of the latest block."""


class InMemoryBlockStorage(BlockStorage):
    """Keeps blocks in a dictionary; nothing survives a restart."""

    def __init__(
        self,
        blocks: Iterable[Any] | None = None,
        default_state_root: Any = ZERO_STATE_ROOT,
    ) -> None:
        self._blocks: dict[int, Any] = {}
        self._latest = 0
        self._default_state_root = default_state_root
        for block in blocks or ():
            number = _block_number(block)
            self._latest = max(self._latest, number)
            self._blocks[number] = block
        log.info("Created in-memory block storage with %d blocks", len(self._blocks))

    def __repr__(self) -> str:
        return f"InMemoryBlockStorage(blocks={len(self._blocks)}, latest={self._latest})"

    async def store_block(self, block: Any) -> None:
        number = _block_number(block)
        log.debug("Storing block %d in memory", number)
        self._blocks[number] = block
        if number > self._latest:
            self._latest = number
            log.debug("Updated latest block number to %d", number)

    async def get_block(self, block_number: int) -> Any | None:
        log.debug("Retrieving block %d from memory", block_number)
        return self._blocks.get(block_number)

    async def get_latest_block_number(self) -> int:
        return self._latest

    async def get_state_root(self, block_number: int) -> Any | None:
        block = self._blocks.get(block_number)
        return None if block is None else block.header.state_root

    async def get_latest_state_root(self) -> Any:
        block = self._blocks.get(self._latest)
        if block is None:
            log.warning("No blocks in storage, returning default state root")
            return self._default_state_root
        return block.header.state_root


def create_memory_storage(blocks: Iterable[Any] | None = None) -> BlockStorage:
    """Create in-memory storage, optionally pre-populated with blocks."""
    return InMemoryBlockStorage(blocks)