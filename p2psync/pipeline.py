"""Pipelines that validate and store incoming blocks."""

from __future__ import annotations

import abc
import dataclasses
import logging
from typing import Any

from p2psync.state import PipelineState
from p2psync.storage import BlockStorage

log = logging.getLogger(__name__)


class InvalidBlockError(Exception):
    """A block failed validation."""


class BlockSyncPipeline(abc.ABC):
    """Processes blocks as they move through synchronisation."""

    @abc.abstractmethod
    async def process_block(self, block: Any) -> None:
        """Process a new block."""

    @abc.abstractmethod
    async def get_state(self) -> PipelineState:
        """Return the current pipeline state."""


class DefaultBlockSyncPipeline(BlockSyncPipeline):
    """A pipeline that accepts every block and does nothing with it."""

    def __repr__(self) -> str:
        return "DefaultBlockSyncPipeline()"

    async def process_block(self, block: Any) -> None:
        log.info(
            "DefaultBlockSyncPipeline.process_block() called for block %d - no-op",
            block.header.block_number,
        )

    async def get_state(self) -> PipelineState:
        return PipelineState(
            current_block=0,
            target_block=0,
            is_syncing=False,
            blocks_processed=0,
            blocks_remaining=0,
        )


class StandardBlockPipeline(BlockSyncPipeline):
    """Validates blocks, stores them and tracks progress toward a target."""

    def __init__(self, storage: BlockStorage, initial_block: int, target_block: int) -> None:
        log.info(
            "Creating StandardBlockPipeline from block %d to %d", initial_block, target_block
        )
        self.storage = storage
        self._state = PipelineState(
            current_block=initial_block,
            target_block=target_block,
            is_syncing=initial_block < target_block,
            blocks_processed=0,
            blocks_remaining=max(0, target_block - initial_block),
        )

    def __repr__(self) -> str:
        return f"StandardBlockPipeline({self._state!r})"

    def _validate(self, block: Any) -> None:
        number = block.header.block_number
        if number == 0:
            return
        expected = self._state.current_block + 1
        if number != expected:
            log.warning(
                "Received non-sequential block %d while at %d",
                number,
                self._state.current_block,
            )
            raise InvalidBlockError(f"Non-sequential block: expected {expected}, got {number}")

    def _advance(self, block: Any) -> None:
        state = self._state
        number = block.header.block_number
        if number != state.current_block + 1:
            return
        state.current_block = number
        state.blocks_processed += 1
        if state.current_block < state.target_block:
            state.blocks_remaining = state.target_block - state.current_block
        else:
            state.blocks_remaining = 0
            state.is_syncing = False

    async def process_block(self, block: Any) -> None:
        number = block.header.block_number
        log.info("Processing block %d", number)
        try:
            self._validate(block)
        except InvalidBlockError as exc:
            log.error("Block %d validation failed: %s", number, exc)
            raise
        try:
            await self.storage.store_block(block)
        except Exception as exc:
            log.error("Failed to store block %d: %s", number, exc)
            raise
        self._advance(block)
        log.info("Block %d processed successfully", number)

    async def get_state(self) -> PipelineState:
        return dataclasses.replace(self._state)