"""Progress of the block sync pipeline."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PipelineState:
    """A snapshot of how far block synchronisation has come."""

    current_block: int
    target_block: int
    is_syncing: bool
    blocks_processed: int
    blocks_remaining: int