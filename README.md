# p2psync

Building blocks for a small peer-to-peer node on top of `asyncio`, with no
dependencies outside the standard library.

## What is in the package

- **Transports** (`p2psync.transport`)
  - `TransportType` lists the transport kinds: `TCP`, `UDP`, `WEBSOCKET`,
    `WEBRTC`.
  - `TcpTransport(bind_addr)` is a working TCP transport. `start()` listens on
    the bind address (port 0 picks a free port; `local_addr()` then reports
    the bound address). `send_to(addr, data)` reuses an open connection to
    `addr` or opens a new one. Every chunk read from any connection is put on
    an `asyncio.Queue` of `(address, data)` pairs; `incoming()` hands that
    queue out once and returns `None` on later calls. `stop()` closes the
    listener and all connections.
  - `create_transport(transport_type, bind_addr)` returns a `TcpTransport`
    for `TransportType.TCP`. For any other type it returns a transport that
    only logs: it sends nothing and its `incoming()` is `None`.
  - Failures to listen, connect or send raise `NetworkError`.
- **Peer discovery** (`p2psync.discovery`): the `PeerDiscovery` interface and
  `DefaultPeerDiscovery`, which records whether it is running (`running`) and
  always reports an empty peer list. `create_peer_discovery()` returns a
  `DefaultPeerDiscovery`.
- **Message handling** (`p2psync.handler`): the `MessageHandler` interface
  with `handle_message(peer_id, message)`, and `DefaultMessageHandler`, which
  only logs what it receives.
- **P2P service interface** (`p2psync.service`): `P2PService` declares
  `start`, `stop`, `send_message`, `broadcast_message` and `get_peers`.
  `DefaultP2PService(local_peer_id)` records whether it is running, logs each
  call, returns no peers and never touches the network.
- **Block synchronisation**
  - `p2psync.state.PipelineState` is a dataclass snapshot of progress:
    `current_block`, `target_block`, `is_syncing`, `blocks_processed`,
    `blocks_remaining`.
  - `p2psync.storage` defines `BlockStorage` and `InMemoryBlockStorage(blocks=None,
    default_state_root=bytes(32))`, which keeps blocks by number and tracks
    the highest number stored. `get_latest_state_root()` returns
    `default_state_root` while the latest block is missing.
    `create_memory_storage(blocks=None)` builds such a store.
  - `p2psync.pipeline` defines `BlockSyncPipeline`, the no-op
    `DefaultBlockSyncPipeline`, and `StandardBlockPipeline(storage,
    initial_block, target_block)`. The standard pipeline accepts block 0 and
    otherwise only the block directly after its current one; anything else
    raises `InvalidBlockError`. Accepted blocks are stored, and the next
    block in sequence advances the state. `get_state()` returns a copy.

Blocks are any objects with `block.header.block_number` and
`block.header.state_root`.

All transport, discovery, service, storage and pipeline operations are
coroutines; `await` them inside an event loop.

## What the package does not do

There is no complete node here. Nothing wires a transport, discovery and a
message handler into a running `P2PService`: the only service provided is
`DefaultP2PService`, which sends nothing. There is no message format or
serialisation for data sent between peers, and no service that requests
blocks from peers and feeds them into a pipeline. Storage is in memory only.
These pieces are left for the application to supply on top of the interfaces
above.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Example

```python
import asyncio
from types import SimpleNamespace

from p2psync.pipeline import StandardBlockPipeline
from p2psync.storage import create_memory_storage


def block(number):
    return SimpleNamespace(header=SimpleNamespace(block_number=number, state_root=bytes(32)))


async def sync():
    pipeline = StandardBlockPipeline(create_memory_storage(), 0, 2)
    await pipeline.process_block(block(1))
    await pipeline.process_block(block(2))
    state = await pipeline.get_state()
    print(state.current_block, state.is_syncing, state.blocks_processed)


asyncio.run(sync())
```

## Fibonacci helpers

`p2psync.fibonacci` computes Fibonacci numbers for indices from 0 to
2**32 - 1 (others raise `ValueError`):

- `fibonacci_recursive(n)`: plain recursion, exponential time.
- `fibonacci_iterative(n)`: a loop in linear time.
- `fibonacci_formula(n)`: Binet's closed form rounded to the nearest integer;
  inexact for large `n` and capped at 2**64 - 1.

The recursive and iterative versions raise `OverflowError` once the result
does not fit in 64 bits.

The package installs a command that prints the first ten Fibonacci numbers:

```
p2psync-fibonacci
```

## Running the tests

```
pytest
```