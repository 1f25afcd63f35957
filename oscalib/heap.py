"""A first-fit heap of headed blocks inside one simulated memory region."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import IntEnum
from typing import NamedTuple, Union

__all__ = [
    "BlockType",
    "RegionStatus",
    "Heap",
    "BlockInfo",
    "HEADER_SIZE",
    "pack_metadata",
    "unpack_metadata",
    "default_user_heap",
]

# Block header on a 32-bit target: canary1, prev_size, size/free,
# canary2, prev and next, four bytes each.
HEADER_SIZE = 24

# Half the width of a pointer: the metadata word holds the status in the
# low half and the block type in the high half.
_HALF_BITS = 16
_HALF_MASK = (1 << _HALF_BITS) - 1

USER_START_ADDRESS = 0x00400000
USER_END_ADDRESS = 0x00600000
BFNUM = 0xDBEEFADA
AFNUM = 0xBEEFDAAD

BytesLike = Union[bytes, bytearray, memoryview]


class BlockType(IntEnum):
    """Owner of a memory region."""

    KERNEL = 0
    USER = 1
    DRIVER = 2


class RegionStatus(IntEnum):
    """State of a memory region."""

    UNMAPPED = 0
    RELEASED = 1
    ALLOCATED = 2
    RESERVED = 3


def pack_metadata(block_type: int, status: int) -> int:
    """Combine a block type and a region status into one metadata word."""
    return (int(status) & _HALF_MASK) | ((int(block_type) & _HALF_MASK) << _HALF_BITS)


def unpack_metadata(mdata: int) -> tuple[BlockType, RegionStatus]:
    """Split a metadata word into its block type and region status."""
    return BlockType(mdata >> _HALF_BITS), RegionStatus(mdata & _HALF_MASK)


class BlockInfo(NamedTuple):
    """A view of one block: header address, payload size and state."""

    address: int
    size: int
    free: bool
    canary1: int
    canary2: int

    @property
    def payload_address(self) -> int:
        return self.address + HEADER_SIZE


@dataclass
class _Block:
    address: int
    size: int
    free: bool
    canary1: int
    canary2: int

    @property
    def payload(self) -> int:
        return self.address + HEADER_SIZE


class Heap:
    """Blocks laid out from ``base_address``, each preceded by a header.

    Allocation takes the first free block large enough, splitting off the
    rest when a header and at least one byte more would fit. Freeing merges
    a block with free neighbours on either side.
    """

    def __init__(
        self,
        base_address: int,
        block_size: int,
        region_size: int,
        block_type: BlockType,
        status: RegionStatus,
        canary1: int,
        canary2: int,
    ) -> None:
        if not base_address:
            raise ValueError("base address must not be zero")
        if block_size < HEADER_SIZE:
            raise ValueError(
                f"block size {block_size} is smaller than a block header ({HEADER_SIZE})"
            )
        self.base_address = base_address
        self.block_size = block_size
        self.region_size = region_size
        self.block_type = BlockType(block_type)
        self.status = RegionStatus(status)
        self.metadata = pack_metadata(self.block_type, self.status)
        self.authorized = (
            self.status is RegionStatus.RESERVED and self.block_type is not BlockType.USER
        )
        self.authorized_regions: tuple[int, ...] = ()
        self._memory = bytearray(block_size)
        self._blocks = [
            _Block(base_address, block_size - HEADER_SIZE, True, canary1, canary2)
        ]

    def alloc(self, size: int) -> int:
        """Allocate ``size`` bytes and return the payload address."""
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        for index, block in enumerate(self._blocks):
            if block.free and block.size >= size:
                if block.size > size + HEADER_SIZE:
                    rest = _Block(
                        block.address + HEADER_SIZE + size,
                        block.size - size - HEADER_SIZE,
                        True,
                        block.canary1,
                        block.canary2,
                    )
                    block.size = size
                    self._blocks.insert(index + 1, rest)
                block.free = False
                return block.payload
        raise MemoryError(f"no free block of {size} bytes")

    def _find(self, address: int) -> tuple[int, _Block]:
        for index, block in enumerate(self._blocks):
            if block.payload == address:
                return index, block
        raise ValueError(f"address {address:#x} is not the start of a block")

    def realloc(self, address: int | None, size: int) -> int:
        """Resize an allocation.

        A block already large enough is returned unchanged. Otherwise a new
        block is allocated and the old contents copied into it; the old block
        stays allocated.
        """
        if address is None:
            return self.alloc(size)
        _, block = self._find(address)
        if block.size >= size:
            return address
        new_address = self.alloc(size)
        src = block.payload - self.base_address
        dst = new_address - self.base_address
        self._memory[dst : dst + block.size] = self._memory[src : src + block.size]
        return new_address

    def free(self, address: int | None) -> None:
        """Release an allocation, merging it with free neighbours."""
        if address is None:
            return
        index, block = self._find(address)
        if block.free:
            raise ValueError(f"block at {address:#x} is already free")
        block.free = True

        if index + 1 < len(self._blocks) and self._blocks[index + 1].free:
            following = self._blocks.pop(index + 1)
            block.size += HEADER_SIZE + following.size

        if index > 0 and self._blocks[index - 1].free:
            previous = self._blocks[index - 1]
            previous.size += HEADER_SIZE + block.size
            del self._blocks[index]

    def _span(self, address: int, size: int) -> int:
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        for block in self._blocks:
            if not block.free and block.payload <= address and address + size <= block.payload + block.size:
                return address - self.base_address
        raise ValueError(
            f"{size} bytes at {address:#x} do not lie within one allocated block"
        )

    def read(self, address: int, size: int) -> bytes:
        """Read ``size`` bytes from an allocated block."""
        offset = self._span(address, size)
        return bytes(self._memory[offset : offset + size])

    def write(self, address: int, data: BytesLike) -> None:
        """Write ``data`` into an allocated block."""
        chunk = bytes(data)
        offset = self._span(address, len(chunk))
        self._memory[offset : offset + len(chunk)] = chunk

    def add_regions(self, regions: Sequence[int]) -> None:
        """Record the regions allowed to use this heap.

        Only reserved regions owned by the kernel or a driver accept them.
        """
        if not regions:
            raise ValueError("no regions given")
        if (
            self.block_type is BlockType.USER
            or not self.authorized
            or self.status in (RegionStatus.UNMAPPED, RegionStatus.RELEASED)
        ):
            raise PermissionError("this region does not accept authorized regions")
        self.authorized_regions = tuple(regions)

    def blocks(self) -> Iterator[BlockInfo]:
        """Yield every block in address order."""
        for block in self._blocks:
            yield BlockInfo(block.address, block.size, block.free, block.canary1, block.canary2)


def default_user_heap() -> Heap:
    """The heap used for user allocations on a 32-bit target."""
    size = USER_END_ADDRESS - USER_START_ADDRESS
    return Heap(
        USER_START_ADDRESS,
        size,
        size,
        BlockType.USER,
        RegionStatus.ALLOCATED,
        BFNUM,
        AFNUM,
    )