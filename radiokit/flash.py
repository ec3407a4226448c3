"""Flash memory layouts and sector-aligned range operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Sequence


@dataclass(frozen=True)
class FlashSector:
    """One erasable flash sector."""

    index: int
    start: int
    size: int

    def end(self) -> int:
        """First address past this sector."""
        return self.start + self.size

    def contains(self, addr: int) -> bool:
        """Whether ``addr`` lies inside this sector."""
        return self.start <= addr < self.end()

    def __str__(self) -> str:
        return f"FlashSector[Index={self.index}, Start=0x{self.start:08x}, End=0x{self.end():08x}]"


FlashMap = Sequence[FlashSector]


def get_sector(flash_map: FlashMap, addr: int) -> Optional[FlashSector]:
    """Return the sector holding ``addr``, or None if it is unmapped."""
    return next((sector for sector in flash_map if sector.contains(addr)), None)


def make_simple_layout(start_addr: int, sector_size: int, sectors: int) -> tuple[FlashSector, ...]:
    """Build a layout of ``sectors`` equally sized, contiguous sectors."""
    return tuple(FlashSector(i, start_addr + sector_size * i, sector_size) for i in range(sectors))


def aligned_contiguous_memory_op(
    flash_map: FlashMap,
    start: int,
    end: int,
    operation: Callable[[int, int, FlashSector], None],
) -> None:
    """Call ``operation(addr, length, sector)`` for each sector-aligned piece of [start, end).

    Stops at the first unmapped address.
    """
    addr = start
    while addr < end:
        sector = get_sector(flash_map, addr)
        if sector is None:
            break
        length = min(end, sector.end()) - addr
        operation(addr, length, sector)
        addr += length


STM32F40X: tuple[FlashSector, ...] = (
    FlashSector(0, 0x08000000, 0x4000),
    FlashSector(1, 0x08004000, 0x4000),
    FlashSector(2, 0x08008000, 0x4000),
    FlashSector(3, 0x0800C000, 0x4000),
    FlashSector(4, 0x08010000, 0x10000),
    FlashSector(5, 0x08020000, 0x20000),
    FlashSector(6, 0x08040000, 0x20000),
    FlashSector(7, 0x08060000, 0x20000),
    FlashSector(8, 0x08080000, 0x20000),
    FlashSector(9, 0x080A0000, 0x20000),
    FlashSector(10, 0x080C0000, 0x20000),
    FlashSector(11, 0x080E0000, 0x20000),
)
"""STM32F40x / STM32F41x internal flash organisation."""

W25Q128JV = make_simple_layout(0x00, 0x10000, 0x100)
"""Winbond W25Q128JV 16 MiB SPI flash."""

M25P16 = make_simple_layout(0x00, 0x10000, 0x20)
"""Micron M25P16 2 MiB SPI flash."""