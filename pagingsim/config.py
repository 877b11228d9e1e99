"""Sizes of the simulated address spaces and the available paging schemes."""

from __future__ import annotations

from enum import Enum

VIRTUAL_BITS = 12
PHYSICAL_BITS = 10
PAGE_BITS = 8

PAGE_SIZE = 1 << PAGE_BITS
VIRTUAL_MEM_SIZE = 1 << VIRTUAL_BITS
PHYSICAL_MEM_SIZE = 1 << PHYSICAL_BITS
NUM_FRAMES = PHYSICAL_MEM_SIZE // PAGE_SIZE
NUM_PAGES = VIRTUAL_MEM_SIZE // PAGE_SIZE

TEXT_SIZE = 1 << (VIRTUAL_BITS - 2)
DATA_SIZE = 1 << (VIRTUAL_BITS - 3)
STACK_SIZE = 1 << (VIRTUAL_BITS - 3)
BSS_SIZE = VIRTUAL_MEM_SIZE - (TEXT_SIZE + DATA_SIZE + STACK_SIZE)


class PagingType(Enum):
    """The page-table organisation used for address translation."""

    ONE_LEVEL = "1"
    TWO_LEVEL = "2"
    INVERTED = "inv"

    def label(self) -> str:
        """Short human-readable name used in reports."""
        return {
            PagingType.ONE_LEVEL: "1 nivel",
            PagingType.TWO_LEVEL: "2 niveis",
            PagingType.INVERTED: "Invertida",
        }[self]

    @classmethod
    def from_argument(cls, value: str) -> PagingType:
        """Parse a command-line argument ("1", "2" or "inv")."""
        for member in cls:
            if member.value == value:
                return member
        raise ValueError("Tipo de tabela invalido. Use 1, 2 ou inv.")