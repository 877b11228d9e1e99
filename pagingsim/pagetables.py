"""Page-table organisations that translate virtual addresses to physical ones."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, TextIO, Union

from .config import NUM_FRAMES, NUM_PAGES, PAGE_SIZE, VIRTUAL_MEM_SIZE, PagingType
from .memory import PhysicalMemory

DIR_SIZE = 16
TABLE_SIZE = NUM_PAGES // DIR_SIZE


def _split_address(vaddr: int) -> tuple[int, int]:
    if not 0 <= vaddr < VIRTUAL_MEM_SIZE:
        raise ValueError(
            f"Endereco invalido! Deve estar entre 0 e {VIRTUAL_MEM_SIZE - 1}"
        )
    return divmod(vaddr, PAGE_SIZE)


class SingleLevelPageTable:
    """Direct mapping: one entry per virtual page holding its frame."""

    def __init__(self, memory: PhysicalMemory) -> None:
        self.memory = memory
        self.entries: list[Optional[int]] = [None] * NUM_PAGES

    def update(self, old_page: Optional[int], new_page: int, frame: int) -> None:
        """Drop the mapping of ``old_page`` and map ``new_page`` to ``frame``."""
        if old_page is not None:
            self.entries[old_page] = None
        self.entries[new_page] = frame

    def translate(self, vaddr: int) -> int:
        """Physical address for ``vaddr``, loading its page on a fault."""
        page, offset = _split_address(vaddr)
        frame = self.entries[page]
        if frame is None:
            frame = self.memory.allocate_frame(page, self.update)
        return frame * PAGE_SIZE + offset

    def dump(self, out: TextIO) -> None:
        """Write the mapped pages to ``out``."""
        out.write("\n=== Tabela de 1 Nivel ====\n")
        out.write("Estado das Paginas Mapeadas:\n")
        mapped = 0
        for page, frame in enumerate(self.entries):
            if frame is not None:
                out.write(f"Pagina {page:4d} -> Moldura {frame:2d}\n")
                mapped += 1
        out.write(f"Total de paginas mapeadas: {mapped}\n")


class TwoLevelPageTable:
    """A directory of inner tables, created on demand."""

    def __init__(self, memory: PhysicalMemory) -> None:
        self.memory = memory
        self.directory: list[Optional[list[Optional[int]]]] = [None] * DIR_SIZE

    def update(self, old_page: Optional[int], new_page: int, frame: int) -> None:
        """Drop the mapping of ``old_page`` and map ``new_page`` to ``frame``."""
        if old_page is not None:
            old_dir, old_tbl = divmod(old_page, TABLE_SIZE)
            inner = self.directory[old_dir]
            if inner is not None:
                inner[old_tbl] = None

        new_dir, new_tbl = divmod(new_page, TABLE_SIZE)
        inner = self.directory[new_dir]
        if inner is None:
            inner = [None] * TABLE_SIZE
            self.directory[new_dir] = inner
        inner[new_tbl] = frame

    def translate(self, vaddr: int) -> int:
        """Physical address for ``vaddr``, loading its page on a fault."""
        page, offset = _split_address(vaddr)
        dir_index, tbl_index = divmod(page, TABLE_SIZE)
        inner = self.directory[dir_index]
        frame = inner[tbl_index] if inner is not None else None
        if frame is None:
            frame = self.memory.allocate_frame(page, self.update)
        return frame * PAGE_SIZE + offset

    def dump(self, out: TextIO) -> None:
        """Write the allocated inner tables and their mappings to ``out``."""
        out.write("\n=== Tabela de 2 Niveis ===\n")
        out.write("\nTabelas de Paginas Alocadas:\n")
        tables_allocated = 0
        total_mapped = 0
        for dir_index, inner in enumerate(self.directory):
            if inner is None:
                continue
            tables_allocated += 1
            out.write(f"Diretorio {dir_index:2d}: ")
            mapped_here = 0
            for tbl_index, frame in enumerate(inner):
                if frame is not None:
                    out.write(f"[{dir_index * TABLE_SIZE + tbl_index}->{frame}] ")
                    mapped_here += 1
            total_mapped += mapped_here
            if mapped_here == 0:
                out.write("(vazia)")
            out.write("\n")
        out.write(f"Total de Tabelas Alocadas: {tables_allocated}/{DIR_SIZE}\n")
        out.write(f"Total de paginas mapeadas: {total_mapped}\n")


@dataclass
class InvertedEntry:
    """What one physical frame holds; ``None`` fields mean the frame is free."""

    pid: Optional[int] = None
    page: Optional[int] = None


class InvertedPageTable:
    """One entry per physical frame naming the virtual page stored there."""

    def __init__(self, memory: PhysicalMemory) -> None:
        self.memory = memory
        self.entries: list[InvertedEntry] = [InvertedEntry() for _ in range(NUM_FRAMES)]

    def update(self, old_page: Optional[int], new_page: int, frame: int) -> None:
        """Record that ``frame`` now holds ``new_page`` of the single process."""
        self.entries[frame] = InvertedEntry(pid=0, page=new_page)

    def translate(self, vaddr: int) -> int:
        """Physical address for ``vaddr``, loading its page on a fault."""
        page, offset = _split_address(vaddr)
        frame = next(
            (index for index, entry in enumerate(self.entries) if entry.page == page),
            None,
        )
        if frame is None:
            frame = self.memory.allocate_frame(page, self.update)
        return frame * PAGE_SIZE + offset

    def dump(self, out: TextIO) -> None:
        """Write the state of every frame to ``out``."""
        out.write("\n=== Tabela Invertida ===\n")
        out.write("Estado das Molduras:\n")
        mapped = 0
        for frame, entry in enumerate(self.entries):
            if entry.page is not None:
                out.write(f"Moldura {frame:2d}: PID={entry.pid}, Pagina={entry.page}\n")
                mapped += 1
            else:
                out.write(f"Moldura {frame:2d}: Livre\n")
        out.write(f"Total de molduras ocupadas: {mapped}/{NUM_FRAMES}\n")


PageTable = Union[SingleLevelPageTable, TwoLevelPageTable, InvertedPageTable]


def create_page_table(paging_type: PagingType, memory: PhysicalMemory) -> PageTable:
    """Build the page table for ``paging_type`` backed by ``memory``."""
    tables = {
        PagingType.ONE_LEVEL: SingleLevelPageTable,
        PagingType.TWO_LEVEL: TwoLevelPageTable,
        PagingType.INVERTED: InvertedPageTable,
    }
    return tables[paging_type](memory)