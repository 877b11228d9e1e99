import io

import pytest

from pagingsim.config import NUM_FRAMES, PAGE_SIZE, VIRTUAL_MEM_SIZE, PagingType
from pagingsim.memory import PhysicalMemory
from pagingsim.pagetables import (
    DIR_SIZE,
    InvertedEntry,
    InvertedPageTable,
    SingleLevelPageTable,
    TwoLevelPageTable,
    create_page_table,
)

ALL_TABLES = [SingleLevelPageTable, TwoLevelPageTable, InvertedPageTable]


def _dump(table):
    buffer = io.StringIO()
    table.dump(buffer)
    return buffer.getvalue()


@pytest.mark.parametrize("cls", ALL_TABLES)
def test_documented_first_translation(cls):
    table = cls(PhysicalMemory())
    assert table.translate(1000) == 232


def test_two_level_documented_example():
    table = TwoLevelPageTable(PhysicalMemory())
    table.translate(1000)
    assert table.translate(1500) == 476


@pytest.mark.parametrize("cls", ALL_TABLES)
def test_offset_is_preserved(cls):
    table = cls(PhysicalMemory())
    for vaddr in (0, 255, 256, 1000, 2047, VIRTUAL_MEM_SIZE - 1):
        paddr = table.translate(vaddr)
        assert paddr % PAGE_SIZE == vaddr % PAGE_SIZE


@pytest.mark.parametrize("cls", ALL_TABLES)
def test_same_page_same_frame(cls):
    memory = PhysicalMemory()
    table = cls(memory)
    first = table.translate(PAGE_SIZE * 3 + 5)
    second = table.translate(PAGE_SIZE * 3 + 9)
    assert second - first == 4
    assert memory.used_frames() == 1


@pytest.mark.parametrize("cls", ALL_TABLES)
def test_fifo_replacement_evicts_oldest(cls):
    memory = PhysicalMemory()
    table = cls(memory)
    for page in range(NUM_FRAMES):
        table.translate(page * PAGE_SIZE)
    assert memory.is_full()
    paddr = table.translate(NUM_FRAMES * PAGE_SIZE + 7)
    assert paddr == 7
    assert memory.frames[0] == NUM_FRAMES
    assert 0 not in memory.frames


@pytest.mark.parametrize("cls", ALL_TABLES)
def test_evicted_page_reloads_into_next_oldest(cls):
    memory = PhysicalMemory()
    table = cls(memory)
    for page in range(NUM_FRAMES + 1):
        table.translate(page * PAGE_SIZE)
    assert table.translate(0) == 1 * PAGE_SIZE
    assert memory.frames[1] == 0


@pytest.mark.parametrize("cls", ALL_TABLES)
@pytest.mark.parametrize("vaddr", [-1, VIRTUAL_MEM_SIZE])
def test_out_of_range_address_rejected(cls, vaddr):
    table = cls(PhysicalMemory())
    with pytest.raises(ValueError):
        table.translate(vaddr)


def test_single_level_update_remaps():
    table = SingleLevelPageTable(PhysicalMemory())
    table.update(None, 3, 0)
    assert table.entries[3] == 0
    table.update(3, 5, 0)
    assert table.entries[3] is None
    assert table.entries[5] == 0


def test_single_level_dump():
    table = SingleLevelPageTable(PhysicalMemory())
    table.translate(1000)
    text = _dump(table)
    assert "=== Tabela de 1 Nivel ====" in text
    assert "Pagina    3 -> Moldura  0\n" in text
    assert text.endswith("Total de paginas mapeadas: 1\n")


def test_single_level_dump_empty():
    text = _dump(SingleLevelPageTable(PhysicalMemory()))
    assert text.endswith("Total de paginas mapeadas: 0\n")
    assert "Pagina" not in text.split("Mapeadas:")[1]


def test_two_level_creates_inner_tables_on_demand():
    table = TwoLevelPageTable(PhysicalMemory())
    assert all(inner is None for inner in table.directory)
    table.translate(1000)
    allocated = [inner for inner in table.directory if inner is not None]
    assert len(allocated) == 1


def test_two_level_dump_shows_empty_table_after_eviction():
    memory = PhysicalMemory()
    table = TwoLevelPageTable(memory)
    for page in range(NUM_FRAMES + 1):
        table.translate(page * PAGE_SIZE)
    text = _dump(table)
    assert "Diretorio  0: (vazia)\n" in text
    assert f"Total de Tabelas Alocadas: {NUM_FRAMES + 1}/{DIR_SIZE}\n" in text
    assert text.endswith(f"Total de paginas mapeadas: {NUM_FRAMES}\n")


def test_two_level_dump_lists_mappings():
    table = TwoLevelPageTable(PhysicalMemory())
    table.translate(1000)
    text = _dump(table)
    assert "=== Tabela de 2 Niveis ===" in text
    assert "[3->0] " in text


def test_inverted_update_records_single_process():
    table = InvertedPageTable(PhysicalMemory())
    table.update(None, 7, 2)
    assert table.entries[2] == InvertedEntry(pid=0, page=7)
    table.update(7, 9, 2)
    assert table.entries[2] == InvertedEntry(pid=0, page=9)


def test_inverted_dump():
    table = InvertedPageTable(PhysicalMemory())
    table.translate(1000)
    text = _dump(table)
    assert "Moldura  0: PID=0, Pagina=3\n" in text
    assert "Moldura  1: Livre\n" in text
    assert text.endswith(f"Total de molduras ocupadas: 1/{NUM_FRAMES}\n")


def test_inverted_entries_match_memory():
    memory = PhysicalMemory()
    table = InvertedPageTable(memory)
    for page in (2, 9, 4, 11, 2, 6):
        table.translate(page * PAGE_SIZE)
    assert [entry.page for entry in table.entries] == memory.frames


@pytest.mark.parametrize(
    "paging_type, cls",
    [
        (PagingType.ONE_LEVEL, SingleLevelPageTable),
        (PagingType.TWO_LEVEL, TwoLevelPageTable),
        (PagingType.INVERTED, InvertedPageTable),
    ],
)
def test_create_page_table(paging_type, cls):
    memory = PhysicalMemory()
    table = create_page_table(paging_type, memory)
    assert isinstance(table, cls)
    assert table.memory is memory
    table.translate(0)
    assert memory.used_frames() == 1