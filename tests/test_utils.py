import io
import random

import pytest

from pagingsim import config
from pagingsim.utils import (
    format_configuration,
    generate_or_read_input,
    print_configuration,
    segment_name,
)


@pytest.mark.parametrize(
    "vaddr, expected",
    [
        (0, ".text"),
        (config.TEXT_SIZE - 1, ".text"),
        (config.TEXT_SIZE, ".data"),
        (config.TEXT_SIZE + config.DATA_SIZE - 1, ".data"),
        (config.TEXT_SIZE + config.DATA_SIZE, ".bss"),
        (config.TEXT_SIZE + config.DATA_SIZE + config.BSS_SIZE - 1, ".bss"),
        (config.TEXT_SIZE + config.DATA_SIZE + config.BSS_SIZE, ".stack"),
        (config.VIRTUAL_MEM_SIZE - 1, ".stack"),
    ],
)
def test_segment_name_boundaries(vaddr, expected):
    assert segment_name(vaddr) == expected


def test_configuration_text_mentions_sizes():
    text = format_configuration()
    assert text.startswith("=== Configuracao do Simulador ===\n")
    assert f"Numero de molduras: {config.NUM_FRAMES}\n" in text
    assert f"Numero de paginas: {config.NUM_PAGES}\n" in text
    assert f".bss: {config.BSS_SIZE} bytes\n" in text


def test_print_configuration_writes_text():
    out = io.StringIO()
    print_configuration(out)
    assert out.getvalue() == format_configuration()


def test_reads_existing_file(tmp_path):
    path = tmp_path / "entrada.txt"
    path.write_text("5\n10\n15\n")
    assert generate_or_read_input(path, 100, None, io.StringIO()) == [5, 10, 15]


def test_reading_stops_at_bad_token(tmp_path):
    path = tmp_path / "entrada.txt"
    path.write_text("7 8x 9")
    assert generate_or_read_input(path, 100, None, io.StringIO()) == [7, 8]


def test_reading_respects_count(tmp_path):
    path = tmp_path / "entrada.txt"
    path.write_text("1 2 3 4 5")
    assert generate_or_read_input(path, 2, None, io.StringIO()) == [1, 2]


def test_generates_and_saves_when_missing(tmp_path):
    path = tmp_path / "entrada.txt"
    out = io.StringIO()
    generated = generate_or_read_input(path, 20, random.Random(1), out)
    assert len(generated) == 20
    assert all(0 <= a < config.VIRTUAL_MEM_SIZE for a in generated)
    assert path.exists()
    assert "Enderecos salvos em entrada.txt" in out.getvalue()
    assert generate_or_read_input(path, 100, None, io.StringIO()) == generated


def test_generation_is_reproducible_with_seed(tmp_path):
    first = generate_or_read_input(tmp_path / "a.txt", 10, random.Random(42), io.StringIO())
    second = generate_or_read_input(tmp_path / "b.txt", 10, random.Random(42), io.StringIO())
    assert first == second


def test_unwritable_location_raises(tmp_path):
    with pytest.raises(OSError):
        generate_or_read_input(tmp_path / "missing" / "entrada.txt", 5, random.Random(0), io.StringIO())