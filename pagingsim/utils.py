"""Address segments, configuration report and input address lists."""

from __future__ import annotations

import random
import re
import sys
from pathlib import Path
from typing import TextIO

from .config import (
    BSS_SIZE,
    DATA_SIZE,
    NUM_FRAMES,
    NUM_PAGES,
    PAGE_BITS,
    PAGE_SIZE,
    PHYSICAL_BITS,
    PHYSICAL_MEM_SIZE,
    STACK_SIZE,
    TEXT_SIZE,
    VIRTUAL_BITS,
    VIRTUAL_MEM_SIZE,
)

_LEADING_INT = re.compile(r"[+-]?\d+")


def segment_name(vaddr: int) -> str:
    """Name of the segment a virtual address falls in."""
    if vaddr < TEXT_SIZE:
        return ".text"
    if vaddr < TEXT_SIZE + DATA_SIZE:
        return ".data"
    if vaddr < TEXT_SIZE + DATA_SIZE + BSS_SIZE:
        return ".bss"
    return ".stack"


def format_configuration() -> str:
    """The simulator configuration as a printable block."""
    lines = [
        "=== Configuracao do Simulador ===",
        f"Tamanho do espaco virtual: {VIRTUAL_BITS} bits ({VIRTUAL_MEM_SIZE} bytes)",
        f"Tamanho da memoria fisica: {PHYSICAL_BITS} bits ({PHYSICAL_MEM_SIZE} bytes)",
        f"Tamanho da pagina: {PAGE_BITS} bits ({PAGE_SIZE} bytes)",
        f"Numero de paginas: {NUM_PAGES}",
        f"Numero de molduras: {NUM_FRAMES}",
        "",
        "Tamanhos dos segmentos:",
        f".text: {TEXT_SIZE} bytes",
        f".data: {DATA_SIZE} bytes",
        f".bss: {BSS_SIZE} bytes",
        f".stack: {STACK_SIZE} bytes",
        "===================================",
        "",
    ]
    return "\n".join(lines) + "\n"


def print_configuration(out: TextIO | None = None) -> None:
    """Write the configuration block to ``out`` (standard output by default)."""
    (out or sys.stdout).write(format_configuration())


def _read_addresses(text: str, count: int) -> list[int]:
    addresses: list[int] = []
    for token in text.split():
        if len(addresses) >= count:
            break
        match = _LEADING_INT.match(token)
        if match is None:
            break
        addresses.append(int(match.group()))
        if match.end() != len(token):
            break
    return addresses


def generate_or_read_input(
    path: str | Path = "entrada.txt",
    count: int = 100,
    rng: random.Random | None = None,
    out: TextIO | None = None,
) -> list[int]:
    """Read up to ``count`` addresses from ``path``, or generate and save them.

    When the file does not exist, ``count`` random virtual addresses are
    generated, written one per line to ``path`` and returned.
    """
    out = out or sys.stdout
    path = Path(path)
    try:
        text = path.read_text()
    except FileNotFoundError:
        pass
    else:
        out.write(f"Lendo enderecos do arquivo {path.name}...\n")
        addresses = _read_addresses(text, count)
        out.write(f"Lidos {len(addresses)} enderecos do arquivo\n")
        return addresses

    out.write(f"Arquivo {path.name} nao encontrado. Gerando enderecos aleatorios...\n")
    rng = rng or random.Random()
    addresses = [rng.randrange(VIRTUAL_MEM_SIZE) for _ in range(count)]
    with path.open("w") as handle:
        for index, address in enumerate(addresses, start=1):
            handle.write(f"{address}\n")
            out.write(f"Gerado endereco {index}: {address}\n")
    out.write(f"Enderecos salvos em {path.name}\n")
    return addresses