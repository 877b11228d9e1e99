"""Command-line driver for the paged-memory simulator."""

from __future__ import annotations

import random
import sys
from typing import Optional, Sequence, TextIO

from .config import NUM_FRAMES, PHYSICAL_MEM_SIZE, VIRTUAL_MEM_SIZE, PagingType
from .memory import PhysicalMemory
from .pagetables import PageTable, create_page_table
from .utils import print_configuration, segment_name

OUTPUT_FILE = "saida.txt"
RANDOM_ADDRESS_COUNT = 100

_SEPARATOR = "\n====-----------------NOVO-CONTEUDO---------------------------===\n"

_SELECTED_MESSAGES = {
    PagingType.ONE_LEVEL: "Usando tabela de paginas de 1 nivel",
    PagingType.TWO_LEVEL: "Usando tabela de paginas de 2 niveis",
    PagingType.INVERTED: "Usando tabela de paginas invertida",
}


def generate_full_report(
    out: TextIO,
    vaddr: int,
    paddr: int,
    processed_addresses: int,
    table: PageTable,
    memory: PhysicalMemory,
) -> None:
    """Write the translation of ``vaddr`` and the current simulator state."""
    out.write(
        f"Endereco Virtual: {vaddr} (segmento {segment_name(vaddr)}) "
        f"-> Endereco Fisico: {paddr}\n"
    )
    out.write("\n=== Estado Atual ===\n")
    table.dump(out)
    memory.dump(out)
    out.write("\n=== Estatisticas ===\n")
    out.write(f"Enderecos processados: {processed_addresses}\n")
    out.write(f"Molduras utilizadas: {memory.used_frames()}/{NUM_FRAMES}\n")
    out.write(f"Taxa de ocupacao: {memory.occupancy():.2f}%\n")
    out.write(_SEPARATOR)
    out.flush()


def write_final_report(out: TextIO, processed_addresses: int, memory: PhysicalMemory) -> None:
    """Write the closing summary used once physical memory has filled up."""
    out.write("\n=== RELATORIO FINAL (MEMORIA CHEIA) ===\n")
    out.write(f"Total de enderecos processados: {processed_addresses}\n")
    out.write(f"Molduras utilizadas: {memory.used_frames()}/{NUM_FRAMES}\n")
    out.write(f"Taxa de ocupacao: {memory.occupancy():.2f}%\n")


def _print_usage(prog: str) -> None:
    print(f"Uso: {prog} [1|2|inv] [r|i]")
    print("  1: tabela de paginas de 1 nivel")
    print("  2: tabela de paginas de 2 niveis")
    print("  inv: tabela de paginas invertida")
    print("  r: gerar 10 enderecos aleatorios")
    print("  i: modo interativo (padrao)")


def _parse_int_prefix(text: str) -> int:
    """Leading integer of ``text`` after whitespace, or 0 when there is none."""
    stripped = text.lstrip()
    sign = ""
    if stripped[:1] in ("+", "-"):
        sign, stripped = stripped[0], stripped[1:]
    digits = ""
    for char in stripped:
        if not char.isdigit():
            break
        digits += char
    return int(sign + digits) if digits else 0


class _Run:
    """State shared by the address-processing loops of one simulation."""

    def __init__(self, out: TextIO, table: PageTable, memory: PhysicalMemory) -> None:
        self.out = out
        self.table = table
        self.memory = memory
        self.processed = 0
        self.memory_full = False

    def stop_if_full(self, message: str) -> bool:
        if not self.memory.is_full():
            return False
        print(message)
        self.out.write(
            "\n=== ATENCAO: Memoria fisica cheia! Processamento interrompido. ===\n"
        )
        self.memory_full = True
        return True

    def process(self, vaddr: int) -> None:
        paddr = self.table.translate(vaddr)
        print(f"  -> Endereco fisico: {paddr}")
        self.processed += 1
        generate_full_report(self.out, vaddr, paddr, self.processed, self.table, self.memory)

    def run_random(self, rng: random.Random) -> None:
        for index in range(1, RANDOM_ADDRESS_COUNT + 1):
            if self.stop_if_full("Memoria fisica cheia! Processamento interrompido."):
                return
            vaddr = rng.randrange(VIRTUAL_MEM_SIZE)
            print(f"\nProcessando endereco aleatorio {index}: {vaddr}")
            self.process(vaddr)

    def run_interactive(self) -> None:
        print("\nDigite enderecos virtuais para traduzir (ou 'q' para sair):")
        while not self.stop_if_full(
            "Memoria fisica cheia! Nao e possivel processar mais enderecos."
        ):
            try:
                line = input(f"\nEndereco virtual (0-{VIRTUAL_MEM_SIZE - 1}): ")
            except EOFError:
                return
            if line[:1].lower() == "q":
                return
            vaddr = _parse_int_prefix(line)
            if not 0 <= vaddr < VIRTUAL_MEM_SIZE:
                print(f"Endereco invalido! Deve estar entre 0 e {VIRTUAL_MEM_SIZE - 1}")
                continue
            self.process(vaddr)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the simulator; returns the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    print("=== Simulador de Memoria Paginada ===")

    if not args:
        _print_usage("pagingsim")
        return 1

    try:
        paging_type = PagingType.from_argument(args[0])
    except ValueError as error:
        print(error)
        return 1
    print(_SELECTED_MESSAGES[paging_type])

    random_mode = len(args) > 1 and args[1] == "r"
    if random_mode:
        print("Modo aleatorio ativado. Gerando 10 enderecos.")
    else:
        print("Modo interativo ativado. Digite enderecos virtuais.")

    if VIRTUAL_MEM_SIZE < PHYSICAL_MEM_SIZE:
        print("Erro: Espaco virtual deve ser >= memoria fisica")
        return 1

    print_configuration()

    memory = PhysicalMemory()
    table = create_page_table(paging_type, memory)

    with open(OUTPUT_FILE, "w") as out:
        out.write("=== Simulador de Memoria Paginada ===\n")
        out.write(f"Tipo de paginacao: {paging_type.label()}\n")
        out.write("=====================================\n\n")

        run = _Run(out, table, memory)
        if random_mode:
            run.run_random(random.Random())
        else:
            run.run_interactive()

        if run.memory_full:
            write_final_report(out, run.processed, memory)

    print(f"\nResultados salvos em {OUTPUT_FILE}")
    return 0