# pagingsim

A small simulator for paged virtual memory. It translates virtual addresses to
physical addresses through one of three page-table layouts and loads pages
into physical frames on demand. When every frame is taken, the frame that was
loaded longest ago is replaced (FIFO).

## Geometry

| Parameter        | Value                 |
|------------------|-----------------------|
| Virtual space    | 12 bits (4096 bytes)  |
| Physical memory  | 10 bits (1024 bytes)  |
| Page size        | 8 bits (256 bytes)    |
| Pages            | 16                    |
| Frames           | 4                     |

The virtual space is split into segments: `.text` (1024 bytes), `.data`
(512 bytes), `.bss` (2048 bytes) and `.stack` (512 bytes). These values are
fixed in `pagingsim.config`.

## Installation

```
pip install .
```

## Usage

```
pagingsim 1|2|inv [r|i]
```

The first argument chooses the page table:

- `1` — single-level table
- `2` — two-level table (a directory of 16 inner tables, created on demand)
- `inv` — inverted table, one entry per physical frame

Without an argument, or with any other value, the command prints a message
and exits with status 1.

The second argument chooses the mode:

- `r` — translate randomly generated addresses (at most 100)
- anything else, or nothing — interactive: type virtual addresses in the range
  0–4095, or a line starting with `q` to quit (end of input also quits).
  The leading integer of each line is used; a line without one counts as 0,
  and values out of range are rejected with a message.

The simulator prints its configuration, then each translation, and after
every address appends a full report to `saida.txt` in the current directory:
the translated address and its segment, the page table, the contents of
physical memory with the FIFO order of each frame, and the number of
addresses processed together with frame occupancy.

Before each address the command checks whether every physical frame is in
use. Once memory is full it stops, notes this in `saida.txt` and appends a
final report with the total number of addresses processed and the frame
occupancy. Because of this, the command itself never reaches the point where
a frame is replaced; replacement can be seen through the Python interface.

## Use from Python

```python
import sys

from pagingsim.config import PagingType
from pagingsim.memory import PhysicalMemory
from pagingsim.pagetables import create_page_table
from pagingsim.utils import segment_name

memory = PhysicalMemory()
table = create_page_table(PagingType.from_argument("2"), memory)

vaddr = 1000
paddr = table.translate(vaddr)
print(vaddr, segment_name(vaddr), "->", paddr)

table.dump(sys.stdout)
memory.dump(sys.stdout)
print(f"{memory.used_frames()} frames used, {memory.occupancy():.2f}% occupied")
```

- `pagingsim.pagetables` provides `SingleLevelPageTable`, `TwoLevelPageTable`
  and `InvertedPageTable`, each with `translate(vaddr)`, `update(old_page,
  new_page, frame)` and `dump(out)`. `translate` raises `ValueError` for an
  address outside 0–4095. `create_page_table(paging_type, memory)` builds the
  one matching a `PagingType`.
- `pagingsim.memory.PhysicalMemory` holds the frames. `allocate_frame(page,
  on_update)` returns the frame already holding the page, else the first free
  frame, else replaces the oldest one, calling `on_update(old_page, new_page,
  frame)` whenever a frame is assigned (`old_page` is `None` for a free frame).
  `is_full()`, `used_frames()`, `occupancy()`, `reset()` and `dump(out)` report
  and reset its state.
- `pagingsim.utils` has `segment_name(vaddr)`, `format_configuration()`,
  `print_configuration(out)` and `generate_or_read_input(path, count, rng,
  out)`, which reads up to `count` addresses from a file (default
  `entrada.txt`) or, if the file does not exist, generates random ones and
  writes them to it. The command does not use this function.
- `pagingsim.cli` has `main(argv)`, `generate_full_report(...)` and
  `write_final_report(...)`, which write the reports described above.

## Tests

```
pip install .[test]
pytest
```