"""Physical memory frames with FIFO replacement."""

from __future__ import annotations

from typing import Callable, Optional, TextIO

from .config import NUM_FRAMES

UpdateCallback = Callable[[Optional[int], int, int], None]


class PhysicalMemory:
    """Maps physical frames to virtual pages; a free frame holds ``None``."""

    def __init__(self) -> None:
        self.frames: list[int | None] = []
        self.allocation_order: list[int | None] = []
        self.next_allocation_id = 0
        self.reset()

    def reset(self) -> None:
        """Mark every frame free and restart the FIFO counter."""
        self.frames = [None] * NUM_FRAMES
        self.allocation_order = [None] * NUM_FRAMES
        self.next_allocation_id = 0

    def is_full(self) -> bool:
        """True when no frame is free."""
        return all(page is not None for page in self.frames)

    def used_frames(self) -> int:
        """Number of occupied frames."""
        return sum(page is not None for page in self.frames)

    def occupancy(self) -> float:
        """Percentage of frames in use."""
        return self.used_frames() / NUM_FRAMES * 100

    def _next_id(self) -> int:
        allocation_id = self.next_allocation_id
        self.next_allocation_id += 1
        return allocation_id

    def allocate_frame(self, page: int, on_update: UpdateCallback | None = None) -> int:
        """Return the frame holding ``page``, loading it if needed.

        ``on_update(old_page, new_page, frame)`` is called whenever a frame is
        (re)assigned; ``old_page`` is ``None`` when the frame was free.
        """
        if page in self.frames:
            return self.frames.index(page)

        if None in self.frames:
            frame = self.frames.index(None)
            self.frames[frame] = page
            self.allocation_order[frame] = self._next_id()
            if on_update is not None:
                on_update(None, page, frame)
            return frame

        oldest = min(range(NUM_FRAMES), key=lambda i: self.allocation_order[i])
        old_page = self.frames[oldest]
        if on_update is not None:
            on_update(old_page, page, oldest)
        self.frames[oldest] = page
        self.allocation_order[oldest] = self._next_id()
        return oldest

    def dump(self, out: TextIO) -> None:
        """Write the contents of every frame to ``out``."""
        out.write("\nEstado da Memoria Fisica:\n")
        for frame, (page, order) in enumerate(zip(self.frames, self.allocation_order)):
            if page is not None:
                out.write(f"Moldura {frame}: Pagina {page} (Ordem FIFO: {order})\n")
            else:
                out.write(f"Moldura {frame}: Livre\n")