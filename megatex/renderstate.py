"""A display list that grows up from the start of a buffer while scratch
memory is handed out downwards from its end."""

from enum import Enum
from typing import Any, Iterable, Optional

GFX_SIZE = 8


class Marker(Enum):
    END_DISPLAY_LIST = "end_display_list"


END_DISPLAY_LIST = Marker.END_DISPLAY_LIST


class DisplayListFull(MemoryError):
    """Raised when scratch memory would run into the display list."""


class RenderState:
    """Display list buffer of fixed length measured in 8-byte slots."""

    def __init__(self, display_list_length: int):
        if display_list_length <= 0:
            raise ValueError("display_list_length must be positive")
        self.display_list_length = display_list_length
        self.glist: list[Any] = [None] * display_list_length
        self.dl = 0
        self.current_memory_chunk = display_list_length
        self.framebuffer: Optional[Any] = None

    def reset(self, framebuffer=None) -> None:
        """Start a new frame drawing into framebuffer."""
        self.dl = 0
        self.current_memory_chunk = self.display_list_length
        self.framebuffer = framebuffer

    @property
    def commands(self) -> list[Any]:
        """Commands written to the display list so far."""
        return self.glist[: min(self.dl, self.display_list_length)]

    def emit(self, command) -> None:
        """Append a command; writes past the buffer end are counted but lost."""
        if self.dl < self.display_list_length:
            self.glist[self.dl] = command
        self.dl += 1

    def request_memory(self, size: int) -> int:
        """Reserve size bytes below the previous reservation; return its slot index."""
        slots = (size + GFX_SIZE - 1) // GFX_SIZE
        result = self.current_memory_chunk - slots
        if result <= self.dl:
            raise DisplayListFull(f"no room for {size} bytes")
        self.current_memory_chunk = result
        return result

    def start_chunk(self) -> int:
        return self.dl

    def end_chunk(self, chunk_start: int) -> int:
        """Move commands emitted since chunk_start into scratch memory.

        The moved commands are terminated with END_DISPLAY_LIST and the
        display list is rewound to chunk_start. Returns the chunk's index.
        """
        chunk = self.glist[chunk_start : self.dl]
        new_chunk = self.request_memory(GFX_SIZE * (len(chunk) + 1))
        self.glist[new_chunk : new_chunk + len(chunk) + 1] = chunk + [END_DISPLAY_LIST]
        self.dl = chunk_start
        return new_chunk

    def max_dl_count(self) -> int:
        """Slots available to the display list before scratch memory."""
        return self.current_memory_chunk

    def did_overflow(self) -> bool:
        return self.current_memory_chunk < self.dl

    def inline_branch(self, commands: Iterable[Any]) -> None:
        """Copy commands into the display list up to END_DISPLAY_LIST."""
        for command in commands:
            if command is END_DISPLAY_LIST:
                break
            self.emit(command)