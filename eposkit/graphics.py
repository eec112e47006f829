"""Colour values and pixel/line drawing into a VBE-style frame buffer.

A ``GraphicDevice`` owns the video memory as a ``bytearray``. Linear
modes address it directly. Banked modes reach it through a window that
moves in 64 KiB steps, so ``switch_bank`` selects which part the window
shows.
"""

from __future__ import annotations

from collections.abc import Iterator

BANK_STEP = 0x10000
CGA_ODD_ROWS = 0x2000


def rgb(r: int, g: int, b: int) -> int:
    """Pack red, green and blue into a colour value (red in the low byte)."""
    return (r & 0xFF) | ((g & 0xFF) << 8) | ((b & 0xFF) << 16)


def rgba(r: int, g: int, b: int, a: int) -> int:
    """Pack red, green, blue and alpha into a colour value."""
    return ((a & 0xFF) << 24) | rgb(r, g, b)


def get_r_value(c: int) -> int:
    """Red component of a colour value."""
    return c & 0xFF


def get_g_value(c: int) -> int:
    """Green component of a colour value."""
    return (c >> 8) & 0xFF


def get_b_value(c: int) -> int:
    """Blue component of a colour value."""
    return (c >> 16) & 0xFF


def get_a_value(c: int) -> int:
    """Alpha component of a colour value."""
    return (c >> 24) & 0xFF


def _line_points(x1: int, y1: int, x2: int, y2: int) -> Iterator[tuple[int, int]]:
    """Yield the points of a Bresenham line, always scanned in one direction."""
    dx = abs(x2 - x1)
    dy = abs(y2 - y1)
    if dy <= dx:
        if x2 < x1:
            x1, x2 = x2, x1
            y1, y2 = y2, y1
        step = 1 if y2 > y1 else -1
        d = 2 * dy - dx
        e_incr = 2 * dy
        ne_incr = 2 * (dy - dx)
        yield x1, y1
        y = y1
        for x in range(x1 + 1, x2 + 1):
            if d < 0:
                d += e_incr
            else:
                d += ne_incr
                y += step
            yield x, y
    else:
        if y2 < y1:
            x1, x2 = x2, x1
            y1, y2 = y2, y1
        step = 1 if x2 > x1 else -1
        d = 2 * dx - dy
        e_incr = 2 * dx
        ne_incr = 2 * (dx - dy)
        yield x1, y1
        x = x1
        for y in range(y1 + 1, y2 + 1):
            if d < 0:
                d += e_incr
            else:
                d += ne_incr
                x += step
            yield x, y


class GraphicDevice:
    """A frame buffer with the geometry of one graphics mode."""

    def __init__(
        self,
        x_resolution: int,
        y_resolution: int,
        bits_per_pixel: int,
        bytes_per_scan_line: int,
        linear: bool = True,
        frame_buffer_size: int | None = None,
        number_of_planes: int = 1,
    ) -> None:
        self.x_resolution = x_resolution
        self.y_resolution = y_resolution
        self.bits_per_pixel = bits_per_pixel
        self.bytes_per_scan_line = bytes_per_scan_line
        self.linear = bool(linear)
        self.number_of_planes = number_of_planes

        needed = bytes_per_scan_line * y_resolution
        if bits_per_pixel == 2:
            needed = max(needed, CGA_ODD_ROWS + bytes_per_scan_line * ((y_resolution + 1) // 2))

        if self.linear:
            if frame_buffer_size is None:
                frame_buffer_size = needed
            memory_size = frame_buffer_size
        else:
            if frame_buffer_size is None:
                frame_buffer_size = BANK_STEP
            banks = (needed + BANK_STEP - 1) // BANK_STEP
            memory_size = banks * BANK_STEP + frame_buffer_size
        self.frame_buffer_size = frame_buffer_size
        self.memory = bytearray(memory_size)
        self.bank = -1

    def switch_bank(self, bank: int) -> int:
        """Move the window to ``bank`` (in 64 KiB steps); return 0."""
        if bank != self.bank:
            self.bank = bank
        return 0

    def _locate(self, addr: int) -> int:
        """Return the memory index for a linear pixel address."""
        if self.linear:
            return addr
        addr &= 0xFFFFFFFF
        self.switch_bank((addr >> 16) & 0xFFFF)
        return self.bank * BANK_STEP + (addr & 0xFFFF)

    def _store(self, index: int, value: int, width: int) -> None:
        self.memory[index:index + width] = value.to_bytes(width, "little")

    def set_pixel(self, x: int, y: int, cr: int) -> None:
        """Plot colour ``cr`` at ``(x, y)``; points off screen are ignored."""
        if not (0 <= x < self.x_resolution and 0 <= y < self.y_resolution):
            return

        depth = self.bits_per_pixel
        bpp = 16 if depth == 15 else depth
        addr = y * self.bytes_per_scan_line + (x * bpp) // 8
        r, g, b, a = get_r_value(cr), get_g_value(cr), get_b_value(cr), get_a_value(cr)

        if depth == 2:
            base = CGA_ODD_ROWS if y & 1 else 0
            index = base + (y // 2) * self.bytes_per_scan_line + (x * bpp) // 8
            shift = 6 - 2 * (x & 3)
            self.memory[index] = (self.memory[index] & ~(3 << shift) & 0xFF) | ((cr & 3) << shift)
        elif depth == 8:
            self.memory[self._locate(addr)] = r
        elif depth == 15:
            value = ((r & 0x1F) << 10) | ((g & 0x1F) << 5) | (b & 0x1F)
            self._store(self._locate(addr), value, 2)
        elif depth == 16:
            value = ((r & 0x1F) << 11) | ((g & 0x3F) << 5) | (b & 0x1F)
            self._store(self._locate(addr), value, 2)
        elif depth == 24:
            self._set_pixel24(addr, (b, g, r))
        elif depth == 32:
            value = (a << 24) | (r << 16) | (g << 8) | b
            self._store(self._locate(addr), value, 4)

    def _set_pixel24(self, addr: int, components: tuple[int, int, int]) -> None:
        if self.linear:
            self.memory[addr:addr + 3] = bytes(components)
            return
        addr &= 0xFFFFFFFF
        bank = (addr >> 16) & 0xFFFF
        offset = addr & 0xFFFF
        self.switch_bank(bank)
        for position, component in enumerate(components):
            if position and offset >= self.frame_buffer_size:
                offset = 0
                bank += 1
                self.switch_bank(bank)
            self.memory[bank * BANK_STEP + offset] = component
            offset += 1

    def line(self, x1: int, y1: int, x2: int, y2: int, cr: int) -> None:
        """Draw a line from ``(x1, y1)`` to ``(x2, y2)`` in colour ``cr``."""
        for x, y in _line_points(x1, y1, x2, y2):
            self.set_pixel(x, y, cr)