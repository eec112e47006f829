"""Multiboot header and boot information structures.

A kernel image carries a ``MultibootHeader`` within its first 8 KiB. The
boot loader hands the kernel a ``MultibootInfo`` block and may include a
memory map, which is a sequence of ``MemoryMapEntry`` records. All
values are little-endian 32-bit words unless stated otherwise.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass

SEARCH = 8192
HEADER_MAGIC = 0x1BADB002
BOOTLOADER_MAGIC = 0x2BADB002
UNSUPPORTED = 0x0000FFFC
MOD_ALIGN = 0x00001000
INFO_ALIGN = 0x00000004

PAGE_ALIGN = 0x00000001
MEMORY_INFO = 0x00000002
VIDEO_MODE = 0x00000004
AOUT_KLUDGE = 0x00010000

INFO_MEMORY = 0x00000001
INFO_BOOTDEV = 0x00000002
INFO_CMDLINE = 0x00000004
INFO_MODS = 0x00000008
INFO_AOUT_SYMS = 0x00000010
INFO_ELF_SHDR = 0x00000020
INFO_MEM_MAP = 0x00000040
INFO_DRIVE_INFO = 0x00000080
INFO_CONFIG_TABLE = 0x00000100
INFO_BOOT_LOADER_NAME = 0x00000200
INFO_APM_TABLE = 0x00000400
INFO_VIDEO_INFO = 0x00000800

MEMORY_AVAILABLE = 1
MEMORY_RESERVED = 2

_U32 = 0xFFFFFFFF
_HEADER_REQUIRED = struct.Struct("<3I")
_HEADER_ADDRESSES = struct.Struct("<5I")
_HEADER_VIDEO = struct.Struct("<4I")
_HEADER_ADDRESS_END = _HEADER_REQUIRED.size + _HEADER_ADDRESSES.size
_HEADER_VIDEO_END = _HEADER_ADDRESS_END + _HEADER_VIDEO.size

_INFO = struct.Struct("<7I4I9I4H")
_MMAP_ENTRY = struct.Struct("<IQQI")
_MMAP_SIZE_FIELD = 4
_MMAP_MIN_SIZE = _MMAP_ENTRY.size - _MMAP_SIZE_FIELD


@dataclass(frozen=True)
class MultibootHeader:
    """The header a kernel image carries for the boot loader."""

    magic: int
    flags: int
    checksum: int
    header_addr: int = 0
    load_addr: int = 0
    load_end_addr: int = 0
    bss_end_addr: int = 0
    entry_addr: int = 0
    mode_type: int = 0
    width: int = 0
    height: int = 0
    depth: int = 0

    @classmethod
    def from_bytes(cls, data: bytes) -> MultibootHeader:
        """Parse a header from the start of ``data``.

        Address fields are read when ``AOUT_KLUDGE`` is set and video
        fields when ``VIDEO_MODE`` is set; ``ValueError`` is raised if
        ``data`` is too short for the fields its flags call for.
        """
        data = bytes(data)
        if len(data) < _HEADER_REQUIRED.size:
            raise ValueError("multiboot header needs at least 12 bytes")
        magic, flags, checksum = _HEADER_REQUIRED.unpack_from(data, 0)

        addresses = (0, 0, 0, 0, 0)
        video = (0, 0, 0, 0)
        if flags & AOUT_KLUDGE:
            if len(data) < _HEADER_ADDRESS_END:
                raise ValueError("multiboot header too short for address fields")
            addresses = _HEADER_ADDRESSES.unpack_from(data, _HEADER_REQUIRED.size)
        if flags & VIDEO_MODE:
            if len(data) < _HEADER_VIDEO_END:
                raise ValueError("multiboot header too short for video fields")
            video = _HEADER_VIDEO.unpack_from(data, _HEADER_ADDRESS_END)
        return cls(magic, flags, checksum, *addresses, *video)

    def is_valid(self) -> bool:
        """True if the magic is right and magic + flags + checksum is 0 mod 2**32."""
        return (
            self.magic == HEADER_MAGIC
            and (self.magic + self.flags + self.checksum) & _U32 == 0
        )


@dataclass(frozen=True)
class MultibootInfo:
    """The boot information block passed from the loader to the kernel."""

    flags: int
    mem_lower: int
    mem_upper: int
    boot_device: int
    cmdline: int
    mods_count: int
    mods_addr: int
    syms: tuple[int, int, int, int]
    mmap_length: int
    mmap_addr: int
    drives_length: int
    drives_addr: int
    config_table: int
    boot_loader_name: int
    apm_table: int
    vbe_control_info: int
    vbe_mode_info: int
    vbe_mode: int
    vbe_interface_seg: int
    vbe_interface_off: int
    vbe_interface_len: int

    @classmethod
    def from_bytes(cls, data: bytes) -> MultibootInfo:
        """Parse an information block from the start of ``data``."""
        data = bytes(data)
        if len(data) < _INFO.size:
            raise ValueError(f"multiboot info needs {_INFO.size} bytes, got {len(data)}")
        fields = _INFO.unpack_from(data, 0)
        return cls(*fields[:7], tuple(fields[7:11]), *fields[11:])

    def has(self, flag: int) -> bool:
        """True if every bit of ``flag`` is set in ``flags``."""
        return flag != 0 and self.flags & flag == flag


@dataclass(frozen=True)
class MemoryMapEntry:
    """One region of the boot loader's memory map."""

    size: int
    addr: int
    length: int
    type: int

    def is_available(self) -> bool:
        """True if the region is usable RAM."""
        return self.type == MEMORY_AVAILABLE


def parse_memory_map(data: bytes) -> list[MemoryMapEntry]:
    """Parse a memory map buffer into its entries.

    Each entry starts with a size word giving the length of the rest of
    the entry, so the next entry begins ``size + 4`` bytes further on.
    """
    data = bytes(data)
    entries = []
    offset = 0
    while offset < len(data):
        if len(data) - offset < _MMAP_ENTRY.size:
            raise ValueError(f"truncated memory map entry at offset {offset}")
        size, addr, length, kind = _MMAP_ENTRY.unpack_from(data, offset)
        if size < _MMAP_MIN_SIZE:
            raise ValueError(f"memory map entry at offset {offset} has size {size}")
        entries.append(MemoryMapEntry(size, addr, length, kind))
        offset += size + _MMAP_SIZE_FIELD
    return entries


def find_header(image: bytes) -> tuple[int, MultibootHeader] | None:
    """Find a valid header, 32-bit aligned, within the first 8 KiB of ``image``.

    Returns the header's offset and the header, or None if there is none.
    """
    image = bytes(image)
    limit = min(len(image), SEARCH) - _HEADER_REQUIRED.size
    for offset in range(0, limit + 1, 4):
        magic, flags, checksum = _HEADER_REQUIRED.unpack_from(image, offset)
        if magic != HEADER_MAGIC or (magic + flags + checksum) & _U32:
            continue
        try:
            header = MultibootHeader.from_bytes(image[offset:SEARCH])
        except ValueError:
            continue
        return offset, header
    return None