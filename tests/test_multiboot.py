import struct

import pytest

from eposkit.multiboot import (
    AOUT_KLUDGE,
    HEADER_MAGIC,
    INFO_CMDLINE,
    INFO_MEM_MAP,
    INFO_MEMORY,
    MEMORY_AVAILABLE,
    MEMORY_RESERVED,
    PAGE_ALIGN,
    SEARCH,
    VIDEO_MODE,
    MemoryMapEntry,
    MultibootHeader,
    MultibootInfo,
    find_header,
    parse_memory_map,
)


def checksum_for(flags):
    return (-(HEADER_MAGIC + flags)) & 0xFFFFFFFF


def header_bytes(flags, extra=()):
    return struct.pack("<3I", HEADER_MAGIC, flags, checksum_for(flags)) + b"".join(
        struct.pack("<I", value) for value in extra
    )


def mmap_entry(addr, length, kind, size=20):
    return struct.pack("<IQQI", size, addr, length, kind) + bytes(size - 20)


def test_header_magic_constant():
    data = struct.pack("<3I", 0x1BADB002, 0, (-0x1BADB002) & 0xFFFFFFFF)
    header = MultibootHeader.from_bytes(data)
    assert header.magic == 0x1BADB002
    assert header.is_valid()


def test_minimal_header_is_valid():
    header = MultibootHeader.from_bytes(header_bytes(PAGE_ALIGN))
    assert header.magic == HEADER_MAGIC
    assert header.flags == PAGE_ALIGN
    assert header.entry_addr == 0
    assert header.is_valid()


def test_bad_checksum_is_invalid():
    data = struct.pack("<3I", HEADER_MAGIC, PAGE_ALIGN, 0)
    assert not MultibootHeader.from_bytes(data).is_valid()


def test_wrong_magic_is_invalid():
    flags = PAGE_ALIGN
    magic = HEADER_MAGIC ^ 1
    data = struct.pack("<3I", magic, flags, (-(magic + flags)) & 0xFFFFFFFF)
    assert not MultibootHeader.from_bytes(data).is_valid()


def test_address_fields_read_with_kludge():
    flags = PAGE_ALIGN | AOUT_KLUDGE
    addresses = (0x100000, 0x100000, 0x120000, 0x130000, 0x10000C)
    header = MultibootHeader.from_bytes(header_bytes(flags, addresses))
    assert (
        header.header_addr,
        header.load_addr,
        header.load_end_addr,
        header.bss_end_addr,
        header.entry_addr,
    ) == addresses
    assert header.is_valid()


def test_video_fields_read_with_video_mode():
    flags = VIDEO_MODE
    extra = (0, 0, 0, 0, 0, 0, 800, 600, 24)
    header = MultibootHeader.from_bytes(header_bytes(flags, extra))
    assert (header.mode_type, header.width, header.height, header.depth) == (0, 800, 600, 24)


def test_short_header_raises():
    with pytest.raises(ValueError):
        MultibootHeader.from_bytes(b"\x02\xb0\xad\x1b")


def test_kludge_without_address_fields_raises():
    with pytest.raises(ValueError):
        MultibootHeader.from_bytes(header_bytes(AOUT_KLUDGE))


def test_find_header_at_aligned_offset():
    image = bytes(16) + header_bytes(PAGE_ALIGN) + bytes(64)
    found = find_header(image)
    assert found is not None
    offset, header = found
    assert offset == 16
    assert header.is_valid()


def test_find_header_ignores_unaligned_and_late_headers():
    unaligned = bytes(18) + header_bytes(PAGE_ALIGN) + bytes(64)
    late = bytes(SEARCH) + header_bytes(PAGE_ALIGN)
    assert find_header(unaligned) is None
    assert find_header(late) is None


def test_find_header_skips_bad_checksum():
    bad = struct.pack("<3I", HEADER_MAGIC, PAGE_ALIGN, 0)
    image = bad + header_bytes(PAGE_ALIGN)
    found = find_header(image)
    assert found is not None
    assert found[0] == len(bad)


def info_bytes(**fields):
    names = [
        "flags", "mem_lower", "mem_upper", "boot_device", "cmdline", "mods_count",
        "mods_addr", "s0", "s1", "s2", "s3", "mmap_length", "mmap_addr",
        "drives_length", "drives_addr", "config_table", "boot_loader_name",
        "apm_table", "vbe_control_info", "vbe_mode_info", "vbe_mode",
        "vbe_interface_seg", "vbe_interface_off", "vbe_interface_len",
    ]
    return struct.pack("<7I4I9I4H", *(fields.get(name, 0) for name in names))


def test_info_round_trip():
    data = info_bytes(
        flags=INFO_MEMORY | INFO_MEM_MAP,
        mem_lower=640,
        mem_upper=31744,
        mmap_length=48,
        mmap_addr=0x9000,
        s0=1,
        s3=4,
        vbe_mode=0x115,
    )
    info = MultibootInfo.from_bytes(data)
    assert info.mem_lower == 640
    assert info.mem_upper == 31744
    assert info.mmap_length == 48
    assert info.mmap_addr == 0x9000
    assert info.syms == (1, 0, 0, 4)
    assert info.vbe_mode == 0x115
    assert info.has(INFO_MEMORY)
    assert info.has(INFO_MEM_MAP)
    assert not info.has(INFO_CMDLINE)


def test_info_too_short_raises():
    with pytest.raises(ValueError):
        MultibootInfo.from_bytes(info_bytes()[:-1])


def test_parse_memory_map():
    data = mmap_entry(0, 0x9FC00, MEMORY_AVAILABLE) + mmap_entry(
        0x9FC00, 0x400, MEMORY_RESERVED
    )
    entries = parse_memory_map(data)
    assert entries == [
        MemoryMapEntry(20, 0, 0x9FC00, MEMORY_AVAILABLE),
        MemoryMapEntry(20, 0x9FC00, 0x400, MEMORY_RESERVED),
    ]
    assert [entry.is_available() for entry in entries] == [True, False]


def test_parse_memory_map_honours_entry_size():
    data = mmap_entry(0x100000, 0x1000, MEMORY_AVAILABLE, size=28) + mmap_entry(
        0x200000, 0x2000, MEMORY_AVAILABLE
    )
    entries = parse_memory_map(data)
    assert [entry.addr for entry in entries] == [0x100000, 0x200000]
    assert entries[0].size == 28


def test_parse_memory_map_empty():
    assert parse_memory_map(b"") == []


def test_parse_memory_map_truncated_raises():
    with pytest.raises(ValueError):
        parse_memory_map(mmap_entry(0, 0x1000, MEMORY_AVAILABLE)[:-2])


def test_parse_memory_map_bad_size_raises():
    data = struct.pack("<IQQI", 0, 0, 0x1000, MEMORY_AVAILABLE)
    with pytest.raises(ValueError):
        parse_memory_map(data)