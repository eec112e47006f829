"""Virtual memory layout, paging constants and task parameters of the kernel.

Addresses are 32-bit. A virtual address is split into a 10-bit page
directory index, a 10-bit page table index and a 12-bit page offset.
"""

from __future__ import annotations

_U32 = 0xFFFFFFFF

PAGE_SHIFT = 12
PGDR_SHIFT = 22
PAGE_SIZE = 1 << PAGE_SHIFT
PAGE_MASK = PAGE_SIZE - 1

PTE_V = 0x001
PTE_W = 0x002
PTE_U = 0x004
PTE_A = 0x020
PTE_M = 0x040

VM_PROT_NONE = 0x00
VM_PROT_READ = 0x01
VM_PROT_WRITE = 0x02
VM_PROT_EXEC = 0x04
VM_PROT_RW = VM_PROT_READ | VM_PROT_WRITE
VM_PROT_ALL = VM_PROT_RW | VM_PROT_EXEC

HZ = 100
PRI_USER_MIN = 0
PRI_USER_MAX = 127
NZERO = 20

TASK_STATE_WAITING = -1
TASK_STATE_READY = 1
TASK_STATE_ZOMBIE = 2
TASK_TIMESLICE_DEFAULT = 4
TASK_SIGNATURE = 0x20160201

NR_KERN_PAGETABLE = 20
RAM_ZONE_LEN = 2 * 8


def vaddr(pdi: int, pti: int) -> int:
    """Return the virtual address of page-directory ``pdi``, page-table ``pti``."""
    return ((pdi << PGDR_SHIFT) | (pti << PAGE_SHIFT)) & _U32


KERN_MAX_ADDR = vaddr(1023, 1023)
KERN_MIN_ADDR = vaddr(767, 767)
USER_MAX_ADDR = vaddr(767, 0)
USER_MIN_ADDR = vaddr(1, 0)
KERNBASE = vaddr(768, 0)


def page_truncate(x: int) -> int:
    """Round ``x`` down to a page boundary."""
    return x & ~PAGE_MASK & _U32


def page_roundup(x: int) -> int:
    """Round ``x`` up to a page boundary (wrapping at 2**32)."""
    return (x + PAGE_MASK) & ~PAGE_MASK & _U32


def in_user_vm(va: int, length: int) -> bool:
    """True if ``length`` bytes at ``va`` lie inside user address space."""
    va &= _U32
    return USER_MIN_ADDR <= va < USER_MAX_ADDR and ((va + length) & _U32) <= USER_MAX_ADDR


def kernel_physical(x: int) -> int:
    """Physical address of kernel virtual address ``x``."""
    return (x - KERNBASE) & _U32