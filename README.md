# eposkit

Small, self-contained building blocks for studying how a minimal operating
system and its user runtime work: C-style library routines, 24.8 fixed-point
arithmetic, an in-memory framebuffer with pixel and line drawing, animated
sorting onto that framebuffer, paging arithmetic and Multiboot structure
parsing.

The package uses only the standard library.

## Installation

```
pip install .
```

To run the test suite, install the test extra:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `eposkit.clib` | `Rand` (Park–Miller generator with `rand`/`srand`), `rand_r`, `div`, `ldiv`, `strtol`, `strtoul`, `atol`, `sysconf`, `htons`, `ntohs`, `htonl`, `ntohl`, plus 32-bit limits such as `INT_MAX` and `LONG_MIN` |
| `eposkit.chars` | ASCII classification (`islower`, `isupper`, `isalpha`, `isdigit`, `isalnum`, `isxdigit`, `isspace`, `isblank`, `isgraph`, `isprint`, `iscntrl`, `isascii`, `ispunct`) and `tolower`/`toupper`; each takes a character code or a one-character string |
| `eposkit.fixedpt` | 24.8 signed fixed-point arithmetic on plain ints: `from_int`, `to_int`, `rconst`, `mul`, `div`, `frac_part`, `to_str`, and constants `ONE`, `PI`, `E` … |
| `eposkit.mathlib` | `fabs`, `floor`, `ceil`, `sin`, `cos`, `tan`, `cot`, `sqrt`, `log2(x, y)` (returns `y * log2(x)`), `atan2`, `atan`, `pow`, `exp`, `log` |
| `eposkit.graphics` | Colour packing (`rgb`, `rgba`, `get_r_value`, `get_g_value`, `get_b_value`, `get_a_value`) and `GraphicDevice`, a framebuffer held in a `bytearray` with linear or 64 KiB banked addressing, `set_pixel` for 2, 8, 15, 16, 24 and 32 bits per pixel, and Bresenham `line` |
| `eposkit.sorting` | In-place `bubble_sort`, `selection_sort`, `insertion_sort` (optional `on_change` callback) and `quick_sort` (optional `on_swap` callback) |
| `eposkit.visual` | `create_array` and `SortCanvas`, which draws arrays as horizontal bars and animates `bubble_sort`/`insertion_sort` on a `GraphicDevice` |
| `eposkit.control` | `PriorityControl`, which maps arrow-key codes (`UP`, `DOWN`, `LEFT`, `RIGHT`) to priority changes for two tasks, kept within 0..39 |
| `eposkit.memlayout` | Paging constants and `vaddr`, `page_truncate`, `page_roundup`, `in_user_vm`, `kernel_physical` |
| `eposkit.qsort` | `qsort(a, cmp)`, the Bentley–McIlroy quicksort with a three-way comparison function |
| `eposkit.multiboot` | `MultibootHeader`, `MultibootInfo`, `MemoryMapEntry`, `parse_memory_map`, `find_header` |
| `eposkit.demo` | `run_demo`, which bubble-sorts two copies of a random array side by side on an 800x600 virtual screen, and the `main` entry point |

## Examples

Byte order and colours:

```python
from eposkit.clib import htons, strtol
from eposkit.graphics import rgb, get_g_value

htons(0x1234)              # 0x3412
strtol("  -42abc")         # Conversion(value=-42, end=5)
colour = rgb(10, 200, 30)
get_g_value(colour)        # 200
```

Fixed-point numbers:

```python
from eposkit import fixedpt

three = fixedpt.from_int(3)
fixedpt.to_int(three)           # 3
fixedpt.to_str(three, -1)       # "3.0"
```

Memory layout:

```python
from eposkit.memlayout import vaddr, page_roundup

hex(vaddr(768, 0))     # '0xc0000000'
page_roundup(1)        # 4096
```

Drawing on a virtual screen:

```python
from eposkit.graphics import GraphicDevice, rgb

dev = GraphicDevice(800, 600, 24, 2400, True, 2400 * 600, 1)
dev.line(0, 0, 799, 599, rgb(255, 0, 0))
dev.memory[0:3]        # bytearray(b'\x00\x00\xff')  (blue, green, red)
```

Sorting with a comparison function:

```python
from eposkit.qsort import qsort

items = [5, 3, 9, 1]
qsort(items, lambda x, y: (x > y) - (x < y))
items                  # [1, 3, 5, 9]
```

## Command line

The package installs one command, which runs the sorting demonstration on a
virtual framebuffer and prints the original array and both sorted copies:

```
eposkit-demo --size 50 --seed 7 --delay 0
```

Options: `--size` (number of elements, default 100), `--seed` (random seed,
default the current time) and `--delay` (seconds slept per drawing step,
default 0.001).

## What it does not do

- Nothing is shown on a real screen. `GraphicDevice` only writes into its
  `memory` buffer; there is no mode detection, no video hardware access and no
  window.
- The demonstration does not run tasks concurrently and reads no keyboard
  input. The two sorts run one after the other, and `PriorityControl` only
  records priorities through the callback it is given.
- There is no memory allocator, scheduler or system-call layer; `memlayout`
  and `multiboot` provide constants, address arithmetic and parsing only.