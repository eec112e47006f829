"""C-runtime helpers, fixed-point maths, an in-memory framebuffer, sorting demos and boot-structure parsing."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "clib",
    "control",
    "demo",
    "fixedpt",
    "graphics",
    "mathlib",
    "memlayout",
    "multiboot",
    "qsort",
    "sorting",
    "visual",
]