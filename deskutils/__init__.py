"""Desktop utilities: a hex dump viewer, a calculator and disassembly line highlighting."""

__version__ = "0.1.0"