from __future__ import annotations

from .corpus import generate_schematic, generate_schematics

__all__ = ["generate_schematic", "generate_schematics"]
