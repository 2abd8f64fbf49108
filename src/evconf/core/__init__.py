"""Core library for evconf (no CLI dependencies)."""
