"""
Top‑level package for the PaLevel API.

PaLevel is a student accommodation finder: landlords post rooms and
students browse them.  All functionality lives in submodules under
``app``.
"""

__all__ = []
