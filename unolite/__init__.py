"""
UNO-Lite - Terminal card game engine

A small, deterministic engine for UNO-style games played at one terminal.
The engine provides:
- Turn order tracking (circular ring with direction)
- Stacked play validation
- Effect resolution (skip, reverse, draw two)
- A round loop driving a pluggable presenter
"""

__version__ = "0.1.0"
