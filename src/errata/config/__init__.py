# topmark:header:start
#
#   project      : Errata
#   file         : __init__.py
#   file_relpath : src/errata/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for Errata: render options and logging setup.

Modules:
    - [`errata.config.model`][errata.config.model]: `RenderConfig`.
    - [`errata.config.logging`][errata.config.logging]: TRACE-aware logger and setup.
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .model here: it depends on errata.rendering, which itself imports
# errata.config.logging while initializing.
