"""Shared type aliases for dexrate."""

from __future__ import annotations

from typing import Hashable

# Vertices must also be totally ordered; ordering is only used to enumerate
# vertices deterministically.
Vertex = Hashable
Rate = float
