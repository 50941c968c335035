"""Shared type aliases used across the domain."""
from __future__ import annotations

from typing import TypeAlias

ResourceKey: TypeAlias = str   # request path, e.g. "/images/ksclogosmall.gif"
ByteCount: TypeAlias = int
StatusCode: TypeAlias = int
