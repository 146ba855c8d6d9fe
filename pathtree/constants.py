"""Reserved identifiers shared by the tree builder and state helpers."""

from __future__ import annotations

ROOT_ID = "root"
FLATTENED_PREFIX = "f::"
