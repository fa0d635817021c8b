from __future__ import annotations

from typing import Optional

__all__ = ["mask_identifier"]


def mask_identifier(value: Optional[str], visible: int = 4) -> str:
    """Return *value* with all but the last *visible* characters hidden."""
    if not value:
        return "<unset>"
    if len(value) <= visible:
        return "*" * len(value)
    return "*" * (len(value) - visible) + value[-visible:]
