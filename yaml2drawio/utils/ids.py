from __future__ import annotations

from yaml2drawio.diagram_types import CellId


def hierarchical_id(identifier: str, parent_path: str = "") -> CellId:
    """Join an element identifier onto its parent's path with '/'."""
    if not parent_path:
        return CellId(identifier)
    return CellId(parent_path + "/" + identifier)


def synthetic_child_id(parent_id: str, index: int) -> str:
    return f"{parent_id}-{index}"


__all__ = ["hierarchical_id", "synthetic_child_id"]
