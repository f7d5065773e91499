"""Bidirectional mapping between vertex labels and dense integer ids."""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional

from .exceptions import AlgorithmError, GraphFormatError

Vertex = int


class SymbolTable:
    """Interns string labels as zero-based vertex ids in first-seen order.

    The forward map and the inverse list are only ever written together in
    :meth:`intern`, so every id handed out has a label to resolve back to.

    Args:
        capacity: Optional upper bound on the number of distinct labels.
            Interning a new label beyond it raises
            :class:`~bfpaths.exceptions.GraphFormatError`.

    Examples:
        ```python
        >>> st = SymbolTable()
        >>> st.intern("A"), st.intern("B"), st.intern("A")
        (0, 1, 0)
        >>> st.resolve(1)
        'B'
        ```
    """

    def __init__(self, capacity: Optional[int] = None) -> None:
        self.capacity = capacity
        self._ids: Dict[str, Vertex] = {}
        self._labels: List[str] = []

    def intern(self, label: str) -> Vertex:
        """Return the id of ``label``, allocating the next one if it is new."""
        vid = self._ids.get(label)
        if vid is not None:
            return vid
        vid = len(self._labels)
        if self.capacity is not None and vid >= self.capacity:
            raise GraphFormatError(
                f"label {label!r} exceeds the {self.capacity} declared vertices"
            )
        self._ids[label] = vid
        self._labels.append(label)
        return vid

    def resolve(self, vid: Vertex) -> str:
        """Return the label interned as ``vid``.

        Raises:
            AlgorithmError: If ``vid`` was never allocated.
        """
        if not (0 <= vid < len(self._labels)):
            raise AlgorithmError(f"vertex id {vid} has no interned label")
        return self._labels[vid]

    def lookup(self, label: str) -> Optional[Vertex]:
        """Return the id of ``label`` without interning it."""
        return self._ids.get(label)

    def labels(self) -> List[str]:
        """Return all labels in id order."""
        return list(self._labels)

    def __len__(self) -> int:
        return len(self._labels)

    def __contains__(self, label: object) -> bool:
        return label in self._ids

    def __iter__(self) -> Iterator[str]:
        return iter(self._labels)


__all__ = ["SymbolTable", "Vertex"]
