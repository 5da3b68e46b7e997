# sheet2csv/core/table/empty_predicate.py
"""
EmptyPredicate - Rules deciding whether a cell counts as blank

The partitioner only ever asks one question about a cell: is it empty?
The answer is injected so callers can decide whether, for example, a cell
holding only whitespace should separate two tables.

Usage:
    from sheet2csv.core.table.empty_predicate import BlankTextEmptyPredicate

    parts = TablePartitioner(BlankTextEmptyPredicate()).divide(grid)
"""
from abc import ABC, abstractmethod
from typing import Any


class EmptyPredicate(ABC):
    """
    Abstract emptiness rule.

    Subclasses must implement:
    - is_empty(): Whether the given cell value is considered blank
    """

    @abstractmethod
    def is_empty(self, value: Any) -> bool:
        """
        Check whether a cell with the given content is considered empty.

        Args:
            value: Cell content (None for a missing value)

        Returns:
            True if the content should be treated as blank
        """
        pass


class NullEmptyPredicate(EmptyPredicate):
    """Default rule: only a missing value (None) is empty."""

    def is_empty(self, value: Any) -> bool:
        return value is None


class BlankTextEmptyPredicate(EmptyPredicate):
    """Missing values and whitespace-only text are empty."""

    def is_empty(self, value: Any) -> bool:
        if value is None:
            return True
        return not str(value).strip()


DEFAULT_EMPTY_PREDICATE = NullEmptyPredicate()
