"""Query objects built on the DTO engine."""

from .abstract_query import SORT_ASC, SORT_DESC, AbstractQuery

__all__ = ["AbstractQuery", "SORT_ASC", "SORT_DESC"]
