"""Client-side filtering of aggregated opportunities."""

from oppgenie.filtering.engine import FilterEngine, FilterResult

__all__ = ["FilterEngine", "FilterResult"]
