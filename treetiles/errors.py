"""Exception types raised by the treemap layout."""

from __future__ import annotations


class TreemapError(Exception):
    """Base class for every error raised by treetiles."""


class InvalidRowError(TreemapError, RuntimeError):
    """A row was measured while empty or against a non-positive edge.

    ``SquarifyEngine.layout`` never builds such a row, so seeing this means
    the row loop itself is broken. It is not meant to be caught.
    """


class InvalidLayoutInputError(TreemapError, ValueError):
    """Bounds or weights handed to a layout call are malformed."""
