"""Order labels by confidence for display."""

from collections.abc import Iterable

from .types import Label


def rank(labels: Iterable[Label]) -> list[Label]:
    """Sort labels by ascending confidence; ties keep their input order."""
    return sorted(labels, key=lambda label: label.confidence)


def descriptions(labels: Iterable[Label]) -> list[str]:
    """Descriptions in the given order."""
    return [label.description for label in labels]


def render_labels(labels: Iterable[Label]) -> str:
    """Rank labels and format them as a bracketed, space-separated list.

    Example:
        >>> render_labels([Label("sky", 0.9), Label("cat", 0.1)])
        '[cat sky]'
    """
    return "[" + " ".join(descriptions(rank(labels))) + "]"
