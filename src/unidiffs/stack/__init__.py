"""Diff stack: session state tying catalog, records and universe together.

Architecture Note:
    stack/ is the stateful top layer. A DiffStack is created per session and
    passed to whatever triggers or persists diffs; there is no global stack.
"""

from unidiffs.stack.stack import DiffStack

__all__ = [
    "DiffStack",
]
