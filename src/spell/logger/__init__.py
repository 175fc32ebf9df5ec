"""Logger module for spell.

Provides the unlabeled-command log used to grow the example corpus.
"""

from .unlabeled import UnlabeledEntry, UnlabeledLog

__all__ = ["UnlabeledEntry", "UnlabeledLog"]
