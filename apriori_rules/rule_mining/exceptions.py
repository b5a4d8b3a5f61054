"""
Error types raised by the Apriori miner.
"""


class AprioriError(Exception):
    """Base class for all mining errors."""


class UnknownItemError(AprioriError, KeyError):
    """Raised when a label or position has no entry in the item dictionary."""

    def __str__(self):
        # KeyError quotes its argument; keep the message readable
        return str(self.args[0]) if self.args else ''


class InputUnavailableError(AprioriError, OSError):
    """Raised when the transaction source cannot be read."""


class IterationCapWarning(RuntimeWarning):
    """Issued when the level loop stops at max_iterations before converging."""
