from enum import Enum


class Operation(Enum):
    """The direction a refspec is interpreted in."""

    FETCH = "fetch"
    PUSH = "push"

    def __str__(self):
        return self.value


class Mode(Enum):
    """How matching references are treated.

    Exactly one mode applies to a refspec, selected by its leading sigil.
    """

    NORMAL = "normal"
    FORCE = "force"
    """``+``: allow non-fast-forward updates of the destination."""
    NEGATIVE = "negative"
    """``^`` or ``!``: exclude matching refs from the other refspecs."""

    def __str__(self):
        return self.value
