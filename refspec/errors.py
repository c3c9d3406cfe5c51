import typing as t


class EmptyFileError(Exception):
    pass


class ExceptionCount(Exception):
    def __init__(self, count: int):
        self.count = count
        super().__init__()


class RefSpecError(ValueError):
    """Base class for refspec errors.

    :param spec: The refspec that caused the error, as it was passed in.
    :param reason: A short description of what is wrong with it.
    """

    def __init__(self, spec: t.Union[bytes, bytearray, memoryview], reason: str):
        self.spec = bytes(spec)
        self.reason = reason
        super().__init__(spec, reason)

    def __str__(self) -> str:
        return "'{}': {}".format(self.spec.decode("utf-8", "replace"), self.reason)


class ParseError(RefSpecError):
    """The refspec is not grammatically valid."""


class MalformedSigil(ParseError):
    pass


class IllegalColonPlacement(ParseError):
    pass


class WildcardMismatch(ParseError):
    pass


class IncompatibleNegative(ParseError):
    pass


class InvalidRefName(ParseError):
    pass


class ClassifyError(RefSpecError):
    """The refspec is valid, but has no meaning for its operation."""


class Unclassifiable(ClassifyError):
    pass
