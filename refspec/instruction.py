"""What a parsed refspec asks a fetch or push to do.

Instructions borrow their names from the refspec they were classified from, so
an instruction derived from a :class:`~refspec.spec.RefSpecRef` holds
`memoryview` slices of the original input and compares equal to plain `bytes`.
"""
import typing as t
from dataclasses import dataclass
from dataclasses import fields

from refspec.errors import Unclassifiable
from refspec.types import Mode
from refspec.types import Operation

if t.TYPE_CHECKING:
    from refspec.spec import _RefSpecBase

Name = t.Union[bytes, memoryview]

DEFAULT_FETCH_SOURCE = b"HEAD"


class _InstructionBase:
    operation: t.ClassVar[Operation]

    def __repr__(self):
        values = ", ".join(
            "{}={!r}".format(f.name, bytes(getattr(self, f.name)))
            for f in fields(self)  # type: ignore
        )
        return "{}({})".format(type(self).__name__, values)

    def __str__(self):
        names = [
            bytes(getattr(self, f.name)).decode("utf-8", "replace")
            for f in fields(self)  # type: ignore
        ]
        return " ".join([type(self).__name__, " -> ".join(names)]).rstrip()


# Fetch


@dataclass(frozen=True, repr=False)
class Only(_InstructionBase):
    """Fetch the objects of `source` without updating any local ref."""

    operation = Operation.FETCH
    source: Name


@dataclass(frozen=True, repr=False)
class AndUpdate(_InstructionBase):
    """Fetch `source` and update the local `destination` to match."""

    operation = Operation.FETCH
    source: Name
    destination: Name


@dataclass(frozen=True, repr=False)
class Exclude(_InstructionBase):
    """Do not fetch refs matching `source`, even if other refspecs would."""

    operation = Operation.FETCH
    source: Name


@dataclass(frozen=True, repr=False)
class FetchDefault(_InstructionBase):
    """An empty fetch refspec: fetch the configured default (`HEAD` unless changed)."""

    operation = Operation.FETCH
    source: Name


# Push


@dataclass(frozen=True, repr=False)
class Matching(_InstructionBase):
    """Push every local branch that has a branch of the same name on the remote."""

    operation = Operation.PUSH


@dataclass(frozen=True, repr=False)
class Delete(_InstructionBase):
    """Delete `destination` on the remote."""

    operation = Operation.PUSH
    destination: Name


@dataclass(frozen=True, repr=False)
class Update(_InstructionBase):
    """Update the remote `destination` with the local `source`."""

    operation = Operation.PUSH
    source: Name
    destination: Name


FetchInstruction = t.Union[Only, AndUpdate, Exclude, FetchDefault]
PushInstruction = t.Union[Matching, Delete, Update]
Instruction = t.Union[FetchInstruction, PushInstruction]

_Rule = t.Callable[..., Instruction]

# (operation, negative, has source, has destination)
_RULES: t.Dict[t.Tuple[Operation, bool, bool, bool], _Rule] = {
    (Operation.FETCH, False, False, False): lambda _s, _d, default: FetchDefault(
        default
    ),
    (Operation.FETCH, False, True, False): lambda src, _d, _: Only(src),
    (Operation.FETCH, False, True, True): lambda src, dst, _: AndUpdate(src, dst),
    (Operation.FETCH, True, True, False): lambda src, _d, _: Exclude(src),
    (Operation.PUSH, False, False, False): lambda _s, _d, _: Matching(),
    (Operation.PUSH, False, False, True): lambda _s, dst, _: Delete(dst),
    (Operation.PUSH, False, True, True): lambda src, dst, _: Update(src, dst),
    # pushing a name without a destination updates the same name on the remote
    (Operation.PUSH, False, True, False): lambda src, _d, _: Update(src, src),
}


def classify(
    refspec: "_RefSpecBase", *, fetch_default: Name = DEFAULT_FETCH_SOURCE
) -> Instruction:
    """Determine the :data:`Instruction` a parsed refspec stands for.

    :param fetch_default: The source to fetch for an empty fetch refspec.
    :raises Unclassifiable: if the refspec has no meaning for its operation.
    """
    negative = refspec.mode is Mode.NEGATIVE
    if negative and refspec.operation is Operation.PUSH:
        raise Unclassifiable(
            refspec.to_bytes(), "negative refspecs are not supported when pushing"
        )

    key = (
        refspec.operation,
        negative,
        refspec.source is not None,
        refspec.destination is not None,
    )
    rule = _RULES.get(key)
    if rule is None:
        raise AssertionError(
            "No instruction for {!r}: operation={}, negative={}, "
            "source={}, destination={}.".format(refspec, *key)
        )
    return rule(refspec.source, refspec.destination, fetch_default)
