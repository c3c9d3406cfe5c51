import typing as t
from dataclasses import dataclass

from refspec.instruction import classify
from refspec.instruction import DEFAULT_FETCH_SOURCE
from refspec.instruction import Instruction
from refspec.refname import is_object_id
from refspec.types import Mode
from refspec.types import Operation

REFSPEC = "<REFSPEC>"
"""Describes how references on one repository map to references on another.

REFSPEC has the form ``[+|^|!][<src>][:<dst>]``:

* ``+`` allows non-fast-forward updates of the destination.
* ``^`` or ``!`` makes a negative refspec, excluding matching refs from
  the other refspecs. Negative refspecs cannot have a destination.
* ``<src>`` and ``<dst>`` are reference names. A single ``*`` turns them into
  patterns; both sides must then contain one.
* ``tag <name>`` is short for ``refs/tags/<name>:refs/tags/<name>``.
* An empty refspec fetches ``HEAD``, or pushes matching branches.
* ``:<dst>`` deletes ``<dst>`` when pushing.
"""

_SIGILS = {
    Mode.NORMAL: b"",
    Mode.FORCE: b"+",
    Mode.NEGATIVE: b"^",
}

_EXPANSION_RULES = (
    b"%s",
    b"refs/%s",
    b"refs/tags/%s",
    b"refs/heads/%s",
    b"refs/remotes/%s",
    b"refs/remotes/%s/HEAD",
)

Name = t.TypeVar("Name", bytes, memoryview)


class _RefSpecBase(t.Generic[Name]):
    """Behaviour shared between the borrowed and the owned refspec."""

    mode: Mode
    operation: Operation
    source: t.Optional[Name]
    destination: t.Optional[Name]

    def instruction(self, fetch_default=DEFAULT_FETCH_SOURCE) -> Instruction:
        """Classify this refspec, see :func:`refspec.instruction.classify`."""
        return classify(self, fetch_default=fetch_default)

    def allow_non_fast_forward(self):
        return self.mode is Mode.FORCE

    def to_bytes(self) -> bytes:
        """Serialize to the canonical refspec text, which parses to an equal refspec."""
        parts = [_SIGILS[self.mode], self.source or b""]
        if self.destination is not None:
            parts += [b":", self.destination]
        return b"".join(parts)

    def _remote_name(self) -> t.Optional[Name]:
        if self.mode is Mode.NEGATIVE:
            return None
        if self.operation is Operation.FETCH or self.destination is None:
            return self.source
        return self.destination

    def prefix(self) -> t.Optional[Name]:
        """The leading part of the remote-side name that matching refs must share.

        Suitable as a protocol v2 `ref-prefix` argument. Returns `None` if the name
        is not a full reference name (short names, object ids) or if there is no
        remote-side name at all.
        """
        name = self._remote_name()
        if name is None:
            return None
        raw = bytes(name)
        if raw != b"HEAD" and not raw.startswith(b"refs/"):
            return None
        star = raw.find(b"*")
        return name if star == -1 else name[:star]

    def expand_prefixes(self, out: t.List[bytes]) -> None:
        """Append all ref prefixes a remote must advertise for this refspec to `out`."""
        prefix = self.prefix()
        if prefix is not None:
            out.append(bytes(prefix))
            return
        name = self._remote_name()
        if name is None or is_object_id(bytes(name)):
            return
        out.extend(rule % bytes(name) for rule in _EXPANSION_RULES)

    def __str__(self):
        return self.to_bytes().decode("utf-8", "replace")

    def __repr__(self):
        return "{}(Mode.{}, Operation.{}, {!r}, {!r})".format(
            type(self).__name__,
            self.mode.name,
            self.operation.name,
            None if self.source is None else bytes(self.source),
            None if self.destination is None else bytes(self.destination),
        )


@dataclass(frozen=True, repr=False)
class RefSpecRef(_RefSpecBase[memoryview]):
    """A refspec whose names are views into the buffer it was parsed from.

    The views are read-only, and the buffer must not be modified while they are
    in use. Use
    :meth:`to_owned` to keep the refspec independently of it.
    """

    mode: Mode
    operation: Operation
    source: t.Optional[memoryview] = None
    destination: t.Optional[memoryview] = None

    def to_owned(self) -> "RefSpec":
        return RefSpec(
            self.mode,
            self.operation,
            None if self.source is None else self.source.tobytes(),
            None if self.destination is None else self.destination.tobytes(),
        )


@dataclass(frozen=True, repr=False)
class RefSpec(_RefSpecBase[bytes]):
    """A refspec that owns its names."""

    mode: Mode
    operation: Operation
    source: t.Optional[bytes] = None
    destination: t.Optional[bytes] = None

    def to_ref(self) -> RefSpecRef:
        return RefSpecRef(
            self.mode,
            self.operation,
            None if self.source is None else memoryview(self.source),
            None if self.destination is None else memoryview(self.destination),
        )
