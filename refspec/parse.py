import typing as t

from refspec.errors import IllegalColonPlacement
from refspec.errors import IncompatibleNegative
from refspec.errors import InvalidRefName
from refspec.errors import MalformedSigil
from refspec.errors import WildcardMismatch
from refspec.refname import is_valid_name
from refspec.refname import is_valid_revision
from refspec.refname import NameValidator
from refspec.spec import RefSpecRef
from refspec.types import Mode
from refspec.types import Operation

Input = t.Union[bytes, bytearray, memoryview, str]

_SIGILS = {
    ord("+"): Mode.FORCE,
    ord("^"): Mode.NEGATIVE,
    ord("!"): Mode.NEGATIVE,
}

_TAG_KEYWORD = b"tag "
_TAGS_PREFIX = b"refs/tags/"
_HEAD = memoryview(b"HEAD")


def parse(
    spec: Input,
    operation: Operation,
    *,
    validate_name: t.Optional[NameValidator] = None,
) -> RefSpecRef:
    """Parse `spec` as a refspec used for `operation`.

    The names of the returned refspec are views into `spec` wherever possible;
    `str` input is encoded as UTF-8 first.

    :param validate_name: Predicate deciding whether a reference name is
        well-formed. Defaults to :func:`refspec.refname.is_valid_name`.
    :raises ParseError: if `spec` is not a valid refspec.
    """
    if validate_name is None:
        validate_name = is_valid_name

    if isinstance(spec, str):
        data: t.Union[bytes, bytearray] = spec.encode()
    elif isinstance(spec, memoryview):
        data = spec.tobytes()
    else:
        data = spec
    view = memoryview(data).toreadonly()

    if not data:
        return RefSpecRef(Mode.NORMAL, operation)

    mode = _SIGILS.get(data[0], Mode.NORMAL)
    start = 0 if mode is Mode.NORMAL else 1
    if start and start < len(data) and data[start] in _SIGILS:
        raise MalformedSigil(data, "only one of '+', '^' or '!' may be given")

    if start == len(data):
        if mode is Mode.NEGATIVE:
            raise IncompatibleNegative(data, "negative refspecs need a source")
        return RefSpecRef(mode, operation)

    if data.startswith(_TAG_KEYWORD, start):
        return _parse_tag(
            data, start + len(_TAG_KEYWORD), mode, operation, validate_name
        )

    colon = data.find(b":", start)
    if colon == -1:
        source: t.Optional[memoryview] = view[start:]
        destination: t.Optional[memoryview] = None
    else:
        if mode is Mode.NEGATIVE:
            raise IncompatibleNegative(
                data, "negative refspecs cannot have a destination"
            )
        if data.find(b":", colon + 1) != -1:
            raise IllegalColonPlacement(
                data, "only one ':' may separate source and destination"
            )
        source = view[start:colon] or None
        destination = view[colon + 1 :] or None
        if source is None and destination is None:
            raise IllegalColonPlacement(data, "source and destination are both empty")
        if destination is None and operation is Operation.PUSH:
            raise IllegalColonPlacement(data, "cannot push to an empty destination")
        if source is None and operation is Operation.FETCH:
            source = _HEAD

    if source == b"@":
        source = _HEAD

    _check_wildcards(data, source, destination, mode, operation)

    if source is not None and source is not _HEAD:
        allow_revision = operation is Operation.PUSH and destination is not None
        name = source.tobytes()
        if not (
            validate_name(name)
            or (allow_revision and is_valid_revision(name, validate_name))
        ):
            raise InvalidRefName(data, f"invalid source '{_show(name)}'")
    if destination is not None and not validate_name(destination.tobytes()):
        raise InvalidRefName(
            data, f"invalid destination '{_show(destination.tobytes())}'"
        )

    return RefSpecRef(mode, operation, source, destination)


def _parse_tag(
    data: t.Union[bytes, bytearray],
    start: int,
    mode: Mode,
    operation: Operation,
    validate_name: NameValidator,
):
    if mode is Mode.NEGATIVE:
        raise IncompatibleNegative(data, "the 'tag' shorthand cannot be negative")

    tag = bytes(data[start:])
    name = _TAGS_PREFIX + tag
    if not tag or b"*" in tag or b":" in tag or not validate_name(name):
        raise InvalidRefName(data, f"invalid tag name '{_show(tag)}'")

    # the expanded name does not exist in the input, so it has to be allocated
    expanded = memoryview(name)
    return RefSpecRef(mode, operation, expanded, expanded)


def _check_wildcards(
    data: t.Union[bytes, bytearray],
    source: t.Optional[memoryview],
    destination: t.Optional[memoryview],
    mode: Mode,
    operation: Operation,
):
    src_count = 0 if source is None else source.tobytes().count(b"*")
    dst_count = 0 if destination is None else destination.tobytes().count(b"*")
    if src_count > 1 or dst_count > 1:
        raise WildcardMismatch(data, "patterns may contain only one '*'")

    if destination is not None:
        if src_count != dst_count:
            raise WildcardMismatch(
                data, "source and destination must both be patterns, or neither"
            )
    elif src_count and operation is Operation.FETCH and mode is not Mode.NEGATIVE:
        raise WildcardMismatch(data, "fetching a pattern requires a destination")


def _show(name: bytes):
    return name.decode("utf-8", "replace")
