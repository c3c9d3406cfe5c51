import typing as t


def format_columns(data: t.Mapping[str, t.Any], prefix=""):
    """Align the values of `data` in a column after their keys."""
    if not data:
        return ""
    width = max(len(key) for key in data)
    return "\n".join(
        "{}{}\t{}".format(prefix, key.ljust(width), value)
        for key, value in data.items()
    )


def format_name(name: t.Optional[t.Union[bytes, memoryview]], default="-"):
    """Decode a reference name for display."""
    if name is None:
        return default
    return bytes(name).decode("utf-8", "replace")
