import typing as t
from contextlib import contextmanager
from dataclasses import dataclass

import click
import pytest

from refspec import config
from refspec.types import Operation


@pytest.fixture
def exception_count():
    @contextmanager
    def context(count):
        with pytest.raises(config.ExceptionCount) as exc_info:
            yield exc_info
        assert exc_info.value.count == count

    yield context


@dataclass(frozen=True)
class Subclass:
    subprop1: int = 321
    default: t.Optional[int] = None


@dataclass
class ConfigType:
    prop1: str

    subclass: Subclass = Subclass()


def test_dataclass_fromdict():
    test_config = config.dataclass_fromdict(
        {
            "prop1": "test",
        },
        ConfigType,
    )
    assert test_config == ConfigType("test")


def test_dataclass_fromdict_nested():
    test_config = config.dataclass_fromdict(
        {
            "prop1": "test",
            "subclass": {"subprop1": 123},
        },
        ConfigType,
    )
    assert test_config == ConfigType("test", Subclass(123, None))


@pytest.mark.parametrize(
    ("input, expect"),
    [
        ({"unknown": "test"}, (1, "Unknown key")),
        ({"prop1": 123}, (1, "Invalid value")),
        ({"prop1": {"invalid": "object"}}, (1, "Invalid value")),
        ({"subclass": 123}, (1, "Expected object")),
        ({"subclass": {"unknown": "key"}}, (1, "Unknown key")),
        (
            {"prop1": None, "subclass": {"unknown": "key", "subprop1": "invalid"}},
            (3, ""),
        ),
        ({}, (1, "Missing required key")),
    ],
    ids=lambda v: v[1] or f"{v[0]} errors" if isinstance(v, tuple) else None,
)
def test_dataclass_fromdict_errors(exception_count, caplog, input, expect):
    expect_count, expect_msg = expect
    with exception_count(expect_count):
        config.dataclass_fromdict(input, ConfigType)
    assert expect_msg in caplog.text


# refspec config-specific tests


def test_empty_config():
    assert config.dataclass_fromdict(
        {}, config.Config
    ), "All fields must have default values"


def test_missing_config_file(isolated_config):
    assert not isolated_config.exists()
    assert config.load_config() == config.Config()


def test_empty_config_file(isolated_config):
    isolated_config.write_text("")
    assert config.load_config() == config.Config()


def test_load_config(isolated_config):
    isolated_config.write_text(
        """\
fetch_default: refs/heads/main
default_operation: push
"""
    )
    loaded = config.load_config()
    assert loaded.fetch_default_name == b"refs/heads/main"
    assert loaded.operation is Operation.PUSH


def test_load_config_path(tmp_path):
    path = tmp_path / "other.yaml"
    path.write_text("default_operation: push\n")
    assert config.load_config(str(path)).operation is Operation.PUSH


@pytest.mark.parametrize(
    ("contents", "expect"),
    [
        ("default_operation: sideways\n", "'default_operation'"),
        ("fetch_default: bad name\n", "'fetch_default'"),
        ("fetch_default: refs/heads/*\n", "'fetch_default'"),
        ("fetch_default: 12\n", "Invalid value"),
        ("unknown: value\n", "Unknown key"),
    ],
)
def test_load_config_errors(isolated_config, caplog, contents, expect):
    isolated_config.write_text(contents)
    with pytest.raises(click.ClickException) as exc_info:
        config.load_config()
    assert "1 error(s)" in exc_info.value.message
    assert expect in caplog.text


def test_load_config_yaml_error(isolated_config):
    isolated_config.write_text("fetch_default: [unclosed\n")
    with pytest.raises(click.ClickException):
        config.load_config()
