import logging
import os
import typing as t
from dataclasses import dataclass
from dataclasses import fields
from dataclasses import is_dataclass
from dataclasses import MISSING

import yaml
from click import ClickException
from click import make_pass_decorator
from platformdirs import PlatformDirs

from refspec.errors import EmptyFileError
from refspec.errors import ExceptionCount
from refspec.refname import is_valid_name
from refspec.types import Operation

logger = logging.getLogger(__name__)

T = t.TypeVar("T")

dirs = PlatformDirs("refspec", False)
CONFIG_DIR = dirs.user_config_dir

CONFIG_FILE = os.path.join(CONFIG_DIR, "config.yaml")


def get_config_file():
    return os.environ.get("REFSPEC_CONFIG", None) or CONFIG_FILE


@dataclass(frozen=True)
class Config:
    """The refspec configuration file uses the YAML format."""

    fetch_default: str = "HEAD"
    """The reference fetched by an empty fetch refspec.

    git fetches the remote `HEAD` in this case, which usually points to the
    default branch of the remote.
    """

    default_operation: str = "fetch"
    """Whether refspecs are read as `fetch` or `push` refspecs when neither
    `--fetch` nor `--push` is given on the commandline.
    """

    @property
    def operation(self):
        return Operation(self.default_operation)

    @property
    def fetch_default_name(self):
        return self.fetch_default.encode()


def read_yaml(path: str, type: t.Type[T]) -> T:
    with open(path) as file:
        data = load_yaml(file, type)
    if not data:
        raise EmptyFileError(path)
    return data


def load_yaml(document: t.Any, type: t.Type[T]) -> t.Optional[T]:
    data: t.Dict[str, t.Any] = yaml.safe_load(document)
    if not data:
        return None

    return dataclass_fromdict(data, type)


def _convert_value(key: str, value: t.Any, field_type: t.Any) -> t.Tuple[t.Any, int]:
    """Check `value` against the annotation of `key`, building nested dataclasses.

    Only the base type is checked, so `List[str]` is checked as `list`.
    Returns the converted value and the number of errors logged.
    """
    expected = t.get_origin(field_type) or field_type
    if expected is t.Union:  # Optional
        expected = t.get_args(field_type)
    if isinstance(value, expected):
        return value, 0

    if not (isinstance(field_type, type) and is_dataclass(field_type)):
        logger.error(f"Invalid value for key '{key}': '{value}'.")
        return value, 1
    if not isinstance(value, dict):
        logger.error(f"Expected object for key '{key}'.")
        return value, 1
    try:
        return dataclass_fromdict(value, field_type), 0
    except ExceptionCount as e:
        return value, e.count


def dataclass_fromdict(data: t.Dict[str, t.Any], field_type: t.Type[T]) -> T:
    """Build `field_type` from `data`, logging every problem before giving up.

    :raises ExceptionCount: with the number of errors logged.
    """
    type_fields = {f.name: f for f in fields(field_type) if f.init}
    values: t.Dict[str, t.Any] = {}
    errors = 0
    for key, value in data.items():
        if key not in type_fields:
            logger.error(f"Unknown key: '{key}'.")
            errors += 1
            continue
        values[key], count = _convert_value(key, value, type_fields[key].type)
        errors += count
    if errors:
        raise ExceptionCount(errors)

    missing = [
        name
        for name, f in type_fields.items()
        if name not in values and f.default is MISSING and f.default_factory is MISSING
    ]
    for name in missing:
        logger.error(f"Missing required key: '{name}'")
    if missing:
        raise ExceptionCount(len(missing))
    return field_type(**values)


def validate_config(config: Config):
    """Check the values of a :class:`Config` that its types cannot express."""
    errors = 0
    if config.default_operation not in {op.value for op in Operation}:
        logger.error(
            f"Invalid value for key 'default_operation': '{config.default_operation}'"
            " (expected 'fetch' or 'push')."
        )
        errors += 1
    if not is_valid_name(config.fetch_default_name) or "*" in config.fetch_default:
        logger.error(
            f"Invalid value for key 'fetch_default': '{config.fetch_default}'"
            " (expected a reference name)."
        )
        errors += 1
    if errors:
        raise ExceptionCount(errors)


def load_config(path: t.Optional[str] = None) -> Config:
    path = path or get_config_file()
    try:
        config = read_yaml(path, Config)
        validate_config(config)
        logger.debug(f"User config loaded from '{path}'.")
    except (FileNotFoundError, EmptyFileError):
        config = Config()
    except ExceptionCount as e:
        raise ClickException(
            f"{e.count} error(s) were encountered while loading config."
        )
    except yaml.error.YAMLError as e:
        raise ClickException(str(e))

    return config


pass_config = make_pass_decorator(Config, ensure=True)
