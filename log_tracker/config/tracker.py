import logging
from os import PathLike
from pathlib import Path
from typing import ClassVar, Self

import yaml
from pydantic import Field, PrivateAttr
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .env import LOG_TRACKER_ENV_PREFIX
from log_tracker.common.exceptions import ConfigurationError, FileNotFoundError

logger = logging.getLogger(__name__)


class TrackerConfig(BaseSettings):
    """Settings of a log-tracker invocation.

    Values come from, in increasing priority: defaults, ``LOG_TRACKER_*``
    environment variables, the config file and command line flags.
    """

    DEFAULT_PATH: ClassVar[Path] = Path(".log-tracker.yaml")

    model_config = SettingsConfigDict(env_prefix=LOG_TRACKER_ENV_PREFIX)

    filepath: Path | None = Field(default=None)
    number: int = Field(default=10, ge=0)
    follow: bool = Field(default=False)
    buffer_size: int = Field(default=0, ge=0)
    prefix: bool = Field(default=False)

    _path: Path | None = PrivateAttr(default=None)

    @property
    def path(self) -> Path | None:
        """The config file the values were read from, if any."""
        return self._path

    @classmethod
    def from_dict(cls, data: dict, path: Path | None = None) -> Self:
        try:
            config = cls(**{str(key).replace("-", "_"): value for key, value in data.items()})
        except PydanticValidationError as e:
            source = f"config file '{path}'" if path else "configuration"
            raise ConfigurationError(f"invalid {source}") from e
        config._path = path
        return config

    @classmethod
    def load(cls, path: str | PathLike | None = None) -> Self:
        """Load the config from ``path``, or from the default file when it exists.

        Raises:
            FileNotFoundError: an explicitly given config file does not exist
            ConfigurationError: the file is not valid YAML or holds invalid values
        """
        if path is None:
            if not cls.DEFAULT_PATH.exists():
                return cls.from_dict({})
            path = cls.DEFAULT_PATH
        path = Path(path)

        if not path.exists():
            raise FileNotFoundError(f"config file '{path}' not found")

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"failed to parse config file '{path}'") from e

        match data:
            case None:
                data = {}
            case dict():
                pass
            case _:
                raise ConfigurationError(f"config file '{path}' should contain a mapping")

        config = cls.from_dict(data, path)
        logger.info("Using config file: %s", path)
        return config

    def merge(self, **overrides) -> Self:
        """Return a copy with every override that is not None applied."""
        updates = {key: value for key, value in overrides.items() if value is not None}
        return type(self).from_dict({**self.model_dump(), **updates}, self._path)
