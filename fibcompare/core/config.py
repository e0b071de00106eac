# SPDX-License-Identifier: GPL-3.0-only
import logging
from pathlib import Path

from pydantic import Field, ValidationError, model_validator
from pydantic_core import ErrorDetails
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from fibcompare import APP_NAME
from fibcompare.core.errors import InvalidInput

log = logging.getLogger(__name__)
config = None

DEFAULT_CACHE_CAPACITY = 512


class Config(BaseSettings):
    """Singleton that provides default configuration for the application process."""

    model_config = SettingsConfigDict(extra="forbid", env_prefix="FIBCOMPARE_")

    # highest index the memoized implementation will store
    cache_capacity: int = Field(DEFAULT_CACHE_CAPACITY, ge=0)
    # plain recursion is only run for n below this limit, capped by upper_bound
    recursive_limit: int = Field(20, ge=0)
    # last index printed in the report (inclusive)
    upper_bound: int = Field(100, ge=0)

    @model_validator(mode="after")
    def _check_ranges(self) -> "Config":
        if self.upper_bound > self.cache_capacity:
            log.warning(
                "upper_bound %d is greater than cache_capacity %d, "
                "the cached column will report -1 past the capacity",
                self.upper_bound,
                self.cache_capacity,
            )
        return self

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Control allowed settings sources and priority.

        Priority (highest to lowest): init_settings (for programmatic/test overrides),
        environment variables, CLI config file.

        https://docs.pydantic.dev/2.11/concepts/pydantic_settings/#customise-settings-sources
        """
        return (
            init_settings,
            env_settings,
            YamlConfigSettingsSource(
                settings_cls
            ),  # The CLI config path from yaml_file in model_config
        )


def create_cli_config_class(config_path: Path) -> type[Config]:
    """Return a subclass of Config that uses the CLI YAML file input.

    This is necessary because the path of the YAML config file from the CLI is not known
    ahead of time: https://github.com/pydantic/pydantic-settings/issues/259
    """

    class CLIConfig(Config):
        """A subclass of Config that uses the CLI YAML file input."""

        model_config = SettingsConfigDict(
            extra="forbid", env_prefix="FIBCOMPARE_", yaml_file=config_path
        )

    return CLIConfig


def _present_config_error(validation_error: ValidationError) -> str:
    """Format validation errors for configuration sources"""
    errors = validation_error.errors()
    n_errors = len(errors)

    def show_error(error: ErrorDetails) -> str:
        location = " -> ".join(map(str, error["loc"])) or "config"
        message = error["msg"]
        return f"{location}: {message}"

    formatted_errors = "\n".join(show_error(e) for e in errors)

    return (
        f"{n_errors} validation error{'s' if n_errors > 1 else ''} in {APP_NAME.capitalize()} "
        f"configuration:\n{formatted_errors}\n\n"
        f"Configuration can be provided via:\n"
        f"  - CLI --config-file option\n"
        f"  - FIBCOMPARE_* environment variables"
    )


def get_config() -> Config:
    """Get the configuration singleton."""
    global config

    if not config:
        try:
            config = Config()
        except ValidationError as e:
            raise InvalidInput(_present_config_error(e)) from e

    return config


def set_config(path: Path) -> None:
    """Set global config variable using input from file."""
    global config
    # Workaround for https://github.com/pydantic/pydantic-settings/issues/259
    cli_config_class = create_cli_config_class(path)
    try:
        config = cli_config_class()
    except ValidationError as e:
        raise InvalidInput(_present_config_error(e)) from e
