"""Settings loaded from ``config.toml`` with environment overrides."""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from atcoder_tester.domain.exceptions import ConfigError
from atcoder_tester.domain.models import Command, Home, Login, Url

DEFAULT_CONFIG_FILE = Path("config.toml")
CONFIG_ENV_VAR = "ATCODER_TESTER_CONFIG"


class UrlSettings(BaseModel):
    homepage: str = "https://atcoder.jp/home"
    login: str = "https://atcoder.jp/login"

    @property
    def homepage_url(self) -> Url[Home]:
        return Url(self.homepage)

    @property
    def login_url(self) -> Url[Login]:
        return Url(self.login)


class FileSettings(BaseModel):
    session_data: Path = Path(".atcoder/session.json")
    tasks_info: Path = Path(".atcoder/tasks_info.json")
    test: Path = Path("test")


class HttpSettings(BaseModel):
    timeout: float = 30.0
    impersonate: str = "chrome"
    max_response_bytes: int = 16 * 1024 * 1024


class CommandSettings(BaseModel):
    command: str
    args: list[str] = Field(default_factory=list)
    working_dir: Path | None = None

    def to_command(self) -> Command:
        return Command(command=self.command, args=list(self.args), working_dir=self.working_dir)


class LanguageSettings(BaseModel):
    execute: CommandSettings
    compile: CommandSettings | None = None
    # Seconds per test case; zero or negative disables the deadline.
    time_limit: float = 10.0

    @property
    def deadline(self) -> float | None:
        return self.time_limit if self.time_limit > 0 else None


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="ATCODER_TESTER_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    url: UrlSettings = Field(default_factory=UrlSettings)
    file: FileSettings = Field(default_factory=FileSettings)
    http: HttpSettings = Field(default_factory=HttpSettings)
    languages: dict[str, LanguageSettings] = Field(default_factory=dict)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Values read from the TOML file arrive as init kwargs.
        return (env_settings, init_settings)

    def language(self, name: str) -> LanguageSettings:
        try:
            return self.languages[name]
        except KeyError:
            raise ConfigError(f"Config of {name} Not Found in config.toml") from None


def resolve_config_path(config_path: Path | None = None) -> Path:
    if config_path is not None:
        return config_path
    return Path(os.environ.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_FILE)


def load_settings(config_path: Path | None = None) -> Settings:
    """Load settings; a missing config file leaves every default in place."""
    path = resolve_config_path(config_path)
    try:
        values = TomlConfigSettingsSource(Settings, toml_file=path)() if path.is_file() else {}
        return Settings(**values)
    except ValueError as e:
        raise ConfigError(f"Invalid config {path}: {e}") from e
