"""Configuration loading from YAML, environment and action inputs.

Action inputs follow the GitHub Actions convention: each input ``foo-bar``
arrives as env ``INPUT_FOO-BAR`` (the underscore spelling is accepted too).
The token is taken from the input, else from ``GITHUB_TOKEN`` or the file
named by ``GITHUB_TOKEN_FILE`` (Docker secrets). Never put real tokens in
config files committed to the repo.
"""

import os
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigError(Exception):
    """Raised when a required input is missing or malformed."""

    pass


# Injected by load_config / load_inputs so secrets can be read from env or file
_current_env: dict[str, str] = {}


def _read_secret(env_key: str, file_env_key: str) -> str | None:
    """Read secret from env var or from file path in env (e.g. Docker
    secrets)."""
    value = _current_env.get(env_key)
    if value:
        return value.strip()
    file_path = _current_env.get(file_env_key)
    if file_path:
        return Path(file_path).read_text().strip()
    return None


class GitHubConfig(BaseSettings):
    """GitHub API settings and runner-provided paths."""

    model_config = SettingsConfigDict(env_prefix="GITHUB_", extra="ignore")

    token: str | None = Field(default=None, description="PAT or workflow token; use env or secret file")
    api_url: str = Field(default="https://api.github.com", description="API base URL (GHES: <server>/api/v3)")
    repository: str | None = Field(default=None, description="Current repository owner/repo")
    event_path: str | None = Field(default=None, description="Path to the triggering event payload JSON")
    output: str | None = Field(default=None, description="Path to the step outputs file")


class LoggingConfig(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(env_prefix="LOGGING_", extra="ignore")

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )


class AppConfig(BaseSettings):
    """Root application config from YAML + env."""

    model_config = SettingsConfigDict(extra="ignore")

    github: GitHubConfig = Field(default_factory=GitHubConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def github_token_resolved(self) -> str | None:
        """Resolve GitHub token from config, env or Docker secret file."""
        t = self.github.token
        if t and not t.startswith("${"):
            return t
        return _read_secret("GITHUB_TOKEN", "GITHUB_TOKEN_FILE")


class ActionInputs(BaseModel):
    """Inputs of a single run; empty string means "not given"."""

    message: str = ""
    repository: str = ""
    token: str = ""
    message_id: str = ""
    issue_number: str = ""
    pr_number: str = ""

    def require_message(self) -> str:
        if not self.message:
            raise ConfigError("Input required and not supplied: message")
        return self.message

    def require_token(self, config: AppConfig | None = None) -> str:
        """Return the input token, falling back to the configured one."""
        token = self.token or (config.github_token_resolved if config else None)
        if not token:
            raise ConfigError("Input required and not supplied: token")
        return token


INPUT_NAMES = ("message", "repository", "token", "message-id", "issue-number", "pr-number")


def _input_from_env(env: Mapping[str, str], name: str) -> str:
    """Read ``INPUT_<NAME>`` the way the Actions runner sets it."""
    upper = name.upper()
    for key in (f"INPUT_{upper}", f"INPUT_{upper.replace('-', '_')}"):
        value = env.get(key)
        if value is not None:
            return value.strip()
    return ""


def load_inputs(
    env: Mapping[str, str] | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> ActionInputs:
    """Build ActionInputs from ``INPUT_*`` env, then apply non-empty
    overrides (e.g. CLI flags)."""
    global _current_env
    env = dict(os.environ) if env is None else dict(env)
    _current_env = env

    raw = {name.replace("-", "_"): _input_from_env(env, name) for name in INPUT_NAMES}
    for key, value in (overrides or {}).items():
        if value is None or value == "":
            continue
        raw[key.replace("-", "_")] = str(value)
    return ActionInputs(**raw)


def _substitute_env(value: Any) -> Any:
    """Replace ${VAR} and $VAR in strings with the environment."""
    if isinstance(value, str):
        if value.startswith("${") and value.endswith("}"):
            key = value[2:-1].strip()
            return _current_env.get(key, value)
        # Simple $VAR
        if value.startswith("$") and not value.startswith("${"):
            key = value[1:].strip()
            return _current_env.get(key, value)
        return value
    if isinstance(value, dict):
        return {k: _substitute_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_substitute_env(v) for v in value]
    return value


def load_config(config_path: Path | None = None) -> AppConfig:
    """Load config from an optional YAML file and environment.

    Env (GITHUB_*, LOGGING_*) fills whatever the file leaves unset.
    """
    global _current_env

    _current_env = dict(os.environ)

    if config_path is None or not config_path.is_file():
        return AppConfig()

    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        raise ConfigError(f"Invalid config file {config_path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"Invalid config file {config_path}: expected a mapping")
    raw = _substitute_env(raw)

    sections = {}
    for name in ("github", "logging"):
        section = raw.get(name) or {}
        if not isinstance(section, dict):
            raise ConfigError(f"Invalid config file {config_path}: section {name!r} must be a mapping")
        sections[name] = section
    try:
        github = GitHubConfig(**sections["github"])
        logging = LoggingConfig(**sections["logging"])
    except ValidationError as e:
        raise ConfigError(f"Invalid config file {config_path}: {e}") from e
    return AppConfig(github=github, logging=logging)
