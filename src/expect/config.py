from __future__ import annotations

from pathlib import Path

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, Field, field_validator


class ExpectConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    max_repr_length: int | None = Field(default=None, ge=8)
    debug_file: str | None = None
    verbose: bool = False

    @field_validator("debug_file")
    @classmethod
    def expand_env_variables(cls, v: str | None) -> str | None:
        """Expand ${VAR} references, failing on unset variables without defaults."""
        if v is None:
            return v
        try:
            return expandvars(v, nounset=True)
        except Exception as e:
            raise ValueError(
                f"debug_file '{v}' references a missing environment variable: {e}"
            ) from e


_active = ExpectConfig()


def load_config(path: Path | str) -> ExpectConfig:
    """Load and validate expect settings from a YAML file."""
    path = Path(path)
    config_dir = path.parent.resolve()

    with open(path) as f:
        raw = yaml.safe_load(f)

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"{path} must contain a mapping of settings")

    config = ExpectConfig(**raw)

    # Resolve a relative debug_file against the config file location
    if config.debug_file is not None:
        debug_path = Path(config.debug_file)
        if not debug_path.is_absolute():
            config.debug_file = str((config_dir / debug_path).resolve())

    return config


def configure(config: ExpectConfig | Path | str | None = None) -> ExpectConfig:
    """Install *config* process-wide and return it.

    Accepts a loaded config, a path to a YAML file, or None to restore the
    defaults. When ``debug_file`` is set the ``expect`` logger is pointed at
    it (and at stderr too when ``verbose``); otherwise the handlers of any
    earlier configuration are closed and removed.
    """
    from expect.verbose import reset_logger, setup_logger

    global _active

    if config is None:
        config = ExpectConfig()
    elif not isinstance(config, ExpectConfig):
        config = load_config(config)

    if config.debug_file is not None:
        setup_logger(Path(config.debug_file), verbose=config.verbose)
    else:
        reset_logger()

    _active = config
    return config


def current_config() -> ExpectConfig:
    return _active
