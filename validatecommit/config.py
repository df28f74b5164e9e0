"""Configuration management for validate-commit.

Only presentation and logging are configurable; the commit rules are fixed.
"""
from pathlib import Path
from typing import Optional
from pydantic import BaseModel, Field, field_validator
import tomli
import tomli_w
import os
import re

DEFAULT_CONFIG_FILENAME = ".validatecommit.toml"
CONFIG_SECTION = "validatecommit"
COLOR_CHOICES = ("auto", "always", "never")

class Config(BaseModel):
    """Configuration settings for validate-commit.

    Values come from the config file, then ``VALIDATE_COMMIT_*`` environment
    variables, then command line arguments. Environment variables also take
    precedence over keyword arguments passed to ``Config(...)`` directly.
    Invalid environment values are ignored with a warning.
    """

    color: str = Field(
        default="auto",
        description="When to colorize diagnostics (auto, always or never)"
    )

    verbose: bool = Field(
        default=False,
        description="Also report accepted and skipped messages"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Path of a file that every validation outcome is appended to"
    )

    @field_validator("color")
    @classmethod
    def _check_color(cls, value: str) -> str:
        value = value.lower()
        if value not in COLOR_CHOICES:
            raise ValueError(f"color must be one of {', '.join(COLOR_CHOICES)}")
        return value

    @staticmethod
    def _sanitize_string(value: str) -> str:
        """Strip control characters and surrounding whitespace."""
        if not value:
            return value
        value = re.sub(r'[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]', '', value)
        return value[:1000].strip()

    @staticmethod
    def _is_safe_path(path: str) -> bool:
        """Check if a path is safe (no path traversal)."""
        if not path:
            return False

        if '..' in path or path.startswith('/') or '\\' in path:
            return False

        if os.path.isabs(path):
            return False

        return True

    @classmethod
    def load(cls, repo_path: Path) -> 'Config':
        """Load configuration from the config file.

        Args:
            repo_path: Directory holding the config file

        Returns:
            Config: Configuration object with values from file or defaults
        """
        config_path = Path(repo_path) / DEFAULT_CONFIG_FILENAME

        if not config_path.exists():
            return cls()

        try:
            with config_path.open('rb') as f:
                config_data = tomli.load(f)

            section = dict(config_data.get(CONFIG_SECTION, {}))
            for key in ('color', 'log_file'):
                if isinstance(section.get(key), str):
                    section[key] = cls._sanitize_string(section[key])

            if section.get('log_file') and not cls._is_safe_path(section['log_file']):
                print(f"Warning: Unsafe log file path '{section['log_file']}', ignoring it")
                section['log_file'] = None

            return cls(**section)
        except Exception as e:
            # If there's any error reading the config, use defaults
            print(f"Warning: Error reading config file: {e}")
            return cls()

    def save(self, repo_path: Path) -> None:
        """Save configuration to the config file.

        Args:
            repo_path: Directory to write the config file to
        """
        config_path = Path(repo_path) / DEFAULT_CONFIG_FILENAME
        config_dict = {k: v for k, v in self.model_dump().items() if v is not None}

        with config_path.open('wb') as f:
            tomli_w.dump({CONFIG_SECTION: config_dict}, f)

    def get_log_file(self) -> Optional[Path]:
        """Return the configured log file, or None if logging is disabled."""
        if self.log_file and self._is_safe_path(self.log_file):
            return Path(self.log_file)
        return None

    def __init__(self, **data):
        """Initialize config with environment variable support."""
        env_data = {}

        env_mapping = {
            'VALIDATE_COMMIT_COLOR': 'color',
            'VALIDATE_COMMIT_VERBOSE': 'verbose',
            'VALIDATE_COMMIT_LOG_FILE': 'log_file',
        }

        for env_var, field_name in env_mapping.items():
            if env_var in os.environ:
                value = self._sanitize_string(os.environ[env_var])
                if field_name == 'verbose':
                    value = value.lower() in ['true', '1', 'yes', 'on']
                elif field_name == 'color' and value.lower() not in COLOR_CHOICES:
                    print(f"Warning: Invalid {env_var} '{value}', ignoring it")
                    continue
                env_data[field_name] = value

        merged_data = {**data, **env_data}

        super().__init__(**merged_data)
