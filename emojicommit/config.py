"""Configuration management for emoji-commit."""
from pathlib import Path
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field
import tomli
import tomli_w
import os
import re

DEFAULT_CONFIG_FILENAME = ".emojicommit.toml"
DEFAULT_EDITOR = "vi"
EDITOR_ENV_VARS = ("EMOJI_COMMIT_EDITOR", "VISUAL", "EDITOR")

STRING_FIELDS = ['editor', 'git_command', 'log_file']
BOOLEAN_FIELDS = ['always_log']


class Config(BaseModel):
    """Configuration settings for emoji-commit.

    Every option can be set in the config file or through environment
    variables; command line arguments override both.
    """

    editor: Optional[str] = Field(
        default=None,
        description="Editor command for rebase todo lists, hunk edits, merge messages and Ctrl-E"
    )

    git_command: str = Field(
        default="git",
        description="Git executable to re-invoke when no arguments are given"
    )

    always_log: bool = Field(
        default=False,
        description="Whether to always generate log files"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Path to log file (if not using automatic log file generation)"
    )

    @staticmethod
    def _sanitize_string(value: str) -> str:
        """Strip control characters and cap the length of a string setting."""
        if not value:
            return value

        value = re.sub(r'[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]', '', value)

        if len(value) > 1000:
            value = value[:1000]

        return value.strip()

    @staticmethod
    def _is_safe_path(path: str) -> bool:
        """Check if a path is safe (relative, no path traversal)."""
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
            repo_path: Path to the git repository

        Returns:
            Config: Configuration object with values from file or defaults
        """
        config_path = repo_path / DEFAULT_CONFIG_FILENAME

        if not config_path.exists():
            return cls()

        try:
            with config_path.open('rb') as f:
                config_data = tomli.load(f)

            for key in STRING_FIELDS:
                if key in config_data and isinstance(config_data[key], str):
                    config_data[key] = cls._sanitize_string(config_data[key])

            if config_data.get('log_file') and not cls._is_safe_path(config_data['log_file']):
                print(f"Warning: Unsafe log file path '{config_data['log_file']}', using default")
                config_data['log_file'] = None

            return cls(**config_data)
        except Exception as e:
            # If there's any error reading the config, use defaults
            print(f"Warning: Error reading config file: {e}")
            return cls()

    def save(self, repo_path: Path) -> None:
        """Save configuration to the config file.

        Args:
            repo_path: Path to the git repository
        """
        config_path = repo_path / DEFAULT_CONFIG_FILENAME

        try:
            config_dict = {k: v for k, v in self.model_dump().items() if v is not None}

            if config_dict.get('log_file') and not self._is_safe_path(config_dict['log_file']):
                print(f"Warning: Unsafe log file path '{config_dict['log_file']}', not saving")
                del config_dict['log_file']

            with config_path.open('wb') as f:
                tomli_w.dump(config_dict, f)
        except OSError as e:
            print(f"Error saving config file: {e}")

    def get_log_file(self) -> Optional[Path]:
        """Get the path to the log file.

        If always_log is True, generates a timestamped log file name.
        Otherwise, returns the configured log_file path if set.
        """
        if self.always_log:
            timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
            return Path(f"emoji_commit-{timestamp}.log")
        elif self.log_file:
            if self._is_safe_path(self.log_file):
                return Path(self.log_file)
            print(f"Warning: Unsafe log file path '{self.log_file}', using default")
            return None
        return None

    def get_editor(self) -> str:
        """Resolve the external editor command.

        The configured editor wins, then EMOJI_COMMIT_EDITOR, VISUAL and
        EDITOR, then ``vi``.
        """
        if self.editor:
            return self.editor
        for env_var in EDITOR_ENV_VARS:
            value = os.environ.get(env_var)
            if value:
                return value
        return DEFAULT_EDITOR

    def __init__(self, **data):
        """Initialize config with environment variable support and sanitization."""
        env_data = {}

        env_mapping = {
            'EMOJI_COMMIT_GIT_COMMAND': 'git_command',
            'EMOJI_COMMIT_ALWAYS_LOG': 'always_log',
            'EMOJI_COMMIT_LOG_FILE': 'log_file',
        }

        for env_var, field_name in env_mapping.items():
            if env_var in os.environ:
                value = os.environ[env_var]

                if field_name in STRING_FIELDS:
                    value = self._sanitize_string(value)

                if field_name in BOOLEAN_FIELDS:
                    value = value.lower() in ['true', '1', 'yes', 'on']

                env_data[field_name] = value

        merged_data = {**env_data, **data}

        super().__init__(**merged_data)
