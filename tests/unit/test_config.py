"""
Unit tests for configuration management.
"""

import pytest
from unittest.mock import patch
import os


def test_settings_loads_from_environment():
    """Test that settings can be loaded from environment variables."""
    with patch.dict(os.environ, {
        'PROMPT_DIR': '/var/run/prompts',
        'PROMPT_FILENAME': 'prompt.txt',
        'GITHUB_SERVER_URL': 'https://ghe.example.com',
        'GITHUB_ENV': '/home/runner/work/_temp/_runner_file_commands/set_env',
        'LOG_LEVEL': 'DEBUG',
    }):
        from prompt_builder.config import Settings
        settings = Settings()

        assert settings.prompt_dir == '/var/run/prompts'
        assert settings.prompt_filename == 'prompt.txt'
        assert settings.github_server_url == 'https://ghe.example.com'
        assert settings.github_env == '/home/runner/work/_temp/_runner_file_commands/set_env'
        assert settings.log_level == 'DEBUG'


def test_settings_has_default_values():
    """Test that settings have appropriate default values."""
    with patch.dict(os.environ, {}, clear=True):
        from prompt_builder.config import Settings
        settings = Settings(_env_file=None)

        assert settings.prompt_dir == '/tmp/claude-prompts'
        assert settings.prompt_filename == 'claude-prompt.txt'
        assert settings.github_server_url == 'https://github.com'
        assert settings.github_env is None
        assert settings.log_level == 'INFO'


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
