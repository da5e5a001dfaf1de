"""Unit tests for AssistantConfig."""

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from sponsor_assistant.client.config import (
    DEFAULT_BASE_URL,
    AssistantConfig,
    get_assistant_config,
)


class TestAssistantConfig:
    """Tests for AssistantConfig validation."""

    def test_explicit_values(self) -> None:
        """Config accepts explicit URL and timeout."""
        config = AssistantConfig(base_url="https://assistant.example.com/", timeout=10)

        assert config.base_url == "https://assistant.example.com/"
        assert config.timeout == 10.0

    def test_base_url_gets_trailing_slash(self) -> None:
        """Base URL is normalised so relative paths resolve under it."""
        config = AssistantConfig(base_url="  http://localhost:8080/api  ")

        assert config.base_url == "http://localhost:8080/api/"

    def test_rejects_non_http_url(self) -> None:
        """Base URL must use http or https."""
        with pytest.raises(ValidationError) as exc_info:
            AssistantConfig(base_url="ftp://example.com")

        assert "ASSISTANT_BASE_URL" in str(exc_info.value)

    def test_rejects_non_positive_timeout(self) -> None:
        """Timeout must be greater than zero."""
        with pytest.raises(ValidationError) as exc_info:
            AssistantConfig(timeout=0)

        assert "timeout" in str(exc_info.value).lower()

    def test_timeout_none_disables(self) -> None:
        """None is accepted and means no timeout."""
        assert AssistantConfig(timeout=None).timeout is None


class TestGetAssistantConfig:
    """Tests for environment loading."""

    def test_defaults_without_env(self) -> None:
        """Without env vars the hosted backend and no timeout are used."""
        with patch.dict("os.environ", {"ASSISTANT_BASE_URL": "", "ASSISTANT_TIMEOUT": ""}):
            config = get_assistant_config()

        assert config.base_url == DEFAULT_BASE_URL
        assert config.timeout is None

    def test_reads_environment(self) -> None:
        """URL and timeout come from the environment and are validated."""
        env = {"ASSISTANT_BASE_URL": "http://localhost:9000", "ASSISTANT_TIMEOUT": "12.5"}
        with patch.dict("os.environ", env):
            config = get_assistant_config()

        assert config.base_url == "http://localhost:9000/"
        assert config.timeout == 12.5

    def test_invalid_environment_fails(self) -> None:
        """A malformed URL in the environment raises at load time."""
        with (
            patch.dict("os.environ", {"ASSISTANT_BASE_URL": "localhost:9000"}),
            pytest.raises(ValidationError),
        ):
            get_assistant_config()
