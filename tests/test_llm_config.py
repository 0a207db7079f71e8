"""Tests for team_fit.llm_config module."""

import os
from unittest.mock import MagicMock, patch

import pytest

from team_fit.llm_config import (
    create_openrouter_llm,
    create_primary_llm,
    get_available_llms,
    get_default_llm,
    llm_timeout,
)


def _make_fake_llm(**kwargs):
    """Create a fake LLM object that records constructor args."""
    fake = MagicMock()
    fake.model = kwargs.get("model", "")
    fake.base_url = kwargs.get("base_url", "")
    fake.api_key = kwargs.get("api_key", "")
    return fake


# ---------------------------------------------------------------------------
# llm_timeout
# ---------------------------------------------------------------------------


class TestLlmTimeout:
    @patch.dict(os.environ, {}, clear=True)
    def test_defaults_to_sixty_seconds(self):
        assert llm_timeout() == 60.0

    @patch.dict(os.environ, {"TEAM_FIT_LLM_TIMEOUT": "30"})
    def test_reads_env_value(self):
        assert llm_timeout() == 30.0

    @patch.dict(os.environ, {"TEAM_FIT_LLM_TIMEOUT": "soon"})
    def test_invalid_value_uses_default(self):
        assert llm_timeout() == 60.0

    @patch.dict(os.environ, {"TEAM_FIT_LLM_TIMEOUT": "-5"})
    def test_non_positive_value_uses_default(self):
        assert llm_timeout() == 60.0


# ---------------------------------------------------------------------------
# create_primary_llm
# ---------------------------------------------------------------------------


class TestCreatePrimaryLlm:
    """Tests for create_primary_llm."""

    @patch("team_fit.llm_config.LLM", side_effect=_make_fake_llm)
    @patch.dict(os.environ, {
        "OPENAI_API_KEY": "test-key",
        "OPENAI_MODEL_NAME": "gpt-4o",
        "OPENAI_BASE_URL": "http://localhost:8045/v1",
    }, clear=True)
    def test_passes_generation_settings(self, mock_llm):
        llm = create_primary_llm()
        assert llm is not None
        mock_llm.assert_called_once_with(
            model="gpt-4o",
            api_key="test-key",
            temperature=0.7,
            max_tokens=2000,
            timeout=60.0,
            base_url="http://localhost:8045/v1",
        )

    @patch("team_fit.llm_config.LLM", side_effect=_make_fake_llm)
    @patch.dict(os.environ, {
        "OPENAI_API_KEY": "test-key",
        "OPENAI_MODEL_NAME": "gpt-4o",
        "TEAM_FIT_LLM_TIMEOUT": "15",
    }, clear=True)
    def test_works_without_base_url(self, mock_llm):
        create_primary_llm()
        kwargs = mock_llm.call_args.kwargs
        assert "base_url" not in kwargs
        assert kwargs["timeout"] == 15.0

    @patch.dict(os.environ, {
        "OPENAI_MODEL_NAME": "gpt-4o",
    }, clear=True)
    def test_raises_when_api_key_missing(self):
        with pytest.raises(ValueError, match="OPENAI_API_KEY"):
            create_primary_llm()

    @patch.dict(os.environ, {
        "OPENAI_API_KEY": "test-key",
    }, clear=True)
    def test_raises_when_model_name_missing(self):
        with pytest.raises(ValueError, match="OPENAI_MODEL_NAME"):
            create_primary_llm()


# ---------------------------------------------------------------------------
# create_openrouter_llm (mock LLM to avoid LiteLLM dependency)
# ---------------------------------------------------------------------------


class TestCreateOpenrouterLlm:
    """Tests for create_openrouter_llm."""

    @patch("team_fit.llm_config.LLM", side_effect=_make_fake_llm)
    @patch.dict(os.environ, {
        "OPENROUTER_API_KEY": "or-test-key",
        "OPENROUTER_MODEL_NAME": "openai/gpt-4o",
    })
    def test_returns_llm_when_configured(self, mock_llm):
        llm = create_openrouter_llm()
        assert llm is not None
        mock_llm.assert_called_once_with(
            model="openrouter/openai/gpt-4o",
            base_url="https://openrouter.ai/api/v1",
            api_key="or-test-key",
        )

    @patch("team_fit.llm_config.LLM", side_effect=_make_fake_llm)
    @patch.dict(os.environ, {
        "OPENROUTER_API_KEY": "or-test-key",
        "OPENROUTER_MODEL_NAME": "openrouter/openai/gpt-4o",
    })
    def test_does_not_double_prefix_openrouter(self, mock_llm):
        create_openrouter_llm()
        assert mock_llm.call_args.kwargs["model"] == "openrouter/openai/gpt-4o"

    @patch("team_fit.llm_config.LLM", side_effect=ImportError("Fallback to LiteLLM is not available"))
    @patch.dict(os.environ, {
        "OPENROUTER_API_KEY": "or-test-key",
        "OPENROUTER_MODEL_NAME": "openai/gpt-4o",
    })
    def test_returns_none_when_backend_unavailable(self, _mock_llm):
        assert create_openrouter_llm() is None

    @patch.dict(os.environ, {}, clear=True)
    def test_returns_none_when_not_configured(self):
        assert create_openrouter_llm() is None

    @patch.dict(os.environ, {
        "OPENROUTER_API_KEY": "or-test-key",
    }, clear=True)
    def test_returns_none_when_model_missing(self):
        assert create_openrouter_llm() is None


# ---------------------------------------------------------------------------
# get_available_llms / get_default_llm
# ---------------------------------------------------------------------------


class TestGetAvailableLlms:
    """Tests for get_available_llms."""

    @patch("team_fit.llm_config.LLM", side_effect=_make_fake_llm)
    @patch.dict(os.environ, {
        "OPENAI_API_KEY": "test-key",
        "OPENAI_MODEL_NAME": "gpt-4o",
        "OPENROUTER_API_KEY": "or-key",
        "OPENROUTER_MODEL_NAME": "openai/gpt-4o",
    })
    def test_returns_both_when_both_configured(self, _mock_llm):
        labels = [label for label, _ in get_available_llms()]
        assert labels == ["기본 모델", "OpenRouter"]

    @patch("team_fit.llm_config.LLM", side_effect=_make_fake_llm)
    @patch.dict(os.environ, {
        "OPENROUTER_API_KEY": "or-key",
        "OPENROUTER_MODEL_NAME": "openai/gpt-4o",
    }, clear=True)
    def test_returns_only_openrouter_when_primary_missing(self, _mock_llm):
        labels = [label for label, _ in get_available_llms()]
        assert labels == ["OpenRouter"]

    @patch.dict(os.environ, {}, clear=True)
    def test_returns_empty_when_nothing_configured(self):
        assert get_available_llms() == []

    @patch.dict(os.environ, {}, clear=True)
    def test_default_llm_none_when_nothing_configured(self):
        assert get_default_llm() is None

    @patch("team_fit.llm_config.LLM", side_effect=_make_fake_llm)
    @patch.dict(os.environ, {
        "OPENAI_API_KEY": "test-key",
        "OPENAI_MODEL_NAME": "gpt-4o",
        "OPENROUTER_API_KEY": "or-key",
        "OPENROUTER_MODEL_NAME": "openai/gpt-4o",
    })
    def test_default_llm_is_primary(self, _mock_llm):
        assert get_default_llm().model == "gpt-4o"
