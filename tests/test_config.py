import pytest

from git_suggest_commit.config import SuggestOptions, load_options, resolve_api_key
from git_suggest_commit.errors import ConfigError


def test_api_key_from_environment():
    assert resolve_api_key("openai", environ={"OPENAI_API_KEY": "sk-env"}) == "sk-env"
    assert resolve_api_key("deepseek", environ={"DEEPSEEK_API_KEY": "ds-env"}) == "ds-env"


def test_explicit_api_key_wins():
    assert resolve_api_key("openai", "sk-cli", environ={"OPENAI_API_KEY": "sk-env"}) == "sk-cli"


def test_missing_api_key_names_the_variable():
    with pytest.raises(ConfigError, match="OPENAI_API_KEY"):
        resolve_api_key("openai", environ={})
    with pytest.raises(ConfigError, match="DEEPSEEK_API_KEY"):
        resolve_api_key("deepseek", environ={"OPENAI_API_KEY": "sk-env"})


def test_empty_api_key_counts_as_missing():
    with pytest.raises(ConfigError):
        resolve_api_key("openai", environ={"OPENAI_API_KEY": ""})


def test_ollama_needs_no_key():
    assert resolve_api_key("ollama", environ={}) is None


def test_reads_os_environ_by_default(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-process")
    assert resolve_api_key("openai") == "sk-process"


def test_load_options():
    options = load_options(
        provider="OpenAI",
        model="gpt-4o-mini",
        prompt="Be terse.",
        count=3,
        amend=False,
        environ={"OPENAI_API_KEY": "sk-env"},
    )
    assert options == SuggestOptions(
        provider="openai",
        api_key="sk-env",
        model="gpt-4o-mini",
        prompt="Be terse.",
        count=3,
        amend=False,
    )


def test_load_options_rejects_bad_count():
    with pytest.raises(ConfigError, match="at least 1"):
        load_options(count=0, environ={"OPENAI_API_KEY": "sk-env"})


def test_load_options_rejects_unknown_provider():
    with pytest.raises(ConfigError, match="Unknown provider"):
        load_options(provider="bard", environ={})


def test_load_options_fails_fast_without_key():
    with pytest.raises(ConfigError):
        load_options(provider="deepseek", environ={})
