"""Tests for configuration loading."""

import pytest

from role_cooperation.configuration import Configuration


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("OPENAI_SMART_MODEL", "TEMPERATURE", "RESPONSE_LANGUAGE"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    config = Configuration()
    assert config.model == "openai/gpt-4o"
    assert config.temperature == 0.0
    assert config.max_search_results == 3
    assert (config.min_tasks, config.max_tasks) == (3, 5)
    assert config.recursion_limit == 1000
    assert config.response_language == "English"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("OPENAI_SMART_MODEL", "anthropic/claude-3-5-sonnet-latest")
    monkeypatch.setenv("TEMPERATURE", "0.7")
    monkeypatch.setenv("RESPONSE_LANGUAGE", "Japanese")

    config = Configuration()

    assert config.model == "anthropic/claude-3-5-sonnet-latest"
    assert config.temperature == 0.7
    assert config.response_language == "Japanese"


def test_runnable_config_wins_over_environment(monkeypatch):
    monkeypatch.setenv("OPENAI_SMART_MODEL", "openai/gpt-4o")

    config = Configuration.from_runnable_config(
        {"configurable": {"model": "openai/gpt-4o-mini", "recursion_limit": 20, "thread_id": "x"}}
    )

    assert config.model == "openai/gpt-4o-mini"
    assert config.recursion_limit == 20


def test_from_context_outside_a_run_uses_defaults():
    assert Configuration.from_context() == Configuration()


@pytest.mark.parametrize(
    "kwargs",
    [{"min_tasks": 0}, {"min_tasks": 4, "max_tasks": 2}, {"recursion_limit": 0}],
)
def test_invalid_values_are_rejected(kwargs):
    with pytest.raises(ValueError):
        Configuration(**kwargs)
