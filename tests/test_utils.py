"""Tests for helper functions."""

import logging

import pytest
from langchain_core.messages import AIMessage

from role_cooperation.utils import get_message_text, load_chat_model, setup_logging


def test_get_message_text_handles_string_and_blocks():
    assert get_message_text(AIMessage(content="plain")) == "plain"
    assert get_message_text(AIMessage(content=["a", {"type": "text", "text": "b"}])) == "ab"


def test_load_chat_model_splits_provider(mocker):
    init = mocker.patch("role_cooperation.utils.init_chat_model")

    load_chat_model("openai/gpt-4o", temperature=0.2)

    init.assert_called_once_with("gpt-4o", model_provider="openai", temperature=0.2)


def test_load_chat_model_requires_provider():
    with pytest.raises(ValueError, match="provider/model"):
        load_chat_model("gpt-4o")


def test_setup_logging_is_idempotent(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "info")

    setup_logging()
    logger = setup_logging()

    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1
    assert logger.propagate is False
