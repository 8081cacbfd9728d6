"""Utility & helper functions."""

import logging
import os
import sys
from typing import Optional

from langchain.chat_models import init_chat_model
from langchain_core.language_models import BaseChatModel
from langchain_core.messages import BaseMessage

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_message_text(msg: BaseMessage) -> str:
    """Get the text content of a message."""
    content = msg.content
    if isinstance(content, str):
        return content
    elif isinstance(content, dict):
        return content.get("text", "")
    else:
        txts = [c if isinstance(c, str) else (c.get("text") or "") for c in content]
        return "".join(txts).strip()


def load_chat_model(fully_specified_name: str, temperature: Optional[float] = None) -> BaseChatModel:
    """Load a chat model from a fully specified name.

    Args:
        fully_specified_name (str): String in the format 'provider/model'.
        temperature: Optional sampling temperature forwarded to the provider.
    """
    if "/" not in fully_specified_name:
        raise ValueError(
            f"Model name must look like 'provider/model', got {fully_specified_name!r}"
        )
    provider, model = fully_specified_name.split("/", maxsplit=1)
    kwargs = {}
    if temperature is not None:
        kwargs["temperature"] = temperature
    return init_chat_model(model, model_provider=provider, **kwargs)


def setup_logging(level: Optional[int | str] = None) -> logging.Logger:
    """Configure the package logger with a single console handler.

    Args:
        level: Logging level; defaults to the LOG_LEVEL environment variable
            or WARNING.

    Returns:
        The configured ``role_cooperation`` logger
    """
    if level is None:
        level = os.environ.get("LOG_LEVEL", "WARNING").upper()

    logger = logging.getLogger("role_cooperation")
    logger.setLevel(level)
    logger.propagate = False

    # Clear existing handlers so repeated calls don't duplicate output
    logger.handlers = []

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console_handler)
    return logger
