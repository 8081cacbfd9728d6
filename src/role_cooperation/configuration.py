"""Define the configurable parameters for the role-based cooperation agent."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from typing import Annotated

from dotenv import load_dotenv
from langchain_core.runnables import RunnableConfig, ensure_config
from langgraph.config import get_config

# Load environment variables from .env file
load_dotenv()


def _env_float(name: str, default: float) -> float:
    value = os.environ.get(name)
    return float(value) if value else default


@dataclass(kw_only=True)
class Configuration:
    """The configuration for the role-based cooperation agent."""

    # LLM configuration
    model: Annotated[str, {"__template_metadata__": {"kind": "llm"}}] = field(
        default_factory=lambda: os.environ.get("OPENAI_SMART_MODEL", "openai/gpt-4o"),
        metadata={
            "description": "The language model used by every stage (provider/model_name)."
        },
    )

    temperature: float = field(
        default_factory=lambda: _env_float("TEMPERATURE", 0.0),
        metadata={
            "description": "Sampling temperature passed to the language model."
        },
    )

    # Planning configuration
    min_tasks: int = field(
        default=3,
        metadata={
            "description": "The minimum number of sub-tasks the query is split into."
        },
    )

    max_tasks: int = field(
        default=5,
        metadata={
            "description": "The maximum number of sub-tasks the query is split into."
        },
    )

    response_language: str = field(
        default_factory=lambda: os.environ.get("RESPONSE_LANGUAGE", "English"),
        metadata={
            "description": "The language the sub-tasks and the final report are written in."
        },
    )

    # Tool configuration
    max_search_results: int = field(
        default=3,
        metadata={
            "description": "The maximum number of search results returned per web search."
        },
    )

    # Execution configuration
    recursion_limit: int = field(
        default=1000,
        metadata={
            "description": "Maximum number of state transitions before the run is aborted. "
            "The cap includes the input step."
        },
    )

    def __post_init__(self) -> None:
        if self.min_tasks < 1 or self.max_tasks < self.min_tasks:
            raise ValueError(
                f"Invalid task bounds: min_tasks={self.min_tasks}, max_tasks={self.max_tasks}"
            )
        if self.recursion_limit < 1:
            raise ValueError(f"recursion_limit must be positive, got {self.recursion_limit}")

    @classmethod
    def from_runnable_config(cls, config: RunnableConfig | None = None) -> Configuration:
        """Create a Configuration instance from a RunnableConfig object."""
        config = ensure_config(config)
        configurable = config.get("configurable") or {}
        _fields = {f.name for f in fields(cls) if f.init}
        return cls(**{k: v for k, v in configurable.items() if k in _fields})

    @classmethod
    def from_context(cls) -> Configuration:
        """Create a Configuration instance from the active LangGraph run, if any."""
        try:
            config = get_config()
        except RuntimeError:
            config = None
        return cls.from_runnable_config(config)
