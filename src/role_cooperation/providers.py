"""Capabilities the workflow stages depend on, and their LangChain-backed implementations.

Stages never talk to a chat model directly for structured output or tool use;
they go through these small interfaces so tests can swap in deterministic stubs.
"""

import logging
from typing import Any, Generic, Protocol, Sequence, Type, TypeVar

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage
from langgraph.prebuilt import create_react_agent
from pydantic import BaseModel

from role_cooperation.utils import get_message_text

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)
T_co = TypeVar("T_co", bound=BaseModel, covariant=True)


class StructuredCompletionProvider(Protocol[T_co]):
    """Completes a message list into an instance of a fixed schema."""

    def complete(self, messages: Sequence[BaseMessage]) -> T_co:
        """Return the model's answer parsed and validated against the schema."""
        ...


class TaskAgent(Protocol):
    """A tool-using agent that may call any of ``tools`` before answering."""

    def run(self, system_prompt: str, user_prompt: str, tools: Sequence[Any]) -> str:
        """Run the agent loop to completion and return its final answer."""
        ...


class ChatModelStructuredProvider(Generic[T]):
    """Structured completions through ``BaseChatModel.with_structured_output``."""

    def __init__(self, llm: BaseChatModel, schema: Type[T]):
        self.schema = schema
        self._runnable = llm.with_structured_output(schema)

    def complete(self, messages: Sequence[BaseMessage]) -> T:
        result = self._runnable.invoke(list(messages))
        # Providers may return a dict, or None on a failed parse
        if not isinstance(result, self.schema):
            result = self.schema.model_validate(result)
        return result


class ReactTaskAgent:
    """Runs LangGraph's prebuilt ReAct agent, built fresh for every task."""

    def __init__(self, llm: BaseChatModel):
        self.llm = llm

    def run(self, system_prompt: str, user_prompt: str, tools: Sequence[Any]) -> str:
        agent = create_react_agent(self.llm, tools=list(tools))
        result = agent.invoke(
            {
                "messages": [
                    SystemMessage(content=system_prompt),
                    HumanMessage(content=user_prompt),
                ]
            }
        )
        messages = result.get("messages") or []
        if not messages:
            raise RuntimeError("Execution agent finished without producing a message")
        logger.debug("Execution agent finished after %d messages", len(messages))
        return get_message_text(messages[-1])
