"""Pytest configuration and shared stubs.

Every stub is deterministic and offline; no test talks to a model provider
or the search API.
"""

from typing import List, Optional, Sequence

import pytest

from role_cooperation.agents import Planner
from role_cooperation.configuration import Configuration
from role_cooperation.graph import RoleBasedCooperation
from role_cooperation.state import Role, Task


def make_role(name: str = "Scout", skills: Optional[List[str]] = None) -> Role:
    return Role(
        name=name,
        description=f"{name} digs up facts quickly.",
        key_skills=skills or ["searching", "summarizing", "fact checking"],
    )


class StubProvider:
    """Structured provider returning a canned response and recording prompts."""

    def __init__(self, response):
        self.response = response
        self.calls = []

    def complete(self, messages):
        self.calls.append(list(messages))
        if callable(self.response):
            return self.response(messages)
        return self.response


class StubDecomposer:
    def __init__(self, values: Sequence[str]):
        self.values = list(values)
        self.queries = []

    def run(self, query: str) -> List[str]:
        self.queries.append(query)
        return list(self.values)


class StubRoleAssigner:
    """Gives every task a role named after its description."""

    def __init__(self):
        self.calls = 0

    def run(self, tasks: Sequence[Task]) -> List[Task]:
        self.calls += 1
        return [
            task.model_copy(update={"role": make_role(f"Role for {task.description}")})
            for task in tasks
        ]


class StubExecutor:
    def __init__(self, results: Optional[Sequence[str]] = None):
        self.results = list(results) if results is not None else None
        self.tasks: List[Task] = []

    def run(self, task: Task) -> str:
        self.tasks.append(task)
        if self.results is None:
            return f"Result of {task.description}"
        return self.results[len(self.tasks) - 1]


class StubReporter:
    """Concatenates the query and the results."""

    def __init__(self):
        self.calls = []

    def run(self, query: str, results: Sequence[str]) -> str:
        self.calls.append((query, list(results)))
        return " | ".join([query, *results])


class StubAgent:
    def __init__(self, answer: str = "done"):
        self.answer = answer
        self.calls = []

    def run(self, system_prompt, user_prompt, tools):
        self.calls.append((system_prompt, user_prompt, list(tools)))
        return self.answer


@pytest.fixture
def configuration() -> Configuration:
    return Configuration(model="openai/gpt-4o-mini", temperature=0.0)


@pytest.fixture
def role_factory():
    """Build a valid role with three key skills."""
    return make_role


@pytest.fixture
def stub_provider():
    return StubProvider


@pytest.fixture
def stub_decomposer():
    return StubDecomposer


@pytest.fixture
def stub_agent():
    return StubAgent


@pytest.fixture
def stub_executor():
    return StubExecutor


@pytest.fixture
def build_workflow():
    """Build a workflow around a stub decomposer returning ``tasks``.

    Returns ``(workflow, executor, reporter)`` so tests can inspect the stubs.
    """
    def build(tasks, executor=None, reporter=None, recursion_limit=1000):
        executor = executor or StubExecutor()
        reporter = reporter or StubReporter()
        workflow = RoleBasedCooperation(
            planner=Planner(StubDecomposer(tasks)),
            role_assigner=StubRoleAssigner(),
            executor=executor,
            reporter=reporter,
            configuration=Configuration(recursion_limit=recursion_limit),
        )
        return workflow, executor, reporter

    return build
