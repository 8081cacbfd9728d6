"""The four workflow stages: planning, role assignment, execution and reporting."""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

from langchain_core.language_models import BaseChatModel
from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import ChatPromptTemplate

from role_cooperation import prompts
from role_cooperation.configuration import Configuration
from role_cooperation.errors import RoleAssignmentError
from role_cooperation.providers import StructuredCompletionProvider, TaskAgent
from role_cooperation.state import AssignedTask, DecomposedTasks, Task, TasksWithRoles

logger = logging.getLogger(__name__)


# --- Planning -----------------------------------------------------------------

class QueryDecomposer:
    """Splits a query into an ordered list of sub-task descriptions."""

    def __init__(
        self,
        provider: StructuredCompletionProvider[DecomposedTasks],
        configuration: Optional[Configuration] = None,
    ):
        self.provider = provider
        self.configuration = configuration or Configuration()

    def run(self, query: str) -> List[str]:
        prompt = ChatPromptTemplate.from_messages([("user", prompts.QUERY_DECOMPOSER_PROMPT)])
        messages = prompt.format_messages(
            current_date=datetime.now().strftime("%Y-%m-%d"),
            min_tasks=self.configuration.min_tasks,
            max_tasks=self.configuration.max_tasks,
            response_language=self.configuration.response_language,
            query=query,
        )
        decomposed = self.provider.complete(messages)
        return [value.strip() for value in decomposed.values if value.strip()]


class Planner:
    """Turns the decomposer's output into role-less tasks, keeping its order."""

    def __init__(self, query_decomposer: QueryDecomposer):
        self.query_decomposer = query_decomposer

    def run(self, query: str) -> List[Task]:
        descriptions = self.query_decomposer.run(query)
        return [Task(description=description) for description in descriptions]


# --- Role assignment ------------------------------------------------------------

def _normalize(description: str) -> str:
    return " ".join(description.split()).casefold()


def reconcile_roles(tasks: Sequence[Task], assigned: Sequence[AssignedTask]) -> List[Task]:
    """Attach the roles in ``assigned`` to ``tasks`` without trusting positions.

    Each returned entry names its task by ``index``, the 1-based number the
    task had in the prompt. The index is used unless it is out of range or
    the entry's description (normalized) names a different task, in which
    case the description decides. Nothing is ever paired by position.
    The result always has the length, order and descriptions of ``tasks``.

    Raises:
        RoleAssignmentError: If some task cannot be given a role.
    """
    by_description: Dict[str, List[int]] = {}
    for task_index, task in enumerate(tasks):
        by_description.setdefault(_normalize(task.description), []).append(task_index)

    matches: Dict[int, int] = {}
    for assigned_index, item in enumerate(assigned):
        named = by_description.get(_normalize(item.description), [])
        numbered = item.index - 1
        if 0 <= numbered < len(tasks) and (not named or numbered in named):
            candidates = [numbered]
        else:
            candidates = named
        for task_index in candidates:
            if task_index not in matches:
                matches[task_index] = assigned_index
                break

    unmatched = [i for i in range(len(tasks)) if i not in matches]
    if unmatched:
        missing = ", ".join(f"{i + 1}. {tasks[i].description!r}" for i in unmatched)
        raise RoleAssignmentError(
            f"Role assigner returned {len(assigned)} tasks for {len(tasks)} inputs; "
            f"no role for: {missing}"
        )
    if len(assigned) > len(matches):
        logger.warning(
            "Role assigner returned %d unmatched task(s); ignoring them",
            len(assigned) - len(matches),
        )

    return [
        task.model_copy(update={"role": assigned[matches[index]].role})
        for index, task in enumerate(tasks)
    ]


class RoleAssigner:
    """Generates one persona per task in a single structured LLM call."""

    def __init__(self, provider: StructuredCompletionProvider[TasksWithRoles]):
        self.provider = provider

    def run(self, tasks: Sequence[Task]) -> List[Task]:
        if not tasks:
            return []
        prompt = ChatPromptTemplate.from_messages([
            ("system", prompts.ROLE_ASSIGNER_SYSTEM_PROMPT),
            ("user", prompts.ROLE_ASSIGNER_USER_PROMPT),
        ])
        messages = prompt.format_messages(
            tasks="\n".join(
                f"{i}. {task.description}" for i, task in enumerate(tasks, start=1)
            )
        )
        tasks_with_roles = self.provider.complete(messages)
        return reconcile_roles(tasks, tasks_with_roles.tasks)


# --- Execution -------------------------------------------------------------------

class Executor:
    """Runs one task through a tool-using agent that plays the task's role."""

    def __init__(self, agent: TaskAgent, tools: Sequence[Any]):
        self.agent = agent
        self.tools = list(tools)

    def run(self, task: Task) -> str:
        if task.role is None:
            raise ValueError(f"Task has no role assigned: {task.description!r}")
        system_prompt = prompts.EXECUTOR_SYSTEM_PROMPT.format(
            role_name=task.role.name,
            role_description=task.role.description,
            key_skills=", ".join(task.role.key_skills),
        )
        user_prompt = prompts.EXECUTOR_USER_PROMPT.format(task=task.description)
        return self.agent.run(system_prompt, user_prompt, self.tools)


# --- Reporting -------------------------------------------------------------------

def format_results(results: Sequence[str]) -> str:
    """Label each result ``Info N`` (1-based) and join them with blank lines."""
    return "\n\n".join(f"Info {i}:\n{result}" for i, result in enumerate(results, start=1))


class Reporter:
    """Synthesizes the per-task results into one answer to the query."""

    def __init__(self, llm: BaseChatModel, configuration: Optional[Configuration] = None):
        self.llm = llm
        self.configuration = configuration or Configuration()

    def run(self, query: str, results: Sequence[str]) -> str:
        prompt = ChatPromptTemplate.from_messages([
            ("system", prompts.REPORTER_SYSTEM_PROMPT),
            ("user", prompts.REPORTER_USER_PROMPT),
        ])
        chain = prompt | self.llm | StrOutputParser()
        return chain.invoke({
            "query": query,
            "results": format_results(results),
            "response_language": self.configuration.response_language,
        })
