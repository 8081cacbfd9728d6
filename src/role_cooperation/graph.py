"""Define the plan → assign roles → execute → report workflow graph.

The planner splits the query into tasks, the role assigner gives every task a
persona, the executor loops over the tasks one at a time, and the reporter
merges the results into the final answer.
"""

import logging
from typing import Any, Dict, Literal, Optional, Sequence

from langchain_core.language_models import BaseChatModel
from langgraph.errors import GraphRecursionError
from langgraph.graph import END, START, StateGraph
from langgraph.graph.state import CompiledStateGraph

from role_cooperation.agents import Executor, Planner, QueryDecomposer, Reporter, RoleAssigner
from role_cooperation.configuration import Configuration
from role_cooperation.errors import StepLimitExceededError
from role_cooperation.providers import ChatModelStructuredProvider, ReactTaskAgent
from role_cooperation.state import (
    EXECUTOR,
    PLANNER,
    REPORTER,
    ROLE_ASSIGNER,
    AgentState,
    DecomposedTasks,
    TasksWithRoles,
    initial_state,
)
from role_cooperation.tools import create_tools
from role_cooperation.utils import load_chat_model

logger = logging.getLogger(__name__)

ExecutorDestination = Literal["executor", "reporter"]


# --- Routing -------------------------------------------------------------------

def route_to_executor(state: AgentState) -> ExecutorDestination:
    """Send the workflow to the executor while tasks remain, else to the reporter."""
    if state.get("current_task_index", 0) < len(state.get("tasks", [])):
        return EXECUTOR
    return REPORTER


# --- Workflow --------------------------------------------------------------------

class RoleBasedCooperation:
    """Answers a query by planning tasks, casting roles, executing and reporting."""

    def __init__(
        self,
        planner: Planner,
        role_assigner: RoleAssigner,
        executor: Executor,
        reporter: Reporter,
        configuration: Optional[Configuration] = None,
    ):
        self.planner = planner
        self.role_assigner = role_assigner
        self.executor = executor
        self.reporter = reporter
        self.configuration = configuration or Configuration()
        self.graph = self._create_graph()

    @classmethod
    def from_llm(
        cls,
        llm: BaseChatModel,
        configuration: Optional[Configuration] = None,
        tools: Optional[Sequence[Any]] = None,
    ) -> "RoleBasedCooperation":
        """Wire every stage to one chat model and the default search tool."""
        configuration = configuration or Configuration()
        if tools is None:
            tools = create_tools(configuration)
        decomposer = QueryDecomposer(
            ChatModelStructuredProvider(llm, DecomposedTasks), configuration
        )
        return cls(
            planner=Planner(decomposer),
            role_assigner=RoleAssigner(ChatModelStructuredProvider(llm, TasksWithRoles)),
            executor=Executor(ReactTaskAgent(llm), tools),
            reporter=Reporter(llm, configuration),
            configuration=configuration,
        )

    def _create_graph(self) -> CompiledStateGraph:
        builder = StateGraph(AgentState)

        builder.add_node(PLANNER, self.plan_tasks)
        builder.add_node(ROLE_ASSIGNER, self.assign_roles)
        builder.add_node(EXECUTOR, self.execute_task)
        builder.add_node(REPORTER, self.generate_report)

        builder.add_edge(START, PLANNER)
        builder.add_edge(PLANNER, ROLE_ASSIGNER)
        # An empty plan skips the executor loop entirely
        builder.add_conditional_edges(ROLE_ASSIGNER, route_to_executor, [EXECUTOR, REPORTER])
        builder.add_conditional_edges(EXECUTOR, route_to_executor, [EXECUTOR, REPORTER])
        builder.add_edge(REPORTER, END)

        return builder.compile(name="Role-Based Cooperation")

    # --- Nodes -------------------------------------------------------------------

    def plan_tasks(self, state: AgentState) -> Dict[str, Any]:
        tasks = self.planner.run(state["query"])
        logger.info("Planned %d task(s)", len(tasks))
        return {"tasks": tasks}

    def assign_roles(self, state: AgentState) -> Dict[str, Any]:
        tasks = self.role_assigner.run(state["tasks"])
        for task in tasks:
            logger.info("Assigned role %r to task %r", task.role.name, task.description)
        return {"tasks": tasks}

    def execute_task(self, state: AgentState) -> Dict[str, Any]:
        index = state["current_task_index"]
        task = state["tasks"][index]
        logger.info("Executing task %d/%d: %s", index + 1, len(state["tasks"]), task.description)
        result = self.executor.run(task)
        # ``results`` is an appending channel, so only the new entry is returned
        return {"results": [result], "current_task_index": index + 1}

    def generate_report(self, state: AgentState) -> Dict[str, Any]:
        logger.info("Writing report from %d result(s)", len(state["results"]))
        report = self.reporter.run(state["query"], state["results"])
        return {"final_report": report}

    # --- Entry points ---------------------------------------------------------

    def invoke(self, query: str) -> AgentState:
        """Run the workflow and return the final state.

        The step cap includes the input step, so a run of ``n`` tasks needs
        ``n + 3`` node executions and fits only when ``n <= recursion_limit - 4``.

        Raises:
            StepLimitExceededError: If the run needs more state transitions
                than ``configuration.recursion_limit``.
        """
        limit = self.configuration.recursion_limit
        try:
            return self.graph.invoke(initial_state(query), {"recursion_limit": limit})
        except GraphRecursionError as e:
            raise StepLimitExceededError(limit) from e

    def run(self, query: str) -> str:
        """Run the workflow and return the final report."""
        return self.invoke(query)["final_report"]


def create_role_cooperation(configuration: Optional[Configuration] = None) -> RoleBasedCooperation:
    """Build the workflow from configuration, loading the chat model it names."""
    configuration = configuration or Configuration.from_context()
    llm = load_chat_model(configuration.model, temperature=configuration.temperature)
    logger.info("Using model %s (temperature=%s)", configuration.model, configuration.temperature)
    return RoleBasedCooperation.from_llm(llm, configuration)
