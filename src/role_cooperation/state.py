"""Define the data model and workflow state for the role-based cooperation agent."""

from __future__ import annotations

import operator
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import Annotated, TypedDict


# --- Constants and shared definitions ---------------------------------------

KEY_SKILL_COUNT = 3

PLANNER = "planner"
ROLE_ASSIGNER = "role_assigner"
EXECUTOR = "executor"
REPORTER = "reporter"


# --- Personas and tasks ------------------------------------------------------

class Role(BaseModel):
    """A generated persona the execution agent adopts for one task."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="The name of the role")
    description: str = Field(..., description="A detailed description of the role")
    key_skills: List[str] = Field(
        ...,
        min_length=KEY_SKILL_COUNT,
        max_length=KEY_SKILL_COUNT,
        description="The key skills or attributes this role needs",
    )


class Task(BaseModel):
    """One decomposed unit of work derived from the user's query."""

    description: str = Field(..., description="The description of the task")
    role: Optional[Role] = Field(default=None, description="The role assigned to the task")


# --- Structured output schemas ------------------------------------------------

class DecomposedTasks(BaseModel):
    """The sub-tasks a query was split into, in execution order."""

    values: List[str] = Field(
        default_factory=list,
        description="Decomposed sub-tasks, one short description each",
    )


class AssignedTask(BaseModel):
    """A task as returned by the role assigner. The role is mandatory here."""

    index: int = Field(..., description="The number the task was given in the prompt")
    description: str = Field(..., description="The description of the task")
    role: Role = Field(..., description="The role assigned to the task")


class TasksWithRoles(BaseModel):
    """The role assigner's structured response."""

    tasks: List[AssignedTask] = Field(
        ..., description="The list of tasks with their assigned roles"
    )


# --- Workflow state -----------------------------------------------------------

class AgentState(TypedDict, total=False):
    """State threaded through the plan, assign, execute, report workflow.

    Every node returns a partial update. Fields without a reducer keep the
    last written value; ``results`` appends, so the executor returns a
    one-element list per task.
    """

    query: str
    tasks: List[Task]
    current_task_index: int
    results: Annotated[List[str], operator.add]
    final_report: str


def initial_state(query: str) -> AgentState:
    """Build the state a run starts from."""
    return {
        "query": query,
        "tasks": [],
        "current_task_index": 0,
        "results": [],
        "final_report": "",
    }
