"""Role-Based Cooperation Agent.

This module answers a free-form query with a fixed workflow:
- Planner: Splits the query into ordered sub-tasks
- Role Assigner: Invents a persona with three key skills for every task
- Executor: Runs each task through a ReAct agent that plays its persona
  and can search the web
- Reporter: Merges the task results into one answer

The architecture follows a Planner → Role Assigner → Executor (loop) → Reporter
pipeline built on a LangGraph state graph.
"""

from role_cooperation.graph import RoleBasedCooperation, create_role_cooperation

__all__ = ["RoleBasedCooperation", "create_role_cooperation"]
