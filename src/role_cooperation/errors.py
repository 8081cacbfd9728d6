"""Exceptions raised by the role-based cooperation workflow."""


class RoleCooperationError(Exception):
    """Base class for errors raised by this package."""


class RoleAssignmentError(RoleCooperationError):
    """The role assigner's output could not be aligned with the input tasks."""


class StepLimitExceededError(RoleCooperationError):
    """The workflow made more state transitions than the configured cap."""

    def __init__(self, limit: int):
        super().__init__(f"Workflow aborted after exceeding {limit} steps")
        self.limit = limit
