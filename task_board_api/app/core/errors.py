"""Exception types raised below the service layer."""


class TaskBoardError(Exception):
    """Base class for task board errors."""


class StoreError(TaskBoardError):
    """The storage engine rejected or failed an operation."""
