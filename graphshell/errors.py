"""Errors raised by the command layer and the graph service."""


class InvalidUsageError(RuntimeError):
    """A command was invoked with the wrong arguments."""


class InvalidOperationOnGraphType(RuntimeError):
    """An operation was requested that the current kind of graph does not support."""