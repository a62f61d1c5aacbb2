"""Message bus implementation for handling commands."""

import logging
from collections.abc import Callable
from typing import Any

from biaslens.domain.errors import RecordNotFoundError
from biaslens.interfaces.record_store import RecordStore

from .commands import Command
from .outcomes import (
    VALIDATION_ERRORS,
    Failure,
    FailureKind,
    Outcome,
    Success,
    failure_from_exception,
)

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


class NoHandlerForCommand(LookupError):
    """Exception raised when no handler is found for a command."""

    def __init__(self, cmd: Command) -> None:
        super().__init__(f"No handler found for command {type(cmd).__name__}")


class MessageBus:
    """A simple message bus for handling commands.

    The bus routes each command to its handler and is the boundary of the
    service layer: whatever the handler returns comes back as `Success`, and
    whatever it raises comes back as `Failure`. Expected failures (missing
    records, invalid input) are logged at INFO; anything else is logged with
    its traceback and reported as `FailureKind.FAULT`.

    Args:
        store: The record store. Handlers already have it injected; it is
            also exposed here for read-only queries.
        command_handlers: A mapping of command types to their handlers.
            Handlers are callables taking the command as their only argument.
    """

    def __init__(
        self,
        store: RecordStore,
        command_handlers: dict[type[Command], Callable[..., Any]],
    ) -> None:
        self.store = store
        self._command_handlers = command_handlers

    def handle(self, cmd: Command) -> Outcome[Any]:
        """Dispatch a command to its handler and report how it went.

        Args:
            cmd: The command to handle.

        Returns:
            `Success` wrapping the handler's return value, or `Failure`.
        """

        handler = self._command_handlers.get(type(cmd))
        if handler is None:
            logger.error("No handler found for command %s", type(cmd).__name__)
            return Failure(FailureKind.FAULT, str(NoHandlerForCommand(cmd)))

        handler_name = self._get_handler_name(handler)
        logger.debug("Handling command %s with handler %s", cmd, handler_name)
        try:
            result = handler(cmd)
        except VALIDATION_ERRORS as e:
            logger.info("Rejected command %s: %s", type(cmd).__name__, e)
            return failure_from_exception(e)
        except RecordNotFoundError as e:
            logger.info("Command %s failed: %s", type(cmd).__name__, e)
            return failure_from_exception(e)
        except Exception as e:  # pylint: disable=broad-except
            logger.exception(
                "Exception handling command %s with handler %s", cmd, handler_name
            )
            return failure_from_exception(e)
        return Success(result)

    @staticmethod
    def _get_handler_name(fn: Callable[..., Any]) -> str:
        if hasattr(fn, "__name__"):
            return fn.__name__
        if hasattr(fn, "func") and hasattr(fn.func, "__name__"):
            return fn.func.__name__
        return repr(fn)
