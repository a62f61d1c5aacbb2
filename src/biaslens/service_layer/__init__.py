"""Service layer: commands, the message bus, accounts, runs and reports."""

from .auth import AuthState, AuthStore
from .evaluation import EvaluationSession
from .messagebus import MessageBus, NoHandlerForCommand
from .outcomes import Failure, FailureKind, Outcome, Success
from .reports import Report, ReportLine, build_report, report_from_payload

__all__ = [
    "AuthState",
    "AuthStore",
    "EvaluationSession",
    "Failure",
    "FailureKind",
    "MessageBus",
    "NoHandlerForCommand",
    "Outcome",
    "Report",
    "ReportLine",
    "Success",
    "build_report",
    "report_from_payload",
]
