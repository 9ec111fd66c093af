"""Core passtype components."""

from .config import APPNAME, PASS_CONFIG
from .exceptions import ActionError, PassTypeError, SetupError
from .store_scanner import scan_store
from .secret_retriever import SecretRetriever
from .automation import FocusClient, detect_backend
from .pipeline import Pipeline, PipelineOutcome, SyncRunner, ThreadRunner
from .controller import AppContext, LauncherController, LauncherState

__all__ = [
    "APPNAME",
    "PASS_CONFIG",
    "ActionError",
    "PassTypeError",
    "SetupError",
    "scan_store",
    "SecretRetriever",
    "FocusClient",
    "detect_backend",
    "Pipeline",
    "PipelineOutcome",
    "SyncRunner",
    "ThreadRunner",
    "AppContext",
    "LauncherController",
    "LauncherState",
]
