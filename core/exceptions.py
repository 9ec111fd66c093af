# pyright: reportMissingTypeStubs=false
# pyright: reportUnknownMemberType=false
# pyright: reportUntypedBaseClass=false
# pyright: reportAttributeAccessIssue=false
# pyright: reportUnusedCallResult=false
# pyright: reportUnknownVariableType=false
# pyright: reportMissingImports=false
# ruff: ignore

"""Error types raised by passtype.

SetupError subclasses are fatal and only raised before the window is shown.
ActionError subclasses are raised while handling a confirmed entry; the
pipeline turns them into an outcome value and the window shows them in a
dialog.
"""

from typing import Optional


class PassTypeError(Exception):
    """Base class for all passtype errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class SetupError(PassTypeError):
    """Startup failure with no safe way to continue."""


class StoreNotFoundError(SetupError):
    pass


class StoreReadError(SetupError):
    pass


class EntryNameDecodeError(SetupError):
    pass


class PreviousAppError(SetupError):
    pass


class ToolkitInitError(SetupError):
    pass


class ActionError(PassTypeError):
    """Recoverable failure of one external call, reported to the user."""

    def __init__(
        self,
        message: str,
        stdout: Optional[str] = None,
        stderr: Optional[str] = None,
    ):
        super().__init__(message)
        self.stdout = stdout
        self.stderr = stderr


class RetrievalError(ActionError):
    pass


class PassLaunchError(RetrievalError):
    pass


class PassExitError(RetrievalError):
    def __init__(self, message: str, returncode: int, stdout: str, stderr: str):
        super().__init__(message, stdout=stdout, stderr=stderr)
        self.returncode = returncode


class PassDecodeError(RetrievalError):
    pass


class PassEmptyOutputError(RetrievalError):
    pass


class AutomationError(ActionError):
    pass


class AutomationLaunchError(AutomationError):
    pass


class AutomationExitError(AutomationError):
    pass
