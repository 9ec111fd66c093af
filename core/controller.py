# pyright: reportMissingTypeStubs=false
# pyright: reportUnknownMemberType=false
# pyright: reportUntypedBaseClass=false
# pyright: reportAttributeAccessIssue=false
# pyright: reportUnusedCallResult=false
# pyright: reportUnknownVariableType=false
# pyright: reportMissingImports=false
# ruff: ignore

"""State machine behind the launcher window.

The controller knows nothing about GTK. The window implements the small view
protocol below and forwards key presses and confirmations.
"""

import logging
from functools import partial
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, FrozenSet, Tuple

from typing_extensions import Protocol, final

from .pipeline import Pipeline, PipelineOutcome

logger = logging.getLogger("LauncherController")


class LauncherState(Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    RETRIEVING = "retrieving"
    DONE = "done"
    ERROR = "error"


@dataclass(frozen=True)
class AppContext:
    """Values captured at startup, read-only for the rest of the process."""

    previous_app: str
    choices: Tuple[str, ...]
    known: FrozenSet[str] = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "known", frozenset(self.choices))

    def is_entry(self, text: str) -> bool:
        return text in self.known


class LauncherView(Protocol):
    def set_input_sensitive(self, sensitive: bool) -> None: ...

    def show_error(self, message: str, on_dismissed: Callable[[], None]) -> None: ...

    def quit(self) -> None: ...


@final
class LauncherController:
    def __init__(self, context: AppContext, pipeline: Pipeline, runner, view: LauncherView):
        self.context = context
        self.pipeline = pipeline
        self.runner = runner
        self.view = view
        self.state = LauncherState.IDLE

    def on_cancel(self) -> None:
        if self.state != LauncherState.IDLE:
            return
        logger.info("Escape pressed, exiting")
        self.state = LauncherState.DONE
        self.view.quit()

    def on_confirm(self, text: str) -> bool:
        """Start the pipeline for ``text`` if it names a known entry.

        Returns True when the pipeline was started. Unknown text is ignored
        without feedback.
        """
        if self.state != LauncherState.IDLE:
            return False

        self.state = LauncherState.VALIDATING
        if not self.context.is_entry(text):
            logger.debug("Entered text is not a password store entry, ignoring")
            self.state = LauncherState.IDLE
            return False

        logger.debug("Entered text is a valid password store entry, continuing")
        self.view.set_input_sensitive(False)
        self.state = LauncherState.RETRIEVING

        # Only immutable values cross into the job
        previous_app = self.context.previous_app
        self.runner.run(
            partial(self.pipeline.run, text, previous_app),
            self.on_outcome,
        )
        return True

    def on_outcome(self, outcome: PipelineOutcome) -> None:
        if outcome.ok:
            self.state = LauncherState.DONE
            self.view.quit()
            return

        self.state = LauncherState.ERROR
        self.view.show_error(outcome.error.message, self._on_error_dismissed)

    def _on_error_dismissed(self) -> None:
        self.view.set_input_sensitive(True)
        self.state = LauncherState.IDLE
