# pyright: reportMissingTypeStubs=false
# pyright: reportUnknownMemberType=false
# pyright: reportUntypedBaseClass=false
# pyright: reportAttributeAccessIssue=false
# pyright: reportUnusedCallResult=false
# pyright: reportUnknownVariableType=false
# pyright: reportMissingImports=false
# ruff: ignore

"""
The decrypt → refocus → type pipeline and the strategies that run it.

A runner takes a job producing a PipelineOutcome and a callback that must see
that outcome on the UI thread. SyncRunner does both inline; ThreadRunner runs
the job on a worker and hands the outcome to ``schedule`` (GLib.idle_add in
the application) so the callback runs on the main loop.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Optional

from .automation import FocusClient
from .exceptions import ActionError
from .secret_retriever import SecretRetriever

logger = logging.getLogger("Pipeline")


@dataclass(frozen=True)
class PipelineOutcome:
    error: Optional[ActionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class Pipeline:
    def __init__(self, retriever: SecretRetriever, focus_client: FocusClient):
        self.retriever = retriever
        self.focus_client = focus_client

    def run(self, entry: str, previous_app: str) -> PipelineOutcome:
        """Fetch the secret, restore focus, then type it.

        Stops at the first failure; the secret is never typed unless focus
        was restored.
        """
        password = None
        try:
            password = self.retriever.get_password(entry)
            self.focus_client.focus_app(previous_app)
            self.focus_client.type_text(password)
        except ActionError as e:
            logger.error("Pipeline failed: %s", type(e).__name__)
            return PipelineOutcome(error=e)
        finally:
            del password

        logger.info("Password typed into previous window")
        return PipelineOutcome()


Job = Callable[[], PipelineOutcome]
OutcomeCallback = Callable[[PipelineOutcome], None]


def run_job(job: Job) -> PipelineOutcome:
    """Run ``job``, turning any unexpected exception into a failed outcome.

    Both runners go through here so the window is never left disabled.
    """
    try:
        return job()
    except Exception as e:
        logger.exception("Pipeline job crashed")
        return PipelineOutcome(
            error=ActionError(f"Unexpected error: {type(e).__name__}: {e}")
        )


class SyncRunner:
    """Runs the job on the calling thread. The UI is frozen meanwhile."""

    def run(self, job: Job, on_done: OutcomeCallback) -> None:
        on_done(run_job(job))


class ThreadRunner:
    """Runs the job on a daemon worker and marshals the outcome back."""

    def __init__(self, schedule: Callable[..., object]):
        self.schedule = schedule
        self.worker: Optional[threading.Thread] = None

    def run(self, job: Job, on_done: OutcomeCallback) -> None:
        def deliver(outcome: PipelineOutcome) -> bool:
            on_done(outcome)
            return False  # one-shot idle callback

        def work():
            self.schedule(deliver, run_job(job))

        self.worker = threading.Thread(target=work, name="pipeline", daemon=True)
        self.worker.start()
