"""Unit tests for the decrypt, refocus, type pipeline"""

from unittest.mock import Mock
import os
import sys

# Add the parent directory to the path so we can import modules
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.exceptions import (
    AutomationExitError,
    AutomationLaunchError,
    PassExitError,
)
from core.pipeline import Pipeline, PipelineOutcome, SyncRunner, ThreadRunner


def recording_pipeline(calls, retrieve_error=None, focus_error=None, type_error=None):
    retriever = Mock()
    focus_client = Mock()

    def get_password(entry):
        calls.append(("decrypt", entry))
        if retrieve_error:
            raise retrieve_error
        return "s3cr3t"

    def focus_app(app):
        calls.append(("refocus", app))
        if focus_error:
            raise focus_error

    def type_text(text):
        calls.append(("type", text))
        if type_error:
            raise type_error

    retriever.get_password.side_effect = get_password
    focus_client.focus_app.side_effect = focus_app
    focus_client.type_text.side_effect = type_text
    return Pipeline(retriever, focus_client)


class TestPipeline:
    """Test call order and failure short-circuiting"""

    def test_success_order(self):
        calls = []
        outcome = recording_pipeline(calls).run("email/work", "Safari")

        assert outcome.ok
        assert calls == [
            ("decrypt", "email/work"),
            ("refocus", "Safari"),
            ("type", "s3cr3t"),
        ]

    def test_retrieval_failure_stops_everything(self):
        calls = []
        error = PassExitError("pass failed", 1, "", "gpg: decryption failed")

        outcome = recording_pipeline(calls, retrieve_error=error).run("x", "Safari")

        assert not outcome.ok
        assert outcome.error is error
        assert [name for name, _ in calls] == ["decrypt"]

    def test_refocus_failure_never_types(self):
        """Scenario: refocus exits non-zero after a successful decrypt"""
        calls = []
        error = AutomationExitError("osascript was not successful")

        outcome = recording_pipeline(calls, focus_error=error).run("x", "Safari")

        assert outcome.error is error
        assert [name for name, _ in calls] == ["decrypt", "refocus"]

    def test_refocus_launch_failure_never_types(self):
        calls = []
        outcome = recording_pipeline(
            calls, focus_error=AutomationLaunchError("Could not launch osascript")
        ).run("x", "Safari")

        assert isinstance(outcome.error, AutomationLaunchError)
        assert "type" not in [name for name, _ in calls]

    def test_type_failure_is_reported(self):
        calls = []
        outcome = recording_pipeline(
            calls, type_error=AutomationExitError("cliclick was not successful")
        ).run("x", "Safari")

        assert isinstance(outcome.error, AutomationExitError)
        assert len(calls) == 3


class TestRunners:
    def test_sync_runner_calls_back_inline(self):
        seen = []
        outcome = PipelineOutcome()

        SyncRunner().run(lambda: outcome, seen.append)

        assert seen == [outcome]

    def test_thread_runner_delivers_through_schedule(self):
        scheduled = []
        seen = []
        outcome = PipelineOutcome()

        runner = ThreadRunner(lambda fn, *args: scheduled.append((fn, args)))
        runner.run(lambda: outcome, seen.append)
        runner.worker.join(timeout=5)

        # Nothing reaches the callback until the main loop runs the idle handler
        assert seen == []
        assert len(scheduled) == 1
        fn, args = scheduled[0]
        assert fn(*args) is False
        assert seen == [outcome]

    def test_thread_runner_runs_job_off_the_calling_thread(self):
        import threading

        job_threads = []
        runner = ThreadRunner(lambda fn, *args: fn(*args))

        def job():
            job_threads.append(threading.current_thread())
            return PipelineOutcome()

        runner.run(job, lambda outcome: None)
        runner.worker.join(timeout=5)

        assert job_threads == [runner.worker]
        assert runner.worker is not threading.main_thread()

    def test_thread_runner_reports_crashed_job(self):
        seen = []
        runner = ThreadRunner(lambda fn, *args: fn(*args))

        def job():
            raise RuntimeError("boom")

        runner.run(job, seen.append)
        runner.worker.join(timeout=5)

        assert len(seen) == 1
        assert not seen[0].ok
        assert "boom" in seen[0].error.message

    def test_sync_runner_reports_crashed_job(self):
        seen = []

        def job():
            raise ConnectionResetError()

        SyncRunner().run(job, seen.append)

        assert len(seen) == 1
        assert not seen[0].ok
        assert "ConnectionResetError" in seen[0].error.message
