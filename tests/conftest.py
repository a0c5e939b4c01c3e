import pytest

from kappa import runtime_context

# Every test starts with no evaluator installed and no kappa environment
# overrides, so the process-wide evaluator slot resolves the same way each time.


class RecordingEvaluator:
    """Evaluator stand-in that records each call and returns a canned result."""

    def __init__(self, result=None):
        self.calls = []
        self.result = result

    def __call__(self, code, globals, locals, args, kwargs, defaults, kwdefaults, closure):
        self.calls.append((code, globals, locals, args, kwargs, defaults, kwdefaults, closure))
        return self.result


@pytest.fixture(autouse=True)
def _reset_runtime_context(monkeypatch):
    monkeypatch.delenv("KAPPA_EVALUATOR", raising=False)
    monkeypatch.delenv("KAPPA_TRACE_CALLS", raising=False)
    monkeypatch.delenv("KAPPA_LOG_LEVEL", raising=False)
    runtime_context.reset_evaluator()
    yield
    runtime_context.reset_evaluator()


@pytest.fixture
def recorder():
    rec = RecordingEvaluator()
    runtime_context.set_evaluator(rec)
    return rec
