import pytest

from ie_common.errors import UsageError
from ie_core.events import Action, Cancel, Complete, Outcome, Select, SubmitText, parse_event

pytestmark = pytest.mark.unit_core


@pytest.mark.parametrize(
    ("spec", "expected"),
    [
        ("select:2", Select(2)),
        ("SELECT:0", Select(0)),
        ("complete:1", Complete(1)),
        ("cancel", Cancel()),
        ("text:15", SubmitText("15")),
        ("text:", SubmitText("")),
        ("text:a:b", SubmitText("a:b")),
    ],
)
def test_parse_event(spec: str, expected) -> None:
    assert parse_event(spec) == expected


@pytest.mark.parametrize("spec", ["", "select", "select:x", "cancel:1", "jump:3", "complete:"])
def test_parse_event_rejects_unknown(spec: str) -> None:
    with pytest.raises(UsageError):
        parse_event(spec)


def test_outcome_defaults_to_reload() -> None:
    outcome = Outcome()
    assert outcome.action is Action.RELOAD
    assert not outcome.finished
    assert Outcome(Action.EXIT, output="[]").finished
