import logging
from collections import defaultdict

import pytest
from rich.console import Console
from rich.table import Table

from ie_core.item_set import ItemSet
from ie_ui.cli import ctx_store
from ie_ui.tui.system.headless import HeadlessUI

# Defined markers in pyproject.toml
KNOWN_MARKERS = {"unit_common", "unit_core", "unit_ui"}

SAMPLE_JSON = (
    '[{"name":"flag","item":{"Bool":{"value":false}}},'
    '{"name":"count","item":{"Int":{"value":5,"min":0,"max":10}}},'
    '{"name":"ratio","item":{"Float":{"value":0.5,"min":null,"max":1.0}}},'
    '{"name":"label","item":{"String":{"value":"hello"}}},'
    '{"name":"mode","item":{"Enum":{"value":0,"options":["fast","safe","off"]}}}]'
)


@pytest.fixture
def sample_json() -> str:
    return SAMPLE_JSON


@pytest.fixture
def sample_items() -> ItemSet:
    return ItemSet.load(SAMPLE_JSON)


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """configure_logging(force=True) replaces root handlers; put them back."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def headless_ui(monkeypatch: pytest.MonkeyPatch) -> HeadlessUI:
    """Swap the CLI context's UI for a HeadlessUI for the duration of a test."""
    ui = HeadlessUI()
    monkeypatch.setattr(ctx_store, "_ui", ui)
    monkeypatch.setattr(ctx_store, "headless", True)
    return ui


def pytest_terminal_summary(terminalreporter, exitstatus, config):
    """
    Custom hook to print statistics by marker at the end of the test session.
    """
    _ = (exitstatus, config)  # unused in our reporting helper
    marker_stats = defaultdict(lambda: {"passed": 0, "failed": 0, "skipped": 0, "total": 0, "duration": 0.0})

    for outcome in ["passed", "failed", "skipped"]:
        reports = terminalreporter.stats.get(outcome, [])
        for report in reports:
            # Only count the actual test call, or setup skips
            if report.when == "call" or (report.when == "setup" and report.outcome == "skipped"):
                duration = getattr(report, "duration", 0.0)
                for marker in KNOWN_MARKERS:
                    if marker in report.keywords:
                        stats = marker_stats[marker]
                        stats[outcome] += 1
                        stats["total"] += 1
                        stats["duration"] += duration

    if not marker_stats:
        return

    table = Table(title="Test Statistics by Marker", show_header=True, header_style="bold magenta")
    table.add_column("Marker", style="cyan")
    table.add_column("Total", justify="right")
    table.add_column("Passed", justify="right", style="green")
    table.add_column("Failed", justify="right", style="red")
    table.add_column("Skipped", justify="right", style="yellow")
    table.add_column("Duration (s)", justify="right", style="blue")

    for marker in sorted(marker_stats.keys()):
        stats = marker_stats[marker]
        if stats["total"] > 0:
            table.add_row(
                marker,
                str(stats["total"]),
                str(stats["passed"]),
                str(stats["failed"]),
                str(stats["skipped"]),
                f"{stats['duration']:.2f}",
            )

    console = Console()
    console.print("\n")
    console.print(table)
