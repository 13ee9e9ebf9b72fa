import logging

import pytest
from rich.console import Console

from treepath import (
    LoggingTracer,
    NoOpTracer,
    RecordingTracer,
    RichTracer,
    create_tracer,
    find_path,
)
from treepath.annotate import TRACE_LOGGER_NAME


def node(node_id, *sub_categories):
    return {"id": node_id, "sub_categories": list(sub_categories)}


EXAMPLE = [node(1, node(2), node(3, node(4)))]


def test_recording_tracer_sees_the_search_in_order():
    tracer = RecordingTracer()

    find_path([4, 1, 3], EXAMPLE, tracer=tracer)

    assert [(e.kind, e.depth, e.node_id) for e in tracer.events] == [
        ("level", 0, None),
        ("candidate", 0, 1),
        ("level", 1, None),
        ("candidate", 1, 3),
        ("level", 2, None),
        ("candidate", 2, 4),
        ("success", 2, 4),
        ("success", 1, 3),
        ("success", 0, 1),
    ]
    assert tracer.events[0].detail == {"pool": [4, 1, 3], "candidates": [1]}
    assert tracer.events[1].detail == {"remaining": [4, 3]}


def test_recording_tracer_reports_dead_ends():
    tracer = RecordingTracer()

    assert find_path([1, 2, 4], EXAMPLE, tracer=tracer) is None
    assert tracer.count("dead_end") == 2
    assert tracer.count("success") == 0


@pytest.mark.parametrize("pool", [[4, 1, 3], [1, 2, 4], [2], []])
def test_tracers_do_not_change_results(pool):
    expected = find_path(pool, EXAMPLE)
    tracers = [
        NoOpTracer(),
        LoggingTracer(),
        RichTracer(console=Console(record=True)),
        RecordingTracer(forward=RecordingTracer()),
    ]

    for tracer in tracers:
        assert find_path(pool, EXAMPLE, tracer=tracer) == expected


def test_recording_tracer_forwards_and_clears():
    inner = RecordingTracer()
    outer = RecordingTracer(forward=inner)

    find_path([1, 3], EXAMPLE, tracer=outer)

    assert outer.kinds() == inner.kinds()
    outer.clear()
    assert outer.events == []
    assert inner.events != []


def test_logging_tracer_writes_indented_messages(caplog, monkeypatch):
    # The CLI detaches the trace logger from the root handlers.
    monkeypatch.setattr(logging.getLogger(TRACE_LOGGER_NAME), "propagate", True)
    caplog.set_level(logging.DEBUG, logger=TRACE_LOGGER_NAME)

    find_path([4, 1, 3], EXAMPLE, tracer=LoggingTracer())

    messages = [r.getMessage() for r in caplog.records if r.name == TRACE_LOGGER_NAME]
    assert "Trying node: 1 remaining:[4, 3]" in messages
    assert "    Traversal success: 4" in messages
    assert all(r.levelno == logging.DEBUG for r in caplog.records if r.name == TRACE_LOGGER_NAME)


def test_rich_tracer_prints_events():
    console = Console(record=True, width=120)

    find_path([1, 2, 4], EXAMPLE, tracer=RichTracer(console=console))

    output = console.export_text()
    assert "try 1" in output
    assert "dead end 2 (no_matching_children)" in output
    assert "pool=[1, 2, 4]" in output


def test_create_tracer_builds_each_known_type():
    assert isinstance(create_tracer("none"), NoOpTracer)
    assert isinstance(create_tracer("logging"), LoggingTracer)
    assert isinstance(create_tracer("rich", console=Console()), RichTracer)
    assert isinstance(create_tracer("recording"), RecordingTracer)

    with pytest.raises(ValueError):
        create_tracer("stdout")
