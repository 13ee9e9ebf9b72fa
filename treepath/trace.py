"""
Observers for the path finder.

Tracers only receive events; whatever they do, the search result is the same.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from rich.console import Console
from rich.markup import escape

from treepath.annotate import TRACE_LOGGER_NAME

NO_MATCHING_CHILDREN = "no_matching_children"
NO_TRAVERSABLE_CHILDREN = "no_traversable_children"


@dataclass(frozen=True)
class TraceEvent:
    kind: str
    depth: int
    node_id: Optional[int] = None
    detail: Dict[str, Any] = field(default_factory=dict)


class BaseTracer(ABC):
    @abstractmethod
    def level(self, depth: int, pool: Sequence[int], candidates: Sequence[int]):
        pass

    @abstractmethod
    def candidate(self, depth: int, node_id: int, remaining: Sequence[int]):
        pass

    @abstractmethod
    def success(self, depth: int, node_id: int):
        pass

    @abstractmethod
    def dead_end(self, depth: int, node_id: int, reason: str):
        pass

    @abstractmethod
    def unresolved(self, depth: int, node_id: int):
        pass


class NoOpTracer(BaseTracer):
    def level(self, depth, pool, candidates):
        pass

    def candidate(self, depth, node_id, remaining):
        pass

    def success(self, depth, node_id):
        pass

    def dead_end(self, depth, node_id, reason):
        pass

    def unresolved(self, depth, node_id):
        pass


class LoggingTracer(BaseTracer):
    """Writes events to the ``treepath.trace`` logger, indented by depth."""

    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.DEBUG):
        self.logger = logger or logging.getLogger(TRACE_LOGGER_NAME)
        self.log_level = level

    def _log(self, depth: int, msg: str, *args):
        self.logger.log(self.log_level, "  " * depth + msg, *args)

    def level(self, depth, pool, candidates):
        self._log(depth, "Level %d pool:%s candidates:%s", depth, list(pool), list(candidates))

    def candidate(self, depth, node_id, remaining):
        self._log(depth, "Trying node: %s remaining:%s", node_id, list(remaining))

    def success(self, depth, node_id):
        self._log(depth, "Traversal success: %s", node_id)

    def dead_end(self, depth, node_id, reason):
        self._log(depth, "Cannot traverse further: %s (%s)", node_id, reason)

    def unresolved(self, depth, node_id):
        self.logger.warning(
            "  " * depth + "Candidate %s could not be resolved at level %d", node_id, depth
        )


class RichTracer(BaseTracer):
    """Prints coloured, indented events to a rich console."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def _print(self, depth: int, text: str):
        self.console.print("  " * depth + text, highlight=False)

    def level(self, depth, pool, candidates):
        pool_text = escape(str(list(pool)))
        candidates_text = escape(str(list(candidates)))
        self._print(
            depth, f"[dim]level {depth}[/dim] pool={pool_text} candidates={candidates_text}"
        )

    def candidate(self, depth, node_id, remaining):
        remaining_text = escape(str(list(remaining)))
        self._print(depth, f"[cyan]try[/cyan] {node_id} [dim]remaining={remaining_text}[/dim]")

    def success(self, depth, node_id):
        self._print(depth, f"[bold green]ok[/bold green] {node_id}")

    def dead_end(self, depth, node_id, reason):
        self._print(depth, f"[red]dead end[/red] {node_id} [dim]({reason})[/dim]")

    def unresolved(self, depth, node_id):
        self._print(depth, f"[bold yellow]unresolved[/bold yellow] {node_id}")


class RecordingTracer(BaseTracer):
    """Keeps every event in ``events``; optionally forwards to another tracer."""

    def __init__(self, forward: Optional[BaseTracer] = None):
        self.events: List[TraceEvent] = []
        self.forward = forward

    def _record(self, event: TraceEvent):
        self.events.append(event)

    def level(self, depth, pool, candidates):
        self._record(
            TraceEvent("level", depth, detail={"pool": list(pool), "candidates": list(candidates)})
        )
        if self.forward is not None:
            self.forward.level(depth, pool, candidates)

    def candidate(self, depth, node_id, remaining):
        self._record(TraceEvent("candidate", depth, node_id, {"remaining": list(remaining)}))
        if self.forward is not None:
            self.forward.candidate(depth, node_id, remaining)

    def success(self, depth, node_id):
        self._record(TraceEvent("success", depth, node_id))
        if self.forward is not None:
            self.forward.success(depth, node_id)

    def dead_end(self, depth, node_id, reason):
        self._record(TraceEvent("dead_end", depth, node_id, {"reason": reason}))
        if self.forward is not None:
            self.forward.dead_end(depth, node_id, reason)

    def unresolved(self, depth, node_id):
        self._record(TraceEvent("unresolved", depth, node_id))
        if self.forward is not None:
            self.forward.unresolved(depth, node_id)

    def kinds(self) -> List[str]:
        return [event.kind for event in self.events]

    def count(self, kind: str) -> int:
        return sum(1 for event in self.events if event.kind == kind)

    def clear(self):
        self.events.clear()


TRACER_TYPES = ("none", "logging", "rich", "recording")


def create_tracer(tracer_type: str, **kwargs) -> BaseTracer:
    if tracer_type == "none":
        return NoOpTracer()
    elif tracer_type == "logging":
        return LoggingTracer(**kwargs)
    elif tracer_type == "rich":
        return RichTracer(**kwargs)
    elif tracer_type == "recording":
        return RecordingTracer(**kwargs)
    else:
        raise ValueError(f"Unknown tracer type: {tracer_type}")
