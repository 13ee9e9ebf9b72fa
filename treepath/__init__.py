from .annotate import DEFAULT_CHILDREN_KEY, DEFAULT_ID_KEY
from .finder import find_path
from .node import PathMatch, make_children_accessor, make_id_accessor
from .trace import (
    BaseTracer,
    LoggingTracer,
    NoOpTracer,
    RecordingTracer,
    RichTracer,
    TraceEvent,
    create_tracer,
)
from .verify import is_valid_path_match, verify_path_match

__all__ = [
    "DEFAULT_CHILDREN_KEY",
    "DEFAULT_ID_KEY",
    # Search
    "find_path",
    # Data model
    "PathMatch",
    "make_children_accessor",
    "make_id_accessor",
    # Tracing
    "BaseTracer",
    "LoggingTracer",
    "NoOpTracer",
    "RecordingTracer",
    "RichTracer",
    "TraceEvent",
    "create_tracer",
    # Verification
    "is_valid_path_match",
    "verify_path_match",
]
