"""
Core domain layer: record store, filter specification, clause compiler,
predicate evaluator, result projector and the browser session
"""

from .clause_compiler import compile_where
from .fields import AgeMode, SortOrder
from .filter_spec import FilterSpec
from .predicate import matches
from .projector import ResultList, project
from .record_store import Record, RecordStore
from .session import BrowserSession, FilterOutcome

__all__ = [
    "AgeMode",
    "BrowserSession",
    "FilterOutcome",
    "FilterSpec",
    "Record",
    "RecordStore",
    "ResultList",
    "SortOrder",
    "compile_where",
    "matches",
    "project",
]
