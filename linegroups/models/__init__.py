"""Domain models for the line grouping tool.

Every pipeline stage produces one of these frozen structures and hands it to
the next stage; nothing here is mutated after construction.
"""

from .config_models import GroupingConfig, ValidationPolicy
from .corpus import Corpus, IngestStats
from .grouping import ConditionMap, GroupAssignment, Partition
from .rejection_record import RejectionRecord
from .run_result import ReportGroup, GroupReport, RunResult

__all__ = [
    # Configuration models
    "GroupingConfig",
    "ValidationPolicy",
    # Pipeline models
    "Corpus",
    "IngestStats",
    "ConditionMap",
    "GroupAssignment",
    "Partition",
    # Output models
    "RejectionRecord",
    "ReportGroup",
    "GroupReport",
    "RunResult",
]
