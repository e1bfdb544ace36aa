from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

"""Config dataclasses for the line grouping tool.

These are the typed form of config/grouping.yml after loading and schema
validation in linegroups.config.loader. Command line overrides are applied by
producing a new instance with `with_overrides`, never by mutation.
"""

DEFAULT_OUTPUT_PATH = "result.txt"
DEFAULT_DELIMITER = ";"
DEFAULT_QUOTE_CHAR = '"'


class ValidationPolicy(Enum):
    """Row acceptance policy applied by the ingestor.

    The two policies are complete bundles and are never mixed within a run:

    - STRICT: payloads are digits only; repeated lines are kept as separate rows
    - TOLERANT: payloads are digits with at most one '.'; repeated lines are
      dropped after their first occurrence
    """
    STRICT = "strict"
    TOLERANT = "tolerant"

    @property
    def allows_dot(self) -> bool:
        return self is ValidationPolicy.TOLERANT

    @property
    def deduplicates(self) -> bool:
        return self is ValidationPolicy.TOLERANT


@dataclass(frozen=True)
class GroupingConfig:
    """Root configuration object for a grouping run."""
    output_path: str = DEFAULT_OUTPUT_PATH  # Report destination
    delimiter: str = DEFAULT_DELIMITER  # Field separator
    quote_char: str = DEFAULT_QUOTE_CHAR  # Marker wrapping every non-empty field
    validation_policy: ValidationPolicy = ValidationPolicy.TOLERANT
    include_diagnostics: bool = True  # Append time/memory lines to the report
    rejection_log_dir: str | None = None  # None disables the rejection log

    def with_overrides(
        self,
        output_path: str | None = None,
        validation_policy: ValidationPolicy | None = None,
    ) -> GroupingConfig:
        """Return a copy with the given non-None values replaced."""
        changes: dict[str, object] = {}
        if output_path is not None:
            changes["output_path"] = output_path
        if validation_policy is not None:
            changes["validation_policy"] = validation_policy
        if not changes:
            return self
        return replace(self, **changes)
