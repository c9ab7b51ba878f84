"""Diagnostics produced by reconciliation.

Mismatches between the model and the json spec are soft: they are collected
as Diagnostic records and never stop a pass.
"""

from enum import Enum

from pydantic import BaseModel


class DiagnosticCategory(str, Enum):
    PATH_NOT_IN_SPEC = "path_not_in_spec"
    PATH_NOT_IN_MODEL = "path_not_in_model"
    QUERY_NOT_IN_SPEC = "query_not_in_spec"
    QUERY_NOT_IN_MODEL = "query_not_in_model"
    BODY_NOT_IN_SPEC = "body_not_in_spec"
    BODY_REQUIRED = "body_required"


class Diagnostic(BaseModel):
    """A single mismatch between a request definition and its json spec."""

    endpoint: str
    request: str
    category: DiagnosticCategory
    name: str | None = None  # offending parameter, None for body mismatches
    message: str


class DiagnosticReport:
    """Ordered collection of diagnostics."""

    def __init__(self):
        self.items: list[Diagnostic] = []

    def add(self, diagnostic: Diagnostic) -> None:
        self.items.append(diagnostic)

    def extend(self, diagnostics: list[Diagnostic]) -> None:
        self.items.extend(diagnostics)

    def __iter__(self):
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def for_endpoint(self, endpoint: str) -> list[Diagnostic]:
        return [d for d in self.items if d.endpoint == endpoint]

    def by_category(self) -> dict[str, int]:
        """Count diagnostics per category, in first-seen order."""
        counts: dict[str, int] = {}
        for d in self.items:
            counts[d.category.value] = counts.get(d.category.value, 0) + 1
        return counts

    def to_dict(self) -> dict:
        return {
            "total": len(self.items),
            "by_category": self.by_category(),
            "diagnostics": [d.model_dump(mode="json") for d in self.items],
        }
