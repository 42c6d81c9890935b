"""Employee domain model for OrgChart.

Employee is the tree node: an id, a name, and an ordered list of direct
reports owned exclusively by this node.
EmployeeRef is the immutable id/name snapshot stored in history entries.
"""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, Field


class EmployeeRef(BaseModel):
    """Immutable snapshot of an employee's identity.

    Not a tree node -- carries no reports, used for history records only.
    """

    model_config = {"frozen": True}

    id: int
    name: str

    def __str__(self) -> str:
        return f"{self.name} (#{self.id})"


class Employee(BaseModel):
    """A node in the organizational hierarchy.

    Nodes are relinked in place by the reparent engine, never cloned, so
    identity (``is``) matters: the object found before a move is the same
    object found after it.  ``id`` is frozen; ``children`` is reassigned
    freely.

    Seed data may use ``uniqueId`` / ``subordinates`` as key names.
    """

    id: int = Field(
        frozen=True,
        validation_alias=AliasChoices("id", "uniqueId", "unique_id"),
    )
    name: str
    children: list[Employee] = Field(
        default_factory=list,
        validation_alias=AliasChoices("children", "subordinates"),
    )

    def ref(self) -> EmployeeRef:
        """Return an immutable id/name snapshot of this employee."""
        return EmployeeRef(id=self.id, name=self.name)

    def report_ids(self) -> list[int]:
        """Ids of the direct reports, in order."""
        return [child.id for child in self.children]

    def has_reports(self) -> bool:
        return len(self.children) > 0

    def __str__(self) -> str:
        return f"{self.name} (#{self.id})"

    def __repr__(self) -> str:
        return f"Employee(id={self.id}, name={self.name!r}, reports={len(self.children)})"

    def pprint(self, *, file: object = None) -> None:
        """Pretty-print the subtree rooted at this employee using rich.

        Args:
            file: Optional file-like object for output (used in tests).
        """
        from orgchart.formatting import pprint_tree

        pprint_tree(self, file=file)


Employee.model_rebuild()
