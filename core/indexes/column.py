"""Column participation in an index."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from core.utils import to_int, to_str

ColumnComparableView = tuple[str, int, str | None, int | None, bool]


class IndexColumn(BaseModel):
    """One column (or expression part) of an index.

    Built from a ``SHOW INDEXES`` row and never modified afterwards.
    """

    model_config = ConfigDict(frozen=True)

    name: str = ""
    seq_in_index: int = Field(default=1, description="1-based position in the index")
    sub_part: int | None = Field(
        default=None, description="Prefix length for string/blob columns"
    )
    cardinality: int | None = Field(
        default=None, description="Server estimate of distinct values"
    )
    collation: str | None = Field(default=None, description="A, D or None")
    nullable: bool = False
    expression: str | None = Field(
        default=None, description="Expression of a functional key part"
    )

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "IndexColumn":
        """Create a column from a raw metadata row.

        Unknown keys are ignored and malformed values fall back to defaults.
        """
        return cls(
            name=to_str(row.get("Column_name"), "") or "",
            seq_in_index=to_int(row.get("Seq_in_index"), 1) or 1,
            sub_part=to_int(row.get("Sub_part")),
            cardinality=to_int(row.get("Cardinality")),
            collation=to_str(row.get("Collation")),
            nullable=to_str(row.get("Null"), "") == "YES",
            expression=to_str(row.get("Expression")),
        )

    @property
    def key(self) -> str:
        """Lookup key inside the owning index.

        Expressions get the sequence number appended because the same
        expression text may appear more than once.
        """
        if self.expression is not None:
            return f"{self.name or self.expression}{self.seq_in_index}"
        return self.name

    def null_display(self) -> str:
        """``Yes``/``No`` text for the nullability column."""
        return "Yes" if self.nullable else "No"

    def comparable_view(self) -> ColumnComparableView:
        """Normalized tuple used to compare columns of two indexes."""
        return (
            self.name,
            self.seq_in_index,
            self.collation,
            self.sub_part,
            self.nullable,
        )
