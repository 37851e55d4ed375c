"""Index models for API responses."""

from pydantic import BaseModel, Field

from core.indexes import Index, IndexColumn
from core.services import DuplicateIndexNotice
from core.types import IndexKind


class IndexColumnResponse(BaseModel):
    """Column of an index."""

    name: str
    seq_in_index: int
    sub_part: int | None = None
    cardinality: int | None = None
    collation: str | None = None
    nullable: bool = False
    expression: str | None = None

    @classmethod
    def from_column(cls, column: IndexColumn) -> "IndexColumnResponse":
        return cls(
            name=column.name,
            seq_in_index=column.seq_in_index,
            sub_part=column.sub_part,
            cardinality=column.cardinality,
            collation=column.collation,
            nullable=column.nullable,
            expression=column.expression,
        )


class IndexResponse(BaseModel):
    """Index of a table."""

    name: str
    kind: IndexKind
    method: str
    unique: bool
    packed: str
    comment: str = ""
    remarks: str = ""
    columns: list[IndexColumnResponse] = Field(default_factory=list)

    @classmethod
    def from_index(cls, index: Index) -> "IndexResponse":
        return cls(
            name=index.name,
            kind=index.kind,
            method=index.method,
            unique=index.is_unique(),
            packed=index.packed_display(),
            comment=index.comment,
            remarks=index.remarks,
            columns=[
                IndexColumnResponse.from_column(column)
                for column in index.columns.values()
            ],
        )


class TableIndexesResponse(BaseModel):
    """Response model for the indexes of a table."""

    database: str
    table: str
    indexes: list[IndexResponse]
    count: int


class DuplicateIndexesResponse(BaseModel):
    """Response model for duplicate index detection."""

    database: str
    table: str
    duplicates: list[DuplicateIndexNotice]
    count: int
