"""Index entity and its parameter model."""

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.constants import INDEX_METHODS, PRIMARY_INDEX_NAME
from core.indexes.column import ColumnComparableView, IndexColumn
from core.log import get_logger
from core.types import IndexKind
from core.utils import to_int, to_str

logger = get_logger(__name__)

IndexComparableView = tuple[str | None, str, tuple[ColumnComparableView, ...]]


class IndexParams(BaseModel):
    """Index details as delivered by ``SHOW INDEXES`` or an index form.

    Field aliases are the server column names. Every field is optional and
    an unset (None) field leaves the index attribute untouched. Values that
    cannot be interpreted are treated as unset.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    schema_name: str | None = Field(default=None, alias="Schema")
    table: str | None = Field(default=None, alias="Table")
    key_name: str | None = Field(default=None, alias="Key_name")
    index_type: str | None = Field(
        default=None, alias="Index_type", description="BTREE, HASH, RTREE ..."
    )
    comment: str | None = Field(
        default=None, alias="Comment", description="Server remarks"
    )
    index_comment: str | None = Field(
        default=None, alias="Index_comment", description="COMMENT given at creation"
    )
    non_unique: bool | None = Field(default=None, alias="Non_unique")
    packed: str | None = Field(default=None, alias="Packed")
    index_choice: IndexKind | None = Field(
        default=None, alias="Index_choice", description="Explicit kind override"
    )
    key_block_size: int | None = Field(default=None, alias="Key_block_size")
    parser: str | None = Field(default=None, alias="Parser")
    columns: list[dict[str, Any]] | dict[str, Any] | None = None

    @field_validator(
        "schema_name",
        "table",
        "key_name",
        "index_type",
        "comment",
        "index_comment",
        "packed",
        "parser",
        mode="before",
    )
    @classmethod
    def coerce_text(cls, value: Any) -> str | None:
        return to_str(value)

    @field_validator("key_block_size", mode="before")
    @classmethod
    def coerce_int(cls, value: Any) -> int | None:
        return to_int(value)

    @field_validator("non_unique", mode="before")
    @classmethod
    def coerce_flag(cls, value: Any) -> bool | None:
        if isinstance(value, bool):
            return value
        number = to_int(value)
        return None if number is None else number != 0

    @field_validator("index_choice", mode="before")
    @classmethod
    def coerce_kind(cls, value: Any) -> IndexKind | None:
        text = to_str(value)
        if text is None:
            return None
        try:
            return IndexKind(text.upper())
        except ValueError:
            logger.debug(f"Ignoring unknown index choice: {text}")
            return None

    @field_validator("columns", mode="before")
    @classmethod
    def coerce_columns(cls, value: Any) -> list[dict[str, Any]] | dict[str, Any] | None:
        if isinstance(value, Mapping):
            return dict(value)
        if isinstance(value, (list, tuple)):
            return [dict(column) for column in value if isinstance(column, Mapping)]
        return None


class Index:
    """A named index of one table.

    Instances handed out by an ``IndexRegistry`` are shared: callers rely on
    getting the same object back for the same (schema, table, name).
    """

    def __init__(self, params: IndexParams | Mapping[str, Any] | None = None) -> None:
        self.schema = ""
        self.table = ""
        self.name = ""
        self.method = ""
        self.kind = IndexKind.INDEX
        self.remarks = ""
        self.comment = ""
        self.non_unique = False
        self.packed: str | None = None
        self.key_block_size = 0
        self.parser = ""
        self._columns: dict[str, IndexColumn] = {}
        self.set(params if params is not None else IndexParams())

    def __repr__(self) -> str:
        return (
            f"Index(schema={self.schema!r}, table={self.table!r}, "
            f"name={self.name!r}, kind={self.kind.value}, "
            f"columns={list(self._columns)})"
        )

    def set(self, params: IndexParams | Mapping[str, Any]) -> None:
        """Apply index details and re-derive the index kind.

        Kind priority: explicit choice, then the PRIMARY name, then a
        FULLTEXT or SPATIAL method (which is cleared), then uniqueness.
        """
        if not isinstance(params, IndexParams):
            params = IndexParams.model_validate(dict(params))

        if params.columns is not None:
            self.add_columns(params.columns)

        if params.schema_name is not None:
            self.schema = params.schema_name
        if params.table is not None:
            self.table = params.table
        if params.key_name is not None:
            self.name = params.key_name
        if params.index_type is not None:
            self.method = params.index_type
        if params.comment is not None:
            self.remarks = params.comment
        if params.index_comment is not None:
            self.comment = params.index_comment
        if params.non_unique is not None:
            self.non_unique = params.non_unique
        if params.packed is not None:
            self.packed = params.packed

        if params.index_choice is not None:
            self.kind = params.index_choice
        elif self.name == PRIMARY_INDEX_NAME:
            self.kind = IndexKind.PRIMARY
        elif self.method == IndexKind.FULLTEXT.value:
            self.kind = IndexKind.FULLTEXT
            self.method = ""
        elif self.method == IndexKind.SPATIAL.value:
            self.kind = IndexKind.SPATIAL
            self.method = ""
        elif not self.non_unique:
            self.kind = IndexKind.UNIQUE
        else:
            self.kind = IndexKind.INDEX

        if params.key_block_size is not None:
            self.key_block_size = params.key_block_size
        if params.parser is not None:
            self.parser = params.parser

    def set_name(self, name: str) -> None:
        self.name = str(name)

    def add_column(self, row: Mapping[str, Any]) -> None:
        """Add (or overwrite) the column described by a metadata row.

        Rows without a column name or expression are skipped.
        """
        column = IndexColumn.from_row(row)
        if not column.key:
            logger.debug(f"Skipping index row without column: {dict(row)}")
            return
        self._columns[column.key] = column

    def add_columns(self, columns: Mapping[str, Any] | Iterable[Mapping[str, Any]]) -> None:
        """Add several columns.

        Accepts either metadata rows or the form shape
        ``{"names": [...], "sub_parts": [...]}``.
        """
        if isinstance(columns, Mapping):
            names = columns.get("names") or []
            sub_parts = columns.get("sub_parts") or []
            rows: list[Mapping[str, Any]] = [
                {
                    "Column_name": name,
                    "Sub_part": sub_parts[position] if position < len(sub_parts) else None,
                }
                for position, name in enumerate(names)
            ]
        else:
            rows = list(columns)

        for row in rows:
            self.add_column(row)

    def has_column(self, name: str) -> bool:
        return name in self._columns

    @property
    def columns(self) -> dict[str, IndexColumn]:
        """Columns keyed by column key, in index order."""
        return dict(self._columns)

    @property
    def column_count(self) -> int:
        return len(self._columns)

    @property
    def comments(self) -> str:
        """Remarks and comment joined by a newline."""
        if self.remarks:
            return f"{self.remarks}\n{self.comment}"
        return self.comment

    def is_unique(self) -> bool:
        return not self.non_unique

    def packed_display(self) -> str:
        """How the key is packed, or ``No``."""
        return "No" if self.packed is None else self.packed

    def comparable_view(self) -> IndexComparableView:
        """Structural projection used to detect duplicate indexes.

        The index name is deliberately left out.
        """
        return (
            self.packed,
            self.kind.value,
            tuple(column.comparable_view() for column in self._columns.values()),
        )

    @staticmethod
    def get_index_types() -> list[str]:
        """Index methods offered when creating an index."""
        return list(INDEX_METHODS)
