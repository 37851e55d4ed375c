"""Tests for the index entity."""

import pytest

from core.indexes import Index, IndexParams
from core.types import IndexKind


class TestKindDerivation:
    """Test how the index kind is derived from its details."""

    def test_empty_index_is_unique(self) -> None:
        assert Index().kind == IndexKind.UNIQUE

    def test_primary_by_name(self) -> None:
        index = Index({"Key_name": "PRIMARY", "Non_unique": 0, "Index_type": "BTREE"})
        assert index.kind == IndexKind.PRIMARY
        assert index.method == "BTREE"

    @pytest.mark.parametrize("method", ["FULLTEXT", "SPATIAL"])
    def test_method_kinds_clear_method(self, method) -> None:
        index = Index({"Key_name": "k", "Non_unique": 1, "Index_type": method})
        assert index.kind == IndexKind(method)
        assert index.method == ""

    def test_fulltext_from_method_only(self) -> None:
        index = Index({"Index_type": "FULLTEXT"})
        assert index.kind == IndexKind.FULLTEXT
        assert index.method == ""

    def test_unique_and_plain(self) -> None:
        assert Index({"Key_name": "u", "Non_unique": "0"}).kind == IndexKind.UNIQUE
        assert Index({"Key_name": "i", "Non_unique": "1"}).kind == IndexKind.INDEX

    def test_explicit_choice_wins(self) -> None:
        index = Index({"Key_name": "PRIMARY", "Index_choice": "fulltext"})
        assert index.kind == IndexKind.FULLTEXT

    def test_unknown_choice_is_ignored(self) -> None:
        index = Index({"Key_name": "i", "Non_unique": 1, "Index_choice": "CLUSTERED"})
        assert index.kind == IndexKind.INDEX

    def test_set_rederives_kind(self) -> None:
        index = Index({"Key_name": "i", "Non_unique": 1})
        index.set({"Non_unique": 0})
        assert index.kind == IndexKind.UNIQUE
        assert index.name == "i"


class TestIndexDetails:
    """Test index attributes and columns."""

    def test_params_by_field_name(self) -> None:
        params = IndexParams(key_name="idx", index_type="HASH", non_unique=True)
        index = Index(params)
        assert index.name == "idx"
        assert index.method == "HASH"
        assert index.is_unique() is False

    def test_unset_params_keep_values(self) -> None:
        index = Index({"Key_name": "idx", "Index_comment": "lookup"})
        index.set({"Packed": "NULL"})
        assert index.comment == "lookup"
        assert index.packed == "NULL"

    def test_comments(self) -> None:
        index = Index({"Comment": "disabled", "Index_comment": "by name"})
        assert index.comments == "disabled\nby name"
        assert Index({"Index_comment": "only"}).comments == "only"

    def test_packed_display(self) -> None:
        assert Index().packed_display() == "No"
        assert Index({"Packed": "DEFAULT"}).packed_display() == "DEFAULT"

    def test_add_column_rows(self) -> None:
        index = Index({"Key_name": "idx"})
        index.add_column({"Column_name": "a", "Seq_in_index": 1})
        index.add_column({"Column_name": "b", "Seq_in_index": 2})
        index.add_column({"Column_name": None})

        assert index.column_count == 2
        assert list(index.columns) == ["a", "b"]
        assert index.has_column("b")
        assert not index.has_column("c")

    def test_add_column_overwrites_same_key(self) -> None:
        index = Index()
        index.add_column({"Column_name": "a", "Sub_part": 5})
        index.add_column({"Column_name": "a", "Sub_part": 8})
        assert index.column_count == 1
        assert index.columns["a"].sub_part == 8

    def test_add_columns_form_shape(self) -> None:
        index = Index()
        index.add_columns({"names": ["title", "body"], "sub_parts": [10]})

        assert list(index.columns) == ["title", "body"]
        assert index.columns["title"].sub_part == 10
        assert index.columns["body"].sub_part is None

    def test_columns_param(self) -> None:
        index = Index({"Key_name": "idx", "columns": [{"Column_name": "a"}]})
        assert index.has_column("a")

    def test_columns_is_a_copy(self) -> None:
        index = Index()
        index.add_column({"Column_name": "a"})
        index.columns.clear()
        assert index.column_count == 1

    def test_comparable_view_ignores_name(self) -> None:
        first = Index({"Key_name": "a", "Non_unique": 1})
        second = Index({"Key_name": "b", "Non_unique": 1})
        for index in (first, second):
            index.add_column({"Column_name": "x"})
        assert first.comparable_view() == second.comparable_view()

        second.add_column({"Column_name": "y", "Seq_in_index": 2})
        assert first.comparable_view() != second.comparable_view()

    def test_get_index_types(self) -> None:
        assert Index.get_index_types() == ["BTREE", "HASH"]
