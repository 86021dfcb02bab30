"""Tests for UPDATE generation."""

import pytest

from sqlbind import Raw, SQLBuilderError, table


class TestUpdate:
    """Test cases for Builder.for_update."""

    def test_assignments_precede_where_values(self) -> None:
        builder = table("users")
        builder.add_predicate(builder.predicates.define("id", "=", 7))

        sql, parameters = builder.for_update({"age": 5})

        assert sql == 'UPDATE "users" SET "age"=? WHERE "id" = ?'
        assert parameters == [5, 7]

    def test_field_order_follows_mapping(self) -> None:
        result = table("users", "postgres").for_update({"name": "x", "age": 3, "active": False})

        assert result.sql == 'UPDATE "users" SET "name"=$1, "age"=$2, "active"=$3'
        assert result.parameters == ["x", 3, False]

    def test_pairs_and_paging(self) -> None:
        result = table("users").where("age", "<", 18).limit(10).for_update([("minor", True)])

        assert result.sql == 'UPDATE "users" SET "minor"=? WHERE "age" < ? LIMIT ?'
        assert result.parameters == [True, 18, 10]

    def test_raw_assignment(self) -> None:
        result = table("users").for_update({"updated_at": Raw("NOW()"), "name": "x"})

        assert result.sql == 'UPDATE "users" SET "updated_at"=NOW(), "name"=?'
        assert result.parameters == ["x"]

    def test_no_where_without_conditions(self) -> None:
        assert "WHERE" not in table("users").for_update({"a": 1}).sql

    def test_empty_assignments(self) -> None:
        with pytest.raises(SQLBuilderError, match="at least one assignment"):
            table("users").for_update({})

    def test_render_many_shapes_from_one_builder(self) -> None:
        builder = table("users").where("id", "=", 9)

        update = builder.for_update({"name": "x"})
        delete = builder.for_delete()
        select = builder.for_select()

        assert update.parameters == ["x", 9]
        assert delete.parameters == [9]
        assert select.parameters == [9]
        assert builder.parameters == [9]
