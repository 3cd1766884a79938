"""
Dialect-aware SQL expressions for JSON list columns.

``json_array_overlaps(column, values)`` is true when the JSON array stored in
``column`` shares at least one element with ``values``:

  PostgreSQL:  users.interests ?| ARRAY[$1, $2]::text[]
  SQLite:      EXISTS (SELECT 1 FROM json_each(users.interests)
                       WHERE json_each.value IN (?, ?))

Both forms keep the predicate inside the query so it composes with the other
WHERE clauses, LIMIT and OFFSET.
"""

from collections.abc import Sequence

from sqlalchemy import String, literal
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.sql.expression import ColumnElement
from sqlalchemy.types import Boolean


class json_array_overlaps(ColumnElement[bool]):
    inherit_cache = False
    type = Boolean()

    def __init__(self, column: ColumnElement, values: Sequence[str]):
        if not values:
            raise ValueError("json_array_overlaps requires at least one value")
        self.column = column
        self.values = [literal(v, String()) for v in values]


def _render_values(element: json_array_overlaps, compiler, **kw) -> str:
    return ", ".join(compiler.process(v, **kw) for v in element.values)


@compiles(json_array_overlaps)
def _compile_json_each(element: json_array_overlaps, compiler, **kw) -> str:
    column = compiler.process(element.column, **kw)
    values = _render_values(element, compiler, **kw)
    return f"EXISTS (SELECT 1 FROM json_each({column}) WHERE json_each.value IN ({values}))"


@compiles(json_array_overlaps, "postgresql")
def _compile_jsonb(element: json_array_overlaps, compiler, **kw) -> str:
    column = compiler.process(element.column, **kw)
    values = _render_values(element, compiler, **kw)
    return f"({column} ?| ARRAY[{values}]::text[])"
