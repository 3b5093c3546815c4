import re
from typing import Iterable

from pgmodel.introspection.snapshot import RawProcedure, RawType
from pgmodel.logging_config import get_logger
from pgmodel.model.entities import (
    CompositeType,
    Function,
    FunctionArg,
    FunctionsByKind,
    Table,
)
from pgmodel.model.type_resolver import resolve_type

logger = get_logger(__name__)


def clean_arg_names(arg_names: list[str | None], count: int) -> list[str]:
    """
    Strip the leading underscore the catalog puts on argument names.

    Unnamed arguments are named after their position, ``arg_<i>``.
    """
    names = []
    for i in range(count):
        name = arg_names[i] if i < len(arg_names) else None
        if not name:
            names.append(f"arg_{i}")
        elif name.startswith("_") and len(name) > 1:
            names.append(name[1:])
        else:
            names.append(name)
    return names


def process_function(raw: RawProcedure, types: list[RawType]) -> Function:
    """
    Resolve argument and return types of a stored procedure.

    ``arg_names``/``arg_type_ids`` hold the input arguments followed by the
    output arguments. When output arguments exist the return type becomes a
    ``<name>_record`` composite carrying them as ``attrs``.
    """
    args_count = raw.input_args_count
    arg_names = clean_arg_names(raw.arg_names, max(len(raw.arg_names), len(raw.arg_type_ids)))

    args = [
        FunctionArg(name=name, type=resolve_type(type_id, types))
        for name, type_id in zip(arg_names[:args_count], raw.arg_type_ids[:args_count])
    ]

    scalar_return = resolve_type(raw.return_type_id, types)
    if args_count < len(raw.arg_names):
        return_type = CompositeType(
            id=scalar_return.id,
            name=f"{raw.name}_record",
            description=scalar_return.description,
            category=scalar_return.category,
            tags=scalar_return.tags,
            attrs=[
                FunctionArg(name=name, type=resolve_type(type_id, types))
                for name, type_id in zip(arg_names[args_count:], raw.arg_type_ids[args_count:])
            ],
        )
    else:
        return_type = scalar_return

    return Function(
        name=raw.name,
        description=raw.description,
        executable=raw.acl_executable,
        is_stable=raw.is_stable,
        arg_names=arg_names[:args_count],
        args_count=args_count,
        args=args,
        return_type=return_type,
        return_type_id=raw.return_type_id,
        returns_set=raw.returns_set,
    )


def function_prefix_matches_table_name(function_name: str, table_names: list[str]) -> str | None:
    """
    Return the first table name that prefixes ``function_name`` as ``<table>_``.

    Ties go to the earliest table in ``table_names``, not the longest match.
    """
    for table_name in table_names:
        if re.match(f"^{re.escape(table_name)}_", function_name):
            return table_name
    return None


def classify_functions(functions: Iterable[Function], tables: list[Table]) -> FunctionsByKind:
    """
    Split functions into computed columns, queries and mutations.

    Volatile functions are mutations. Stable ones are computed columns of the
    table whose name prefixes theirs, otherwise free-standing queries.
    """
    table_names = [table.name for table in tables]
    result = FunctionsByKind(
        computed_columns_by_table={name: [] for name in table_names},
    )

    for function in functions:
        if not function.is_stable:
            result.mutations.append(function)
            continue

        table_name = function_prefix_matches_table_name(function.name, table_names)
        if table_name is None:
            result.queries.append(function)
        else:
            result.computed_columns_by_table[table_name].append(function)

    logger.debug(
        "Classified functions: %d computed columns, %d queries, %d mutations",
        sum(len(fns) for fns in result.computed_columns_by_table.values()),
        len(result.queries),
        len(result.mutations),
    )
    return result
