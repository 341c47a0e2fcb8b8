"""Location of the imported data for LOAD DATA."""

from typing import Optional

from tabledef.common.exceptions import argument_error, resolution_error
from tabledef.protocols import PathQualifier


def join_warehouse_path(
    warehouse_dir: Optional[str],
    target_dir: Optional[str],
    input_table_name: Optional[str],
    separator: str = "/",
) -> str:
    """Build the unqualified path of the imported data.

    The target directory wins over the input table name. Either is appended
    to the warehouse directory, which gets exactly one trailing separator
    when set.

    Raises:
        ArgumentError: If neither a target directory nor a table name is given
    """
    if target_dir is None and input_table_name is None:
        raise argument_error(
            "A target directory is required when importing from a query",
            field="target_dir",
        )

    if warehouse_dir is None:
        warehouse_dir = ""
    elif not warehouse_dir.endswith(separator):
        warehouse_dir = warehouse_dir + separator

    if target_dir is not None:
        return warehouse_dir + target_dir
    return warehouse_dir + input_table_name


def resolve_final_path(
    warehouse_dir: Optional[str],
    target_dir: Optional[str],
    input_table_name: Optional[str],
    qualifier: PathQualifier,
    separator: str = "/",
) -> str:
    """Return the qualified path the LOAD DATA statement reads from.

    Args:
        warehouse_dir: Parent directory of imported tables, may be None
        target_dir: Explicit data directory, may be None
        input_table_name: Source table, used when no target directory is set
        qualifier: Adds scheme and authority of the active filesystem
        separator: Path separator

    Returns:
        The qualifier's result, unchanged

    Raises:
        ResolutionError: If the qualifier fails with an OSError
    """
    table_path = join_warehouse_path(warehouse_dir, target_dir, input_table_name, separator)
    try:
        return qualifier.qualify(table_path)
    except OSError as e:
        raise resolution_error(table_path, e) from e
