from typing import Optional

from tabledef.logging import get_logger
from tabledef.protocols import DiagnosticSink
from tabledef.settings import TableDefSettings, get_settings
from tabledef.types import TableSpec


class BaseStatementBuilder:
    """Shared quoting and naming for Hive statement builders.

    Builders only generate SQL strings. They do NOT execute anything, and
    keep no state between calls: each build renders one statement from the
    spec it is given.

    Diagnostics go to the injected sink; without one, the module logger is
    used.
    """

    def __init__(
        self,
        sink: Optional[DiagnosticSink] = None,
        settings: Optional[TableDefSettings] = None,
    ):
        """Initialize the builder.

        Args:
            sink: Receiver of warnings and debug output
            settings: Settings to use, defaults to the process-wide instance
        """
        self.sink = sink if sink is not None else get_logger(self.__class__.__module__)
        self.settings = settings if settings is not None else get_settings()

    def quote_identifier(self, identifier: str) -> str:
        """Quote an identifier with backticks."""
        return f"`{identifier}`"

    def quote_string(self, value: str) -> str:
        """Quote a string literal with single quotes."""
        return f"'{value}'"

    def table_name(self, spec: TableSpec) -> str:
        """Return the output table, qualified by its database when one is set.

        Returns:
            Name like `db`.`table` or `table`
        """
        name = self.quote_identifier(spec.output_table_name)
        if spec.database_name is not None:
            return f"{self.quote_identifier(spec.database_name)}.{name}"
        return name
