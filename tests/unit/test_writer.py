"""Unit tests for TableDefWriter and generate_table_definition."""

import pytest
from unittest.mock import Mock

from tabledef.api import generate_table_definition
from tabledef.common.exceptions import (
    ArgumentError,
    ResolutionError,
    ResourceNotFoundError,
    UnsupportedTypeError,
)
from tabledef.constants import SqlType
from tabledef.fs import HadoopPathQualifier
from tabledef.schema import StaticSchemaDescriber
from tabledef.settings import TableDefSettings
from tabledef.types import TableSpec
from tabledef.writer import TableDefWriter

QUERY = "SELECT id, total FROM orders WHERE $CONDITIONS"


@pytest.fixture
def describer():
    return StaticSchemaDescriber(
        tables={
            "orders": {
                "id": SqlType.INTEGER,
                "amount": SqlType.DECIMAL,
                "note": SqlType.VARCHAR,
            },
            "blobs": {
                "id": SqlType.BIGINT,
                "payload": SqlType.BLOB,
            },
        },
        queries={
            QUERY: {"id": SqlType.INTEGER, "total": SqlType.DOUBLE},
        },
    )


@pytest.fixture
def qualifier():
    return HadoopPathQualifier("hdfs://nn:8020")


class TestTableDefWriter:
    """Test column discovery, resolution and statement generation."""

    def test_column_names_from_table(self, describer, qualifier, sink, settings):
        writer = TableDefWriter(TableSpec(table_name="orders"), describer, qualifier, sink, settings)

        assert writer.get_column_names() == ["id", "amount", "note"]

    def test_explicit_columns_win(self, describer, qualifier, sink, settings):
        spec = TableSpec(table_name="orders", columns=["note", "id"])
        writer = TableDefWriter(spec, describer, qualifier, sink, settings)

        assert [column.name for column in writer.resolve_columns()] == ["note", "id"]

    def test_column_names_from_query(self, describer, qualifier, sink, settings):
        spec = TableSpec(sql_query=QUERY, output_table_name="order_totals", target_dir="/staging/totals")
        writer = TableDefWriter(spec, describer, qualifier, sink, settings)

        assert writer.get_column_names() == ["id", "total"]
        assert writer.get_column_types() == {"id": SqlType.INTEGER, "total": SqlType.DOUBLE}

    def test_resolve_columns(self, describer, qualifier, sink, settings):
        writer = TableDefWriter(TableSpec(table_name="orders"), describer, qualifier, sink, settings)

        columns = writer.resolve_columns()

        assert [(c.name, c.hive_type, c.was_approximated) for c in columns] == [
            ("id", "INT", False),
            ("amount", "DOUBLE", True),
            ("note", "STRING", False),
        ]

    def test_overrides_applied(self, describer, qualifier, sink, settings):
        spec = TableSpec(table_name="orders", map_column_hive={"amount": "DECIMAL(10,2)"})
        writer = TableDefWriter(spec, describer, qualifier, sink, settings)

        amount = writer.resolve_columns()[1]

        assert amount.hive_type == "DECIMAL(10,2)"
        assert amount.was_approximated is False

    def test_create_statement_warns_for_approximated_columns(self, describer, qualifier, sink, settings):
        spec = TableSpec(table_name="orders", comments_enabled=False)
        writer = TableDefWriter(spec, describer, qualifier, sink, settings)

        sql = writer.get_create_table_stmt()

        assert sql.startswith("CREATE TABLE IF NOT EXISTS `orders` ( `id` INT, `amount` DOUBLE, `note` STRING) ")
        sink.warning.assert_called_once_with(
            "Column %s had to be cast to a less precise type in Hive", "amount"
        )

    def test_unsupported_type(self, describer, qualifier, sink, settings):
        writer = TableDefWriter(TableSpec(table_name="blobs"), describer, qualifier, sink, settings)

        with pytest.raises(UnsupportedTypeError, match="column payload"):
            writer.get_create_table_stmt()

    def test_validation_precedes_type_resolution(self, describer, qualifier, sink, settings):
        spec = TableSpec(table_name="blobs", map_column_hive={"missing": "STRING"})
        writer = TableDefWriter(spec, describer, qualifier, sink, settings)

        with pytest.raises(ArgumentError, match="No column by the name missing"):
            writer.resolve_columns()

    def test_partition_collision(self, describer, qualifier, sink, settings):
        spec = TableSpec(table_name="orders", partition_key="note")
        writer = TableDefWriter(spec, describer, qualifier, sink, settings)

        with pytest.raises(ArgumentError, match="Partition key note"):
            writer.get_create_table_stmt()

    def test_unknown_table(self, describer, qualifier, sink, settings):
        writer = TableDefWriter(TableSpec(table_name="nope"), describer, qualifier, sink, settings)

        with pytest.raises(ResourceNotFoundError, match="Table nope is not described") as exc_info:
            writer.get_column_names()

        assert isinstance(exc_info.value.__cause__, KeyError)

    def test_unknown_query(self, describer):
        with pytest.raises(ResourceNotFoundError, match="Query is not described") as exc_info:
            describer.get_column_names_for_query("SELECT nothing")

        assert isinstance(exc_info.value.__cause__, KeyError)

    def test_final_path_uses_input_table(self, describer, qualifier, sink, settings):
        spec = TableSpec(table_name="orders", output_table_name="orders_hive", warehouse_dir="/warehouse")
        writer = TableDefWriter(spec, describer, qualifier, sink, settings)

        assert writer.get_final_path() == "hdfs://nn:8020/warehouse/orders"

    def test_final_path_uses_target_dir(self, describer, qualifier, sink, settings):
        spec = TableSpec(sql_query=QUERY, output_table_name="totals", target_dir="/staging/totals")
        writer = TableDefWriter(spec, describer, qualifier, sink, settings)

        assert writer.get_final_path() == "hdfs://nn:8020/staging/totals"

    def test_load_statement(self, describer, qualifier, sink, settings):
        spec = TableSpec(
            table_name="orders",
            warehouse_dir="/warehouse",
            overwrite=True,
            partition_key="dt",
            partition_value="2024-01-01",
        )
        writer = TableDefWriter(spec, describer, qualifier, sink, settings)

        assert writer.get_load_data_stmt() == (
            "LOAD DATA INPATH 'hdfs://nn:8020/warehouse/orders' OVERWRITE "
            "INTO TABLE `orders` PARTITION (dt='2024-01-01')"
        )

    def test_load_statement_qualifier_failure(self, describer, sink, settings):
        qualifier = Mock()
        qualifier.qualify.side_effect = OSError("metadata unavailable")
        writer = TableDefWriter(TableSpec(table_name="orders"), describer, qualifier, sink, settings)

        with pytest.raises(ResolutionError):
            writer.get_load_data_stmt()
        sink.debug.assert_not_called()


class TestGenerateTableDefinition:
    """Test the public entry point."""

    def test_generates_both_statements(self, describer, sink):
        settings = TableDefSettings(default_fs="hdfs://nn:8020")
        spec = TableSpec(table_name="orders", warehouse_dir="/user/hive/warehouse", comments_enabled=False)

        definition = generate_table_definition(spec, describer, sink=sink, settings=settings)

        assert definition.final_path == "hdfs://nn:8020/user/hive/warehouse/orders"
        assert definition.load_statement == (
            "LOAD DATA INPATH 'hdfs://nn:8020/user/hive/warehouse/orders' INTO TABLE `orders`"
        )
        assert definition.create_statement == (
            "CREATE TABLE IF NOT EXISTS `orders` ( `id` INT, `amount` DOUBLE, `note` STRING) "
            r"ROW FORMAT DELIMITED FIELDS TERMINATED BY '\001' LINES TERMINATED BY '\012' "
            "STORED AS TEXTFILE"
        )
        assert [column.name for column in definition.columns] == ["id", "amount", "note"]

    def test_explicit_qualifier(self, describer, sink, settings):
        qualifier = Mock()
        qualifier.qualify.return_value = "viewfs://cluster/orders"

        definition = generate_table_definition(
            TableSpec(table_name="orders"), describer, qualifier=qualifier, sink=sink, settings=settings
        )

        assert definition.final_path == "viewfs://cluster/orders"
        qualifier.qualify.assert_called_once_with("orders")

    def test_default_qualifier_uses_local_filesystem(self, describer, sink, settings):
        definition = generate_table_definition(TableSpec(table_name="orders"), describer, sink=sink, settings=settings)

        assert definition.load_statement == "LOAD DATA INPATH 'file:/orders' INTO TABLE `orders`"

    def test_to_dict(self, describer, sink, settings):
        definition = generate_table_definition(TableSpec(table_name="orders"), describer, sink=sink, settings=settings)

        data = definition.to_dict()

        assert data["final_path"] == "file:/orders"
        assert data["columns"][1] == {
            "name": "amount",
            "source_type": int(SqlType.DECIMAL),
            "hive_type": "DOUBLE",
            "was_approximated": True,
        }
