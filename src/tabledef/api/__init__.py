from tabledef.api.statements import generate_table_definition

__all__ = ["generate_table_definition"]
