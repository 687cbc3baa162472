from xsd_editor.execution.mock import MockSchemaExecutor, SchemaNode

__all__ = ["MockSchemaExecutor", "SchemaNode"]
