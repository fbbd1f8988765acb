"""Code generation building blocks: Avro to OpenAPI translation, JSON parse trees, byte-range file editing, template variables and a SQLite index of Java import routes."""

__version__ = "0.1.0"