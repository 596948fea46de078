"""Query options, parameters, type descriptions and result decoding for ODBC and PostgreSQL tools."""

__version__ = "0.1.0"