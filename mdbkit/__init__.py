"""Building blocks for Microsoft Access (Jet) database pages: currency and numeric
value text, the RC4 page cipher, data-page layout, work tables, table and column
definitions, read statistics and connection strings."""

__version__ = "0.1.0"