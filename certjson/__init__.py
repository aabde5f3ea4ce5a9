"""Split a CA API JSON response into certificate, key and CSR files."""

__version__ = "1.0.0"
