"""Court Documents Generator — witness statements, skeleton arguments,
position statements and draft orders as HTML, Word (.docx) and PDF."""

__version__ = "0.1.0"
