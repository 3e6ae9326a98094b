"""Tag catalog parser: bracketed section headers grouping verbatim tag lines."""
