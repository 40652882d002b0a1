"""Application layer: evaluation, parsing, search and reporting."""
