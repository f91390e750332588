"""Package data: the embedded default word list."""
