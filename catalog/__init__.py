"""Book catalog API: authors, publishers and books."""
