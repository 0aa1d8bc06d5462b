"""Host adapters for the list engine."""
