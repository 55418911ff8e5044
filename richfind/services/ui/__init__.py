"""Qt-facing adapters for the find/replace engine."""
