"""Column analysis: type inference and temporal interval building."""
