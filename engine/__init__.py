"""Generic table-driven state-machine engine."""
