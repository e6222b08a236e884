"""Command line and maintenance tooling."""
