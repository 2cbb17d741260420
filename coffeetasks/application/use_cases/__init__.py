"""Use cases (batch jobs)."""
