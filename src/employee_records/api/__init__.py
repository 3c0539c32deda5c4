"""HTTP API for the employee record store."""
