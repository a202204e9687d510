"""HTTP API for the round engine."""
