"""logfields - structured log-argument fields for JSON log output."""
