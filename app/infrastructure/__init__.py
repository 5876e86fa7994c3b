"""Storage backends for the repository protocols."""
