"""Domain modules: accounts, scripts, generation and analytics."""
