"""Report formatting."""
