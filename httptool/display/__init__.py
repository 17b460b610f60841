"""Console and logging setup."""
