"""Mini README: Shared helpers with no pipeline dependencies."""
