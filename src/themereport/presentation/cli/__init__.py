"""themereport command-line interface."""
