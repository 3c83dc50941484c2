"""Domain layer: theme results, findings, configuration, ports, exceptions."""
