"""Infrastructure: checker discovery, raw result mapping, logging setup."""
