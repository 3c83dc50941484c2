"""Application layer: option resolution, checker services, reporters."""
