"""Application layer: ports and use cases of the command pipeline."""
