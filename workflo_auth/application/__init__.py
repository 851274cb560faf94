"""Application layer: commands, queries, handlers and the validation pipeline."""
