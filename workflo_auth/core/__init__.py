"""Core layer: result types, errors, enums, configuration and wiring."""
