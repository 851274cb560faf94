"""WorkFlo authentication and token subsystem."""
