"""Core building blocks shared by every hearth-access feature."""
