"""Core utilities: settings, logging, errors, geometry codec and feature table."""
