"""Core pipeline pieces: config, credentials, prompt building, file writes."""
