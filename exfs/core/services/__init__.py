"""Core services: the temporary file editor and the upward file locator."""
