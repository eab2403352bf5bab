"""Log and error-string hygiene."""
