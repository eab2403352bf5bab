"""HTTP route layer."""
