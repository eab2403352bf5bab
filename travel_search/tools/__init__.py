"""Capability interfaces for pluggable providers."""
