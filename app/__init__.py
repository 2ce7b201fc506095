"""Kaneo project management API."""
