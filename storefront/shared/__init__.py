"""Shared cross-cutting helpers: telemetry and HTML sanitization."""
