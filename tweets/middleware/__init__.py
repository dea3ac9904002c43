"""Middleware - error handling, metrics and rate limiting."""
