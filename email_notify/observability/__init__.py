"""Observability: structured logging with secret and PII redaction."""
