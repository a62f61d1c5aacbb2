"""Alembic migration scripts for the BIASLENS key-value store."""
