"""Adapters – optional integrations (Redis, SQLAlchemy, FastAPI, httpx)."""
