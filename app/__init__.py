"""User service: layered FastAPI + SQLAlchemy CRUD API for users."""
