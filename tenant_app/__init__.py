"""Multi-tenant application template: FastAPI, SQLAlchemy and Postgres RLS."""
