# Import all models so SQLAlchemy metadata is populated for Alembic autogenerate
from tenant_app.models.enums import ItemStatus
from tenant_app.models.example_item import ExampleItem

__all__ = [
    "ExampleItem",
    "ItemStatus",
]
