"""ORM model registry: import all models so Alembic autogenerate discovers them."""

from reach_api.models.visit import Visit

__all__ = [
    "Visit",
]
