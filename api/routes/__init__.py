"""API route modules."""
from api.routes import catalog, content

__all__ = ["catalog", "content"]
