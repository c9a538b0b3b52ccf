# API Routes
"""
API route modules.
"""

from src.api.routes import health, weather

__all__ = ["health", "weather"]
