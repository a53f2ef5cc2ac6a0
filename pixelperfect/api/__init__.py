"""
API Package
"""

from pixelperfect.api.routes import create_api_blueprint

__all__ = ['create_api_blueprint']
