"""
Models Package

Exports all models for easy importing.
"""

from pixelperfect.models.user import User, AuthSession
from pixelperfect.models.content import Project, Service, Product
from pixelperfect.models.careers import JobOpening, JobApplication
from pixelperfect.models.blog import BlogArticle

__all__ = [
    'User',
    'AuthSession',
    'Project',
    'Service',
    'Product',
    'JobOpening',
    'JobApplication',
    'BlogArticle',
]
