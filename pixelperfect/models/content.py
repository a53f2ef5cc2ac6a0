"""
Showcase Models

Projects, services and products shown on the public site.
"""

from pixelperfect.extensions import db
from pixelperfect.models.base import SerializerMixin, utcnow


class Project(SerializerMixin, db.Model):
    """Portfolio entry on the showcase page"""
    __tablename__ = 'projects'
    
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.Text, nullable=False)
    description = db.Column(db.Text, nullable=False)
    category = db.Column(db.String(120), nullable=False, index=True)
    client = db.Column(db.Text, nullable=False)
    image_url = db.Column(db.Text, nullable=False)
    featured = db.Column(db.Boolean, default=False, nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    
    def __repr__(self):
        return f'<Project {self.title}>'


class Service(SerializerMixin, db.Model):
    """Service offering with an ordered list of feature bullets"""
    __tablename__ = 'services'
    
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.Text, nullable=False)
    description = db.Column(db.Text, nullable=False)
    icon = db.Column(db.String(120), nullable=False)
    features = db.Column(db.JSON, nullable=False, default=list)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    
    def __repr__(self):
        return f'<Service {self.title}>'


class Product(SerializerMixin, db.Model):
    """Packaged product with pricing, screenshots and a demo link"""
    __tablename__ = 'products'
    
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.Text, nullable=False)
    description = db.Column(db.Text, nullable=False)
    category = db.Column(db.String(120), nullable=False, index=True)
    price = db.Column(db.String(120), nullable=False)
    features = db.Column(db.JSON, nullable=False, default=list)
    image_url = db.Column(db.Text, nullable=False)
    logo = db.Column(db.Text)
    screenshots = db.Column(db.JSON, nullable=False, default=list)
    demo_url = db.Column(db.Text)
    featured = db.Column(db.Boolean, default=False, nullable=False)
    is_popular = db.Column(db.Boolean, default=False, nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    
    def __repr__(self):
        return f'<Product {self.name}>'
