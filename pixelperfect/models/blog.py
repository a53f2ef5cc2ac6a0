"""
Blog Article Model
"""

from pixelperfect.extensions import db
from pixelperfect.models.base import SerializerMixin, utcnow


class BlogArticle(SerializerMixin, db.Model):
    """Article with rich-text content; drafts stay hidden from the public"""
    __tablename__ = 'blog_articles'
    
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.Text, nullable=False)
    content = db.Column(db.Text, nullable=False)
    excerpt = db.Column(db.Text, nullable=False)
    category = db.Column(db.String(120), nullable=False, index=True)
    image_url = db.Column(db.Text, nullable=False)
    author_name = db.Column(db.String(255), nullable=False)
    author_image_url = db.Column(db.Text, nullable=False)
    published = db.Column(db.Boolean, default=False, nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    
    def __repr__(self):
        return f'<BlogArticle {self.title}>'
