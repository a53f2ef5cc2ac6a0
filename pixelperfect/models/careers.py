"""
Careers Models
"""

from pixelperfect.extensions import db
from pixelperfect.models.base import SerializerMixin, utcnow


class JobOpening(SerializerMixin, db.Model):
    """Open position; only active openings are listed publicly"""
    __tablename__ = 'job_openings'
    
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.Text, nullable=False)
    location = db.Column(db.String(120), nullable=False)
    type = db.Column(db.String(60), nullable=False)
    salary = db.Column(db.String(120), nullable=False)
    description = db.Column(db.Text, nullable=False)
    active = db.Column(db.Boolean, default=True, nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    
    def __repr__(self):
        return f'<JobOpening {self.title}>'


class JobApplication(SerializerMixin, db.Model):
    """Candidate submission.

    ``job_id`` is a soft reference: deleting the opening leaves it as is.
    ``resume_url`` holds the attachment inline as a data URI.
    """
    __tablename__ = 'job_applications'
    
    id = db.Column(db.Integer, primary_key=True)
    job_id = db.Column(db.Integer, index=True)
    first_name = db.Column(db.String(120), nullable=False)
    last_name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    position = db.Column(db.String(255), nullable=False)
    resume_url = db.Column(db.Text)
    cover_letter = db.Column(db.Text)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    
    def __repr__(self):
        return f'<JobApplication {self.first_name} {self.last_name} job:{self.job_id}>'
