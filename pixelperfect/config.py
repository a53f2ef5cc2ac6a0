"""
Configuration settings for the PixelPerfect agency site
"""
import os
from datetime import timedelta


class Config:
    """Flask application configuration"""
    
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'
    
    # Relative sqlite paths resolve against the instance folder
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///pixelperfect.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    
    # Seeded administrator (password is hashed before it is stored)
    ADMIN_USERNAME = os.environ.get('ADMIN_USERNAME') or 'admin@pixelperfect.com'
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD') or 'admin123'
    SEED_DATA = os.environ.get('SEED_DATA', '1').lower() not in ('0', 'false', 'no')
    
    PASSWORD_HASH_METHOD = 'pbkdf2:sha256'
    
    # Server-side sessions, refreshed on every resolved request
    SESSION_LIFETIME = timedelta(hours=int(os.environ.get('SESSION_LIFETIME_HOURS', 24)))
    AUTH_COOKIE_NAME = 'pp_sid'
    AUTH_COOKIE_SECURE = os.environ.get('AUTH_COOKIE_SECURE', '').lower() in ('1', 'true', 'yes')
    
    # Job application attachments
    RESUME_FIELD = 'resume'
    RESUME_MAX_BYTES = 5 * 1024 * 1024
    RESUME_ALLOWED_TYPES = (
        'application/pdf',
        'application/msword',
        'application/vnd.openxmlformats-officedocument.wordprocessingml.document',
        'text/plain',
    )


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SEED_DATA = False
    PASSWORD_HASH_METHOD = 'pbkdf2:sha256:1000'
