"""
API Routes

Public reads and admin-gated mutations for every content type.
"""

from flask import Blueprint, current_app, jsonify, request

from pixelperfect.api.resources import register_collection, register_filtered_list
from pixelperfect.auth import admin_required
from pixelperfect.errors import NotFoundError
from pixelperfect.intake import submit_application
from pixelperfect.schemas import (
    BlogArticleIn,
    JobOpeningIn,
    ProductIn,
    ProjectIn,
    ServiceIn,
)
from pixelperfect.storage import is_valid_id


def create_api_blueprint(storage):
    """Build the ``/api`` content blueprint around ``storage``."""
    api_bp = Blueprint('api', __name__, url_prefix='/api')

    # Showcase
    register_filtered_list(api_bp, '/projects/featured', 'projects_featured', storage.projects, featured=True)
    register_collection(api_bp, 'projects', storage.projects, ProjectIn, 'Project')

    @api_bp.route('/projects/category/<category>')
    def projects_by_category(category):
        return jsonify([p.to_dict() for p in storage.projects.list(category=category)])

    register_collection(api_bp, 'services', storage.services, ServiceIn, 'Service')

    register_filtered_list(api_bp, '/products/featured', 'products_featured', storage.products, featured=True)
    register_filtered_list(api_bp, '/products/popular', 'products_popular', storage.products, is_popular=True)
    register_collection(api_bp, 'products', storage.products, ProductIn, 'Product')

    @api_bp.route('/products/category/<category>')
    def products_by_category(category):
        return jsonify([p.to_dict() for p in storage.products.list(category=category)])

    # Careers
    register_collection(api_bp, 'jobs', storage.jobs, JobOpeningIn, 'Job', visible_flag='active')

    @api_bp.route('/applications', methods=['POST'])
    def submit_job_application():
        """Public multipart intake"""
        config = current_app.config
        submit_application(
            storage,
            request.form,
            request.files.get(config['RESUME_FIELD']),
            config['RESUME_MAX_BYTES'],
            config['RESUME_ALLOWED_TYPES'],
        )
        return jsonify({'message': 'Application submitted successfully'}), 201

    @api_bp.route('/applications', methods=['GET'])
    @admin_required
    def list_applications():
        return jsonify([a.to_dict() for a in storage.applications.list()])

    @api_bp.route('/applications/<int:application_id>', methods=['GET'])
    @admin_required
    def get_application(application_id):
        application = storage.applications.get(application_id)
        if application is None:
            raise NotFoundError('Application not found')
        return jsonify(application.to_dict())

    @api_bp.route('/applications/job/<int:job_id>', methods=['GET'])
    @admin_required
    def applications_for_job(job_id):
        if not is_valid_id(job_id):
            return jsonify([])
        return jsonify([a.to_dict() for a in storage.applications.list(job_id=job_id)])

    @api_bp.route('/applications/<int:application_id>', methods=['DELETE'])
    @admin_required
    def delete_application(application_id):
        if not storage.applications.delete(application_id):
            raise NotFoundError('Application not found')
        return '', 204

    # Blog
    register_collection(api_bp, 'blog', storage.articles, BlogArticleIn, 'Article', visible_flag='published')

    return api_bp
