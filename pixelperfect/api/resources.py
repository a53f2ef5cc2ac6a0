"""
CRUD route wiring shared by every content collection.
"""

from flask import jsonify, request
from flask_login import current_user

from pixelperfect.auth import admin_required, is_admin
from pixelperfect.errors import NotFoundError
from pixelperfect.schemas import validate, validate_partial


def register_collection(bp, name, repo, schema, label, visible_flag=None):
    """Add list/get/create/update/delete routes for ``/<name>``.

    ``visible_flag`` names a boolean column (``active``, ``published``).
    When given, the public list only returns rows where it is true, the
    full list moves to ``/<name>/all`` behind the admin gate, and hidden
    rows answer 404 to anyone but an admin.
    """
    not_found = f'{label} not found'

    def load_visible(record_id):
        record = repo.get(record_id)
        if record is None:
            raise NotFoundError(not_found)
        if visible_flag and not getattr(record, visible_flag) and not is_admin(current_user):
            raise NotFoundError(not_found)
        return record

    def list_records():
        filters = {visible_flag: True} if visible_flag else {}
        return jsonify([record.to_dict() for record in repo.list(**filters)])

    def list_all_records():
        return jsonify([record.to_dict() for record in repo.list()])

    def get_record(record_id):
        return jsonify(load_visible(record_id).to_dict())

    def create_record():
        data = validate(schema, request.get_json(silent=True), label.lower())
        record = repo.create(**data.model_dump())
        return jsonify(record.to_dict()), 201

    def update_record(record_id):
        record = repo.get(record_id)
        if record is None:
            raise NotFoundError(not_found)
        changes = validate_partial(schema, record.to_dict(), request.get_json(silent=True), label.lower())
        record = repo.update(record_id, **changes)
        return jsonify(record.to_dict())

    def delete_record(record_id):
        if not repo.delete(record_id):
            raise NotFoundError(not_found)
        return '', 204

    bp.add_url_rule(f'/{name}', f'{name}_list', list_records, methods=['GET'])
    if visible_flag:
        bp.add_url_rule(f'/{name}/all', f'{name}_list_all', admin_required(list_all_records), methods=['GET'])
    bp.add_url_rule(f'/{name}/<int:record_id>', f'{name}_get', get_record, methods=['GET'])
    bp.add_url_rule(f'/{name}', f'{name}_create', admin_required(create_record), methods=['POST'])
    bp.add_url_rule(f'/{name}/<int:record_id>', f'{name}_update', admin_required(update_record), methods=['PUT'])
    bp.add_url_rule(f'/{name}/<int:record_id>', f'{name}_delete', admin_required(delete_record), methods=['DELETE'])


def register_filtered_list(bp, rule, endpoint, repo, **filters):
    """Public list route returning rows that match fixed ``filters``."""
    def list_filtered():
        return jsonify([record.to_dict() for record in repo.list(**filters)])
    bp.add_url_rule(rule, endpoint, list_filtered, methods=['GET'])
