from flask import current_app, jsonify, request
from flask_login import current_user, login_required

from ...core.error_handlers import ValidationError
from ...core.seeds import seed_sample_data
from ...core.validation import validate_payload
from ...models import Collection
from . import collections_bp
from .schemas import CollectionCreateRequest, CollectionUpdateRequest
from .services import CollectionService


@collections_bp.route('/collections', methods=['GET'])
@login_required
def list_collections():
    return jsonify(CollectionService.list_with_stats(current_user.id))


@collections_bp.route('/collections/<collection_id>', methods=['GET'])
@login_required
def get_collection(collection_id):
    collection = CollectionService.get_owned_collection(current_user.id, collection_id)
    return jsonify(collection.to_dict())


@collections_bp.route('/collections/<collection_id>/vocabulary', methods=['GET'])
@login_required
def get_collection_with_vocabulary(collection_id):
    return jsonify(CollectionService.get_with_vocabulary(current_user.id, collection_id))


@collections_bp.route('/collections/<collection_id>/vocabulary/words', methods=['GET'])
@login_required
def get_collection_words(collection_id):
    """Ordered entries used to build a study session."""
    entries = CollectionService.list_words(current_user.id, collection_id)
    return jsonify([entry.to_dict() for entry in entries])


@collections_bp.route('/collections', methods=['POST'])
@login_required
def create_collection():
    payload = validate_payload(CollectionCreateRequest, request.get_json(silent=True), 'Invalid collection data')
    collection = CollectionService.create(
        current_user.id,
        payload.name,
        description=payload.description,
        color=payload.color,
    )
    return jsonify(collection.to_dict()), 201


@collections_bp.route('/collections/<collection_id>', methods=['PATCH'])
@login_required
def update_collection(collection_id):
    payload = validate_payload(CollectionUpdateRequest, request.get_json(silent=True), 'Invalid collection data')
    changes = payload.model_dump(exclude_unset=True)
    if changes.get('name', '') is None:
        raise ValidationError('Invalid collection data', errors=[{'field': 'name', 'message': 'Name cannot be null'}])
    if 'color' in changes and changes['color'] is None:
        changes.pop('color')
    collection = CollectionService.update(current_user.id, collection_id, changes)
    return jsonify(collection.to_dict())


@collections_bp.route('/collections/<collection_id>', methods=['DELETE'])
@login_required
def delete_collection(collection_id):
    CollectionService.delete(current_user.id, collection_id)
    return '', 204


@collections_bp.route('/seed', methods=['POST'])
@login_required
def seed():
    if Collection.query.filter_by(user_id=current_user.id).first() is not None:
        raise ValidationError('Data already exists. Clear existing data first if you want to reseed.')
    count = seed_sample_data(current_user.id)
    current_app.logger.info("Seed requested by user %s", current_user.id)
    return jsonify({'message': 'Database seeded successfully', 'imported': count})
