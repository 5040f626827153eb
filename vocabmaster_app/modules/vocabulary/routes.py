import os

from flask import jsonify, request
from flask_login import current_user, login_required

from ...core.error_handlers import StructuralParseError, ValidationError
from ...core.validation import validate_payload
from . import vocabulary_bp
from .logics.import_parser import SUPPORTED_FORMATS, parse_import
from .schemas import ImportPreviewRequest, ImportRequest, VocabularyCreateRequest, VocabularyUpdateRequest
from .services.import_service import ImportService
from .services.vocabulary_service import VocabularyService


@vocabulary_bp.route('/vocabulary', methods=['GET'])
@login_required
def list_vocabulary():
    entries = VocabularyService.list_for_user(current_user.id)
    return jsonify([entry.to_dict(include_collection=True) for entry in entries])


@vocabulary_bp.route('/vocabulary/<entry_id>', methods=['GET'])
@login_required
def get_vocabulary(entry_id):
    entry = VocabularyService.get_owned_entry(current_user.id, entry_id)
    return jsonify(entry.to_dict(include_collection=True))


@vocabulary_bp.route('/vocabulary', methods=['POST'])
@login_required
def create_vocabulary():
    payload = validate_payload(VocabularyCreateRequest, request.get_json(silent=True), 'Invalid vocabulary data')
    entry = VocabularyService.create(
        current_user.id,
        payload.word,
        payload.meaning,
        example=payload.example,
        collection_id=payload.collection_id,
        mastered=payload.mastered,
    )
    return jsonify(entry.to_dict()), 201


@vocabulary_bp.route('/vocabulary/<entry_id>', methods=['PATCH'])
@login_required
def update_vocabulary(entry_id):
    payload = validate_payload(VocabularyUpdateRequest, request.get_json(silent=True), 'Invalid vocabulary data')
    changes = payload.model_dump(exclude_unset=True)
    for required in ('word', 'meaning', 'mastered'):
        if required in changes and changes[required] is None:
            raise ValidationError(
                'Invalid vocabulary data',
                errors=[{'field': required, 'message': 'Field cannot be null'}],
            )
    entry = VocabularyService.update(current_user.id, entry_id, changes)
    return jsonify(entry.to_dict())


@vocabulary_bp.route('/vocabulary/<entry_id>/mastered', methods=['POST'])
@login_required
def toggle_mastered(entry_id):
    entry = VocabularyService.toggle_mastered(current_user.id, entry_id)
    return jsonify(entry.to_dict())


@vocabulary_bp.route('/vocabulary/<entry_id>', methods=['DELETE'])
@login_required
def delete_vocabulary(entry_id):
    VocabularyService.delete(current_user.id, entry_id)
    return '', 204


@vocabulary_bp.route('/vocabulary/import', methods=['POST'])
@login_required
def import_vocabulary():
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not isinstance(data.get('vocabulary'), list) or not data['vocabulary']:
        raise ValidationError('Invalid vocabulary data')

    payload = validate_payload(ImportRequest, data, 'Invalid vocabulary data')
    imported = ImportService.import_entries(current_user.id, payload.vocabulary, payload.collection_id)
    return jsonify({'imported': imported}), 201


@vocabulary_bp.route('/vocabulary/import/preview', methods=['POST'])
@login_required
def preview_import():
    """Parse an upload or pasted text and report rows and row errors. Writes nothing."""
    upload = request.files.get('file')
    if upload is not None and upload.filename:
        format_name = os.path.splitext(upload.filename)[1].lstrip('.').lower()
        if format_name not in SUPPORTED_FORMATS:
            raise ValidationError(
                'Unsupported file type',
                errors=[{'field': 'file', 'message': 'Use a .csv, .json or .xlsx file'}],
            )
        content = upload.read()
    else:
        payload = validate_payload(ImportPreviewRequest, request.get_json(silent=True), 'Invalid import data')
        format_name, content = payload.format, payload.content

    try:
        result = parse_import(format_name, content)
    except UnicodeDecodeError as exc:
        raise StructuralParseError(f"Invalid {format_name.upper()} format") from exc
    ImportService.check_row_limit(len(result.rows) + len(result.errors), field='content')
    return jsonify(result.to_dict())
