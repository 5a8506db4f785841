from flask import Blueprint, jsonify, current_app
from sqlalchemy.exc import SQLAlchemyError
from models.check_in import CheckIn
from extensions import db
from forms import CheckInForm, json_formdata
from utils.errors import ValidationFailure, StorageFailure
from utils.payloads import read_json_object

# Create blueprint
check_ins_bp = Blueprint('check_ins', __name__)

@check_ins_bp.route('/check-ins', methods=['GET'])
def list_check_ins():
    try:
        check_ins = CheckIn.newest_first().all()
    except SQLAlchemyError as e:
        raise StorageFailure("Failed to fetch check-ins") from e

    return jsonify([check_in.to_dict() for check_in in check_ins])

@check_ins_bp.route('/check-ins', methods=['POST'])
def create_check_in():
    form = CheckInForm(formdata=json_formdata(read_json_object()))
    if not form.validate():
        raise ValidationFailure(form.first_error(), fields=form.errors)

    check_in = CheckIn(
        mood=form.mood.data,
        stress_level=form.stress_level.data,
        sleep_quality=form.sleep_quality.data,
        focus_level=form.focus_level.data,
        journal_text=form.journal_text.data,
        analysis_state=form.analysis_state.data,
        analysis_confidence=form.analysis_confidence.data,
    )

    try:
        db.session.add(check_in)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        raise StorageFailure("Failed to save check-in") from e

    current_app.logger.info(f"Saved check-in {check_in.id} ({check_in.analysis_state or 'unanalyzed'})")
    return jsonify(check_in.to_dict()), 201
