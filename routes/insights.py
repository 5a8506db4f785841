from flask import Blueprint, jsonify, request
from sqlalchemy.exc import SQLAlchemyError
from models.check_in import CheckIn
from utils.errors import StorageFailure
from utils.insights import summarize, DEFAULT_TIMEFRAME

# Create blueprint
insights_bp = Blueprint('insights', __name__)

@insights_bp.route('/insights')
def index():
    """Averages, state distribution and trend points for the week or month view."""
    timeframe = request.args.get('timeframe', DEFAULT_TIMEFRAME, type=str).lower()

    try:
        check_ins = CheckIn.newest_first().all()
    except SQLAlchemyError as e:
        raise StorageFailure("Failed to fetch check-ins") from e

    return jsonify(summarize(check_ins, timeframe))
