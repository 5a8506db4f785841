from flask import Blueprint, jsonify, current_app
from ai_services.wellbeing_analyzer import WellbeingAnalyzer
from forms import AnalysisRequestForm, json_formdata
from utils.errors import ValidationFailure
from utils.payloads import read_json_object

# Create blueprint
analysis_bp = Blueprint('analysis', __name__)

# The check-in form posts camelCase keys to this endpoint
REQUEST_FIELDS = {
    'mood': 'mood',
    'stressLevel': 'stress_level',
    'sleepQuality': 'sleep_quality',
    'focusLevel': 'focus_level',
    'journalText': 'journal_text',
}

@analysis_bp.route('/analyze', methods=['POST'])
def analyze():
    payload = read_json_object()
    fields = {
        field_name: payload[key]
        for key, field_name in REQUEST_FIELDS.items()
        if key in payload
    }

    form = AnalysisRequestForm(formdata=json_formdata(fields))
    if not form.validate():
        raise ValidationFailure(form.first_error(), fields=form.errors)

    analyzer = WellbeingAnalyzer.from_config(current_app.config)
    result = analyzer.analyze(
        mood=form.mood.data,
        stress_level=form.stress_level.data,
        sleep_quality=form.sleep_quality.data,
        focus_level=form.focus_level.data,
        journal_text=form.journal_text.data or None,
    )

    return jsonify(result.to_dict())
