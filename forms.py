from flask_wtf import FlaskForm
from werkzeug.datastructures import ImmutableMultiDict
from wtforms import StringField, IntegerField
from wtforms.validators import (
    DataRequired,
    StopValidation,
    NumberRange,
    AnyOf,
    Optional,
)
from models.choices import Mood, SleepQuality, FocusLevel, AnalysisState, values


class WholeNumberField(IntegerField):
    """Integer field that refuses booleans and fractional numbers from JSON."""

    def process_formdata(self, valuelist):
        if not valuelist:
            return
        value = valuelist[0]
        if (isinstance(value, bool)
                or not isinstance(value, (int, float, str))
                or (isinstance(value, float) and not value.is_integer())):
            self.data = None
            raise ValueError("Must be a whole number.")
        super().process_formdata([value])


class TextField(StringField):
    """String field that refuses lists, numbers and other non-string JSON values."""

    def process_formdata(self, valuelist):
        if not valuelist:
            return
        if not isinstance(valuelist[0], str):
            self.data = None
            raise ValueError("Must be a string.")
        super().process_formdata(valuelist)


class Present:
    """Fails only when the key is absent, so a zero still reaches the range check."""

    def __init__(self, message):
        self.message = message

    def __call__(self, form, field):
        if not field.raw_data:
            field.errors[:] = []
            raise StopValidation(self.message)


def json_formdata(payload):
    """Wrap a decoded JSON object so WTForms can read it; nulls count as absent."""
    return ImmutableMultiDict(
        [(key, value) for key, value in payload.items() if value is not None]
    )


class WellbeingForm(FlaskForm):
    """Fields shared by the analysis request and the stored check-in."""

    class Meta:
        # JSON API, no browser form to carry a token
        csrf = False

    mood = TextField(
        "Mood",
        validators=[
            DataRequired(message="Mood is required"),
            AnyOf(values(Mood), message="Mood must be one of: %(values)s"),
        ],
    )
    stress_level = WholeNumberField(
        "Stress level",
        validators=[
            Present(message="Stress level is required"),
            NumberRange(min=1, max=10, message="Stress level must be between 1 and 10"),
        ],
    )
    sleep_quality = TextField(
        "Sleep quality",
        validators=[
            DataRequired(message="Sleep quality is required"),
            AnyOf(values(SleepQuality), message="Sleep quality must be one of: %(values)s"),
        ],
    )
    focus_level = TextField(
        "Focus level",
        validators=[
            DataRequired(message="Focus level is required"),
            AnyOf(values(FocusLevel), message="Focus level must be one of: %(values)s"),
        ],
    )
    journal_text = TextField("Journal", validators=[Optional()])

    def first_error(self):
        """The first field error, in field declaration order."""
        for field in self:
            if field.errors:
                return field.errors[0]
        return None


class AnalysisRequestForm(WellbeingForm):
    """Inputs forwarded to the classification service."""


class CheckInForm(WellbeingForm):
    """A check-in to persist, optionally carrying its analysis result."""

    analysis_state = TextField(
        "Analysis state",
        validators=[
            Optional(),
            AnyOf(values(AnalysisState), message="Analysis state must be one of: %(values)s"),
        ],
    )
    analysis_confidence = WholeNumberField(
        "Analysis confidence",
        validators=[
            Optional(),
            NumberRange(min=0, max=100, message="Analysis confidence must be between 0 and 100"),
        ],
    )
