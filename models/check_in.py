from datetime import datetime
from extensions import db

class CheckIn(db.Model):
    __tablename__ = 'check_ins'

    id = db.Column(db.Integer, primary_key=True)
    mood = db.Column(db.String(20), nullable=False)
    stress_level = db.Column(db.Integer, nullable=False)
    sleep_quality = db.Column(db.String(20), nullable=False)
    focus_level = db.Column(db.String(20), nullable=False)
    journal_text = db.Column(db.Text)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)

    # Analysis fields, written once at creation
    analysis_state = db.Column(db.String(20))
    analysis_confidence = db.Column(db.Integer)  # 0-100

    def __init__(self, mood, stress_level, sleep_quality, focus_level,
                 journal_text=None, analysis_state=None, analysis_confidence=None):
        self.mood = mood
        self.stress_level = stress_level
        self.sleep_quality = sleep_quality
        self.focus_level = focus_level
        # Empty optional values are stored as NULL
        self.journal_text = journal_text or None
        self.analysis_state = analysis_state or None
        self.analysis_confidence = analysis_confidence

    @classmethod
    def newest_first(cls):
        """Query over the full history, most recent first."""
        return cls.query.order_by(cls.created_at.desc(), cls.id.desc())

    def to_dict(self):
        return {
            'id': self.id,
            'mood': self.mood,
            'stress_level': self.stress_level,
            'sleep_quality': self.sleep_quality,
            'focus_level': self.focus_level,
            'journal_text': self.journal_text,
            'analysis_state': self.analysis_state,
            'analysis_confidence': self.analysis_confidence,
            # Stored as naive UTC
            'created_at': self.created_at.isoformat() + 'Z' if self.created_at else None,
        }

    def __repr__(self):
        return f'<CheckIn {self.id} {self.mood} stress={self.stress_level}>'
