# Import all models to ensure they are registered with SQLAlchemy
from .check_in import CheckIn
from .choices import Mood, SleepQuality, FocusLevel, AnalysisState

# Make models available at package level
__all__ = ['CheckIn', 'Mood', 'SleepQuality', 'FocusLevel', 'AnalysisState']
