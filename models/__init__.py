from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()

from .surveyResponse import SurveyResponse
