from datetime import datetime, timezone

from . import db


def utcnow():
    return datetime.now(timezone.utc)


class SurveyResponse(db.Model):
    __tablename__ = 'survey_responses'
    id = db.Column(db.Integer, primary_key=True)
    # question text -> answer string, or list of strings for multi-choice questions
    answers = db.Column(db.JSON, nullable=False, default=dict)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow, index=True)

    def to_dict(self):
        created_at = self.created_at
        if created_at.tzinfo is None:
            # SQLite hands back naive datetimes
            created_at = created_at.replace(tzinfo=timezone.utc)
        return {
            'id': self.id,
            'answers': self.answers,
            'createdAt': created_at.isoformat().replace('+00:00', 'Z'),
        }
