from flask import Flask, request, jsonify
import os
from models import db, SurveyResponse
from flask_cors import CORS
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_migrate import Migrate
from sqlalchemy import desc
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException
from survey import dashboard
from survey.catalog import catalog_to_dict, unknown_questions

app = Flask(__name__)
# counts are keyed in first-seen order; the charts label from that order
app.json.sort_keys = False

###################################################################################################################
# Configuration comes from the environment; the defaults suit local development
###################################################################################################################
debug = os.environ.get('FLASK_DEBUG', '').lower() in ('1', 'true')
port = int(os.environ.get('PORT', 3001))
cors_origins = [o.strip() for o in os.environ.get('CORS_ORIGINS', 'http://localhost:5173').split(',') if o.strip()]

app.config['SQLALCHEMY_DATABASE_URI'] = os.environ.get('DATABASE_URL', 'sqlite:///survey.db')
app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
app.config['RATELIMIT_ENABLED'] = os.environ.get('RATELIMIT_ENABLED', 'true').lower() != 'false'

db.init_app(app)
migrate = Migrate(app, db)

CORS(app, origins=cors_origins, methods=['GET', 'POST'])

limiter = Limiter(
    get_remote_address,
    app=app,
    default_limits=[os.environ.get('RATE_LIMIT', '100 per 15 minutes')],
    storage_uri='memory://',
)

def load_responses():
    return SurveyResponse.query.order_by(desc(SurveyResponse.created_at), desc(SurveyResponse.id)).all()

###############################################################
# Create the tables without going through migrations
# Run once with: flask --app app init-db
###############################################################
@app.cli.command('init-db')
def init_db():
    db.create_all()
    print('Survey tables created.')

#####################################################
# Route for health checks
#####################################################
@app.route('/health')
def health():
    return jsonify({'status': 'healthy', 'service': 'Developer Feedback Survey'})

#####################################################
# Route for the survey definition the form renders
#####################################################
@app.route('/api/survey/questions')
def survey_questions():
    return jsonify(catalog_to_dict())

#####################################################
# Route for submitting survey responses
#####################################################
@app.route('/api/surveys', methods=['POST'])
def submit_survey():
    data = request.get_json(silent=True)
    responses = data.get('responses') if isinstance(data, dict) else None

    if responses is None:
        return jsonify({'error': 'Responses are required'}), 400
    if not isinstance(responses, dict):
        return jsonify({'error': 'Responses must be an object keyed by question'}), 400

    unknown = unknown_questions(responses)
    if unknown:
        app.logger.warning(f"Storing answers for questions not in the survey: {unknown}")

    try:
        survey_response = SurveyResponse(answers=responses)
        db.session.add(survey_response)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        app.logger.error(f"Error saving survey: {e}")
        return jsonify({'error': 'Failed to save survey'}), 500

    app.logger.info(f"Stored survey response {survey_response.id} with {len(responses)} answers")
    return jsonify(survey_response.to_dict())

#####################################################
# Route for listing all survey responses, newest first
#####################################################
@app.route('/api/surveys', methods=['GET'])
def list_surveys():
    try:
        surveys = load_responses()
    except SQLAlchemyError as e:
        app.logger.error(f"Error fetching surveys: {e}")
        return jsonify({'error': 'Failed to fetch surveys'}), 500

    return jsonify([s.to_dict() for s in surveys])

#####################################################
# Route for the per-question results page
#####################################################
@app.route('/api/surveys/results')
def survey_results():
    try:
        surveys = load_responses()
    except SQLAlchemyError as e:
        app.logger.error(f"Error fetching surveys: {e}")
        return jsonify({'error': 'Failed to fetch surveys'}), 500

    return jsonify(dashboard.results(surveys))

#####################################################
# Route for one response charted against the survey options
#####################################################
@app.route('/api/surveys/<int:response_id>/breakdown')
def survey_breakdown(response_id):
    survey_response = db.get_or_404(SurveyResponse, response_id, description='Survey response not found')
    return jsonify({
        'id': survey_response.id,
        'categories': dashboard.response_breakdown(survey_response.answers),
    })

#####################################################
# Route for the dashboard views
#####################################################
@app.route('/api/dashboard/<view>')
def dashboard_view(view):
    try:
        surveys = load_responses()
    except SQLAlchemyError as e:
        app.logger.error(f"Error fetching surveys for {view} dashboard: {e}")
        return jsonify({'error': 'Failed to fetch surveys'}), 500

    try:
        return jsonify(dashboard.build_view(view, surveys, search=request.args.get('q')))
    except dashboard.UnknownView:
        return jsonify({'error': f"Unknown dashboard view '{view}'"}), 404

#######################################################
# Error Handler for 404 Not Found Error
#######################################################
@app.errorhandler(404)
def not_found(e):
    return jsonify({'error': e.description or 'Not found'}), 404

#######################################################
# Error Handler for 429 Too Many Requests
#######################################################
@app.errorhandler(429)
def too_many_requests(e):
    return jsonify({'error': 'Too many requests, please try again later.'}), 429

#######################################################
# Error Handler for 500 Internal Server Error
#######################################################
@app.errorhandler(Exception)
def handle_exception(e):
    if isinstance(e, HTTPException):
        return jsonify({'error': e.description}), e.code
    # Log the exception
    app.logger.error(f"Unhandled Exception: {e}")
    return jsonify({'error': 'Internal server error'}), 500

if __name__ == '__main__':
    app.run(port=port, debug=debug)
