"""Custom object (pets) pages backed by the HubSpot CRM API."""

from flask import Blueprint, current_app, redirect, render_template, request, url_for

from crm_client import RemoteFetchError, RemoteWriteError

crm_bp = Blueprint('crm', __name__)

UPDATE_FORM_TITLE = 'Update Custom Object Form | Integrating With HubSpot I Practicum'

PLAIN_TEXT = {'Content-Type': 'text/plain; charset=utf-8'}


def _client():
    return current_app.extensions['hubspot']


@crm_bp.route('/')
def index():
    """List the custom object records on the homepage."""
    properties = current_app.config['LIST_PROPERTIES']
    try:
        pets = _client().list_records(properties, current_app.config['LIST_LIMIT'])
    except RemoteFetchError:
        current_app.logger.exception('Fetching custom object records failed')
        return 'Error fetching data', PLAIN_TEXT
    return render_template('homepage.html', pets=pets, properties=properties)


@crm_bp.route('/update-cobj', methods=['GET'])
def update_form():
    """Render the empty update form."""
    return render_template('updates.html', title=UPDATE_FORM_TITLE)


@crm_bp.route('/update-cobj', methods=['POST'])
def update():
    """Forward the submitted fields to HubSpot and go back home.

    Both form-encoded and JSON object bodies are accepted.  Keys pass through
    untouched; HubSpot decides what is valid.
    """
    if request.is_json:
        values = request.get_json(silent=True)
        if not isinstance(values, dict):
            current_app.logger.error('Update body is not a JSON object')
            return 'Error updating data', PLAIN_TEXT
    else:
        # Flat bag: a repeated form key keeps its first value.
        values = request.form.to_dict()
    try:
        _client().upsert(values)
    except RemoteWriteError:
        current_app.logger.exception('Updating custom object record failed')
        return 'Error updating data', PLAIN_TEXT
    return redirect(url_for('crm.index'))
