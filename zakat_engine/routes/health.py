"""Health check endpoint."""
from flask import Blueprint, jsonify

from zakat_engine.data.madhabs import MADHAB_RULES
from zakat_engine.services.config import get_currency_code

health_bp = Blueprint('health', __name__)


@health_bp.route('/healthz')
def healthz():
    """Return health status and the loaded rule table size."""
    return jsonify({
        'status': 'ok',
        'currency': get_currency_code(),
        'madhabs_loaded': len(MADHAB_RULES),
    })
