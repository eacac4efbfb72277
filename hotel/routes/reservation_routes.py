from flask import Blueprint, current_app, jsonify

from hotel.utils.http import request_body

reservation_bp = Blueprint('reservations', __name__)


@reservation_bp.route('/lookup', methods=['POST'])
def lookup_reservation():
    """Find reservations by reservation number and/or guest email."""
    reservations = current_app.reservation_service.lookup(request_body())
    return jsonify({'success': True, 'data': reservations}), 200


@reservation_bp.route('', methods=['POST'])
def create_reservation():
    """Book a room."""
    reservation = current_app.reservation_service.create_reservation(request_body())
    return jsonify({
        'success': True,
        'message': 'Reserva realizada con éxito.',
        'data': reservation,
    }), 201
