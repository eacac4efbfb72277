from flask import Blueprint, current_app, jsonify

from hotel.utils.http import request_body

main_bp = Blueprint('main', __name__)


# --- Health Check ---
@main_bp.route('', methods=['GET'])
def health():
    return jsonify({'message': 'Backend del Hotel (MySQL) funcionando!'})


# --- Contact Form ---
@main_bp.route('/contact', methods=['POST'])
def contact():
    contact_id = current_app.contact_service.submit_contact(request_body())
    return jsonify({
        'success': True,
        'message': 'Mensaje enviado con éxito.',
        'data': {'id': contact_id},
    }), 201


# --- Registration ---
@main_bp.route('/register', methods=['POST'])
def register():
    registration_id, email = current_app.registration_service.register(request_body())
    return jsonify({
        'success': True,
        'message': 'Registro exitoso.',
        'data': {'id': registration_id, 'email': email},
    }), 201
