from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import RequestEntityTooLarge

from src.infrastructure.config import GatewayConfig, Settings, settings as default_settings
from qf_utils.logger_utils import logger, set_log_level
from src.services.ai_client import GeminiGateway

# Import Blueprints
from src.api.routes_generate import generate_bp, GATEWAY_EXTENSION

# Multipart framing and form fields on top of the file payloads
_FORM_OVERHEAD_BYTES = 2 * 1024 * 1024


def create_app(settings: Settings = None, gateway: GeminiGateway = None):
    """Application factory for Flask."""
    settings = settings or default_settings
    app = Flask(__name__)
    set_log_level(settings.LOG_LEVEL)

    # --- Core Configuration ---
    app.config['QF_SETTINGS'] = settings
    app.config['DEBUG'] = settings.DEBUG
    app.json.ensure_ascii = False
    app.config['MAX_CONTENT_LENGTH'] = settings.MAX_FILES * settings.max_file_size_bytes + _FORM_OVERHEAD_BYTES

    origins = [settings.CLIENT_ORIGIN] if settings.CLIENT_ORIGIN else "*"
    CORS(app, resources={r"/api/*": {"origins": origins}})

    # --- Model gateway ---
    if gateway is None:
        gateway = GeminiGateway(GatewayConfig.from_settings(settings))
    if not gateway.is_configured:
        logger.warning("GEMINI_API_KEY is not set. The generation endpoint will fail until it is configured.")
    app.extensions[GATEWAY_EXTENSION] = gateway

    # --- Blueprints ---
    app.register_blueprint(generate_bp, url_prefix='/api')

    @app.route('/health')
    def health_check():
        return jsonify({"status": "ok"})

    @app.errorhandler(RequestEntityTooLarge)
    def request_too_large(e):
        return jsonify({"error": "Upload is too large."}), 413

    return app


if __name__ == '__main__':
    app = create_app()
    logger.info(f"Question generator API listening on port {default_settings.PORT}")
    app.run(host='0.0.0.0', port=default_settings.PORT, debug=default_settings.DEBUG)
