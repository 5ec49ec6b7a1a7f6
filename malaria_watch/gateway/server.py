"""
API gateway: mounts the solution blueprint.
This is the local entrypoint for development.
"""

from flask import Flask, jsonify
from flask_cors import CORS
import logging

from malaria_watch.config import Settings, load_settings
from malaria_watch.solution_service.gemini_client import SolutionGenerator
from malaria_watch.solution_service.routes import create_solution_blueprint

# Basic console logging during API requests
logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(asctime)s - %(message)s")

def create_app(settings: Settings = None, generator: SolutionGenerator = None) -> Flask:
    """
    Application factory for creating the Flask app.

    Args:
        settings (Settings, optional): Loaded from the environment when omitted.
        generator (SolutionGenerator, optional): Passed through to the solution blueprint.

    Returns:
        Flask: The configured Flask application.
    """
    settings = settings or load_settings()

    app = Flask(__name__)
    CORS(app, resources={
        r"/*": {
            "origins": list(settings.cors_origins),
            "methods": ["GET", "POST", "OPTIONS"],
            "allow_headers": ["Content-Type"],
        }
    })

    if not settings.gemini_api_key:
        logging.warning("GEMINI_API_KEY is missing. Solution requests will fail until it is set.")

    # --- REGISTER BLUEPRINTS ---
    app.register_blueprint(create_solution_blueprint(settings, generator))
    logging.info("Solution blueprint registered (model=%s, upload_dir=%s).", settings.gemini_model, settings.upload_dir)

    # --- BASIC HEALTH CHECKPOINTS ---
    @app.route("/")
    def ping():
        """
        Root URL for simple 'online' check.
        """
        return jsonify({"status": "gateway_ok"}), 200

    @app.route("/health")
    def health():
        """
        Health check endpoint.
        """
        return jsonify({"status": "ok"}), 200

    return app

if __name__ == "__main__":
    settings = load_settings()
    app = create_app(settings)
    app.run(host="0.0.0.0", port=settings.port, debug=True)
