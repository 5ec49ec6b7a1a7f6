"""
Standalone solution handler.
Single-route app taking a JSON body with a base64 image; suited to serverless hosts.
"""

import logging
from typing import Tuple

from flask import Flask, request, jsonify, Response

from malaria_watch.config import Settings, load_settings
from malaria_watch.solution_service.errors import ValidationError
from malaria_watch.solution_service.gemini_client import SolutionGenerator
from malaria_watch.solution_service.ingestion import parse_json_report
from malaria_watch.solution_service.routes import default_generator, solution_response

logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(asctime)s - %(message)s")


def create_standalone_app(settings: Settings = None, generator: SolutionGenerator = None) -> Flask:
    """
    Application factory for the JSON handler.

    Args:
        settings (Settings, optional): Loaded from the environment when omitted.
        generator (SolutionGenerator, optional): Defaults to a GeminiSolutionClient.

    Returns:
        Flask: App exposing POST /generate-solution.
    """
    settings = settings or load_settings()
    generator = generator or default_generator(settings)

    app = Flask(__name__)

    @app.errorhandler(405)
    def method_not_allowed(error) -> Tuple[Response, int]:
        return jsonify({"error": "Method not allowed"}), 405

    @app.route("/generate-solution", methods=["POST"], provide_automatic_options=False)
    def generate_solution_json() -> Tuple[Response, int]:
        """
        Handle a JSON report.

        Expects JSON input: {"title": "...", "description": "...", "imageBase64": "..."}

        Returns:
            200: {"solution": str}
            400: Missing imageBase64, title, or description.
            405: Any method other than POST.
            500: Model/server error.
        """
        data = request.get_json(silent=True)
        try:
            report = parse_json_report(data if isinstance(data, dict) else {})
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400

        return solution_response(generator, report)

    return app


if __name__ == "__main__":
    app = create_standalone_app()
    app.run(host="0.0.0.0", port=5003, debug=True)
