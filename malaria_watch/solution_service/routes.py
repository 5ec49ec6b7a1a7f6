"""
Solution service route handlers.
Multipart endpoint for the gateway plus the pipeline shared with the standalone handler.
"""

import logging
from typing import Tuple

from flask import Blueprint, request, jsonify, Response

from malaria_watch.config import Settings
from malaria_watch.solution_service.errors import ValidationError
from malaria_watch.solution_service.gemini_client import SolutionGenerator, GeminiSolutionClient
from malaria_watch.solution_service.ingestion import parse_multipart_report
from malaria_watch.solution_service.models import ReportRequest
from malaria_watch.solution_service.prompt import build_prompt

logger = logging.getLogger(__name__)

GENERIC_FAILURE = "Failed to generate solution."


def default_generator(settings: Settings) -> SolutionGenerator:
    return GeminiSolutionClient(api_key=settings.gemini_api_key, model_name=settings.gemini_model)


def generate_solution(generator: SolutionGenerator, report: ReportRequest) -> str:
    """
    Build the prompt for a report and ask the generator for a solution.
    """
    prompt = build_prompt(report.title, report.description)
    return generator.submit(prompt, report.image)


def solution_response(generator: SolutionGenerator, report: ReportRequest) -> Tuple[Response, int]:
    """
    Run the pipeline and shape the HTTP reply.

    Returns:
        200: {"solution": str}
        500: {"error": str} on any failure; details stay in the server log.
    """
    try:
        solution = generate_solution(generator, report)
    except Exception:
        logger.exception("Error generating solution")
        return jsonify({"error": GENERIC_FAILURE}), 500

    return jsonify({"solution": solution}), 200


def create_solution_blueprint(settings: Settings, generator: SolutionGenerator = None) -> Blueprint:
    """
    Build the router-mounted solution blueprint.

    Args:
        settings (Settings): Provides the upload directory and Gemini config.
        generator (SolutionGenerator, optional): Defaults to a GeminiSolutionClient.

    Returns:
        Blueprint: Blueprint exposing POST /generate-solution.
    """
    solution_bp = Blueprint("solution", __name__)
    generator = generator or default_generator(settings)

    @solution_bp.route("/generate-solution", methods=["POST"])
    def generate_solution_upload() -> Tuple[Response, int]:
        """
        Handle a multipart report.

        Expects:
        - title (form field)
        - description (form field)
        - image (file)

        Returns:
            200: {"solution": str}
            400: Missing image, title, or description.
            500: Model/server error.
        """
        try:
            with parse_multipart_report(request.form, request.files, settings.upload_dir) as report:
                return solution_response(generator, report)
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except Exception:
            logger.exception("Error handling uploaded report")
            return jsonify({"error": GENERIC_FAILURE}), 500

    return solution_bp
