import pytest
from types import SimpleNamespace
from google.genai import types

from malaria_watch.solution_service.errors import UpstreamError
from malaria_watch.solution_service.gemini_client import (
    FALLBACK_SOLUTION,
    GeminiSolutionClient,
    extract_solution_text,
)


def make_response(*texts):
    parts = [SimpleNamespace(text=t) for t in texts]
    return SimpleNamespace(candidates=[SimpleNamespace(content=SimpleNamespace(parts=parts))])


# --- EXTRACTION ---

def test_extract_strips_first_part():
    response = make_response("  Use um repelente e elimine água estagnada.\n", "ignored")
    assert extract_solution_text(response) == "Use um repelente e elimine água estagnada."

def test_extract_no_candidates():
    assert extract_solution_text(SimpleNamespace(candidates=[])) == FALLBACK_SOLUTION
    assert extract_solution_text(SimpleNamespace(candidates=None)) == FALLBACK_SOLUTION

def test_extract_missing_content_or_parts():
    no_content = SimpleNamespace(candidates=[SimpleNamespace(content=None)])
    no_parts = SimpleNamespace(candidates=[SimpleNamespace(content=SimpleNamespace(parts=[]))])

    assert extract_solution_text(no_content) == FALLBACK_SOLUTION
    assert extract_solution_text(no_parts) == FALLBACK_SOLUTION

def test_extract_missing_or_blank_text():
    assert extract_solution_text(make_response(None)) == FALLBACK_SOLUTION
    assert extract_solution_text(make_response("   ")) == FALLBACK_SOLUTION

def test_extract_unexpected_object():
    assert extract_solution_text(object()) == FALLBACK_SOLUTION


# --- SUBMIT ---

@pytest.fixture
def mock_genai(mocker):
    return mocker.patch("malaria_watch.solution_service.gemini_client.genai")

def test_submit_sends_prompt_image_and_settings(mock_genai):
    mock_models = mock_genai.Client.return_value.models
    mock_models.generate_content.return_value = make_response(" Resposta ")

    gemini = GeminiSolutionClient(api_key="abc", model_name="gemini-test")
    result = gemini.submit("the prompt", b"\xff\xd8jpeg")

    assert result == "Resposta"
    mock_genai.Client.assert_called_once_with(api_key="abc")

    kwargs = mock_models.generate_content.call_args.kwargs
    assert kwargs["model"] == "gemini-test"

    content = kwargs["contents"][0]
    assert content.role == "user"
    assert content.parts[0].text == "the prompt"
    assert content.parts[1].inline_data.data == b"\xff\xd8jpeg"
    assert content.parts[1].inline_data.mime_type == "image/jpeg"

    config = kwargs["config"]
    assert config.temperature == 0.4
    assert {s.category for s in config.safety_settings} == {
        types.HarmCategory.HARM_CATEGORY_DANGEROUS_CONTENT,
        types.HarmCategory.HARM_CATEGORY_HARASSMENT,
        types.HarmCategory.HARM_CATEGORY_HATE_SPEECH,
        types.HarmCategory.HARM_CATEGORY_SEXUALLY_EXPLICIT,
    }
    assert all(s.threshold == types.HarmBlockThreshold.BLOCK_NONE for s in config.safety_settings)

def test_submit_wraps_sdk_errors(mock_genai):
    mock_genai.Client.return_value.models.generate_content.side_effect = RuntimeError("quota exceeded")

    gemini = GeminiSolutionClient(api_key="abc", model_name="gemini-test")
    with pytest.raises(UpstreamError) as exc_info:
        gemini.submit("p", b"img")

    assert isinstance(exc_info.value.__cause__, RuntimeError)

def test_submit_without_api_key(mock_genai):
    gemini = GeminiSolutionClient(api_key=None, model_name="gemini-test")

    with pytest.raises(UpstreamError):
        gemini.submit("p", b"img")

    mock_genai.Client.assert_not_called()

def test_submit_reuses_sdk_client(mock_genai):
    mock_genai.Client.return_value.models.generate_content.return_value = make_response("ok")

    gemini = GeminiSolutionClient(api_key="abc", model_name="gemini-test")
    gemini.submit("p1", b"img")
    gemini.submit("p2", b"img")

    mock_genai.Client.assert_called_once_with(api_key="abc")
    assert mock_genai.Client.return_value.models.generate_content.call_count == 2
