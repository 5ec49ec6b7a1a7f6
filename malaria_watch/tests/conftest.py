import pytest
from malaria_watch.config import Settings
from malaria_watch.gateway.server import create_app
from malaria_watch.solution_service.server import create_standalone_app


class FakeGenerator:
    """
    Records submitted prompts and returns a canned answer (or raises).
    """

    def __init__(self, answer="Use um repelente e elimine água estagnada.", error=None):
        self.answer = answer
        self.error = error
        self.calls = []

    def submit(self, prompt, image):
        self.calls.append((prompt, image))
        if self.error:
            raise self.error
        return self.answer


@pytest.fixture
def upload_dir(tmp_path):
    return str(tmp_path / "uploads")

@pytest.fixture
def settings(upload_dir):
    return Settings(gemini_api_key="test_key", gemini_model="test-model", upload_dir=upload_dir)

@pytest.fixture
def generator():
    return FakeGenerator()

@pytest.fixture
def app(settings, generator):
    app = create_app(settings, generator)
    app.config["TESTING"] = True
    return app

@pytest.fixture
def client(app):
    return app.test_client()

@pytest.fixture
def standalone_app(settings, generator):
    app = create_standalone_app(settings, generator)
    app.config["TESTING"] = True
    return app

@pytest.fixture
def standalone_client(standalone_app):
    return standalone_app.test_client()
