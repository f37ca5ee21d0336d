"""Integration test fixtures.

The HTTP application is exercised through FastAPI's TestClient with the
pipeline built from a real vocabulary and stemmer around a stub scorer, so
no model file is needed. The TestClient is not used as a context manager,
so the startup hook (which loads the real artefacts) does not run.
"""

from typing import Optional, Sequence

import pytest
from fastapi.testclient import TestClient

from blockthetweet.api.dependencies import get_pipeline, get_settings, get_sink
from blockthetweet.main import app
from blockthetweet.models.prediction import PredictionResult
from blockthetweet.persistence.sink import PredictionSink


class InMemorySink(PredictionSink):
    """Sink that keeps predictions in a list."""
    
    def __init__(self):
        self.records: list[PredictionResult] = []
    
    def record(self, result: PredictionResult) -> bool:
        self.records.append(result)
        return True


@pytest.fixture
def memory_sink() -> InMemorySink:
    return InMemorySink()


@pytest.fixture
def make_client(test_settings, create_pipeline):
    """Factory fixture returning a TestClient wired to the given scorer.
    
    Usage:
        def test_something(make_client, recording_scorer):
            client = make_client(recording_scorer)
    """
    def _create(scorer, sink: Optional[PredictionSink] = None, **settings_overrides) -> TestClient:
        for key, value in settings_overrides.items():
            setattr(test_settings, key, value)
        
        pipeline = create_pipeline(scorer, sequence_length=test_settings.SEQUENCE_LENGTH)
        app.dependency_overrides[get_settings] = lambda: test_settings
        app.dependency_overrides[get_pipeline] = lambda: pipeline
        app.dependency_overrides[get_sink] = lambda: sink
        return TestClient(app, raise_server_exceptions=False)
    
    yield _create
    app.dependency_overrides.clear()
