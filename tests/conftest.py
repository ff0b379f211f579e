import threading

import pytest
from fastapi.testclient import TestClient

from magicquill_proxy.magicquill import MagicQuillClient
from magicquill_proxy.main import create_app


class FakeGradioClient:
    def __init__(self, space_id, outputs=None, error=None):
        self.space_id = space_id
        self.outputs = outputs
        self.error = error
        self.calls = []

    def predict(self, *args, api_name=None):
        self.calls.append((args, api_name))
        if self.error is not None:
            raise self.error
        return self.outputs


class FakeClientFactory:
    """Stands in for gradio_client.Client and records every connection."""

    def __init__(self, outputs=None, error=None, connect_error=None):
        self.outputs = outputs
        self.error = error
        self.connect_error = connect_error
        self.connections = []
        self._lock = threading.Lock()

    def __call__(self, space_id):
        with self._lock:
            self.connections.append(space_id)
        if self.connect_error is not None:
            raise self.connect_error
        self.client = FakeGradioClient(space_id, self.outputs, self.error)
        return self.client

    @property
    def predict_calls(self):
        client = getattr(self, "client", None)
        return client.calls if client else []


@pytest.fixture
def factory():
    return FakeClientFactory(outputs={"from_backend": {"generated_image": "AAAA"}})


@pytest.fixture
def magicquill_client(factory):
    return MagicQuillClient(space_id="test/space", client_factory=factory)


@pytest.fixture
def client(magicquill_client):
    return TestClient(create_app(magicquill_client))


@pytest.fixture
def factory_cls():
    return FakeClientFactory
