from fastapi.testclient import TestClient

from email_relay.application.record_emails import EmailLogRecorder
from email_relay.infrastructure.email.http_upstream_adapter import (
    HttpUpstreamEmailAdapter,
)
from email_relay.infrastructure.http import client as http_client_mod
from email_relay.infrastructure.redis_cache import pool as redis_pool_mod
from email_relay.main import create_app
from email_relay.settings import Settings


def test_lifespan_wires_and_releases_shared_clients():
    settings = Settings(
        token="secret123",
        upstream_url="http://mailer.test/send",
        redis_url="redis://localhost:6379/9",
        http_timeout_seconds=3.0,
        redis_timeout_seconds=2.0,
        _env_file=None,
    )
    app = create_app(settings)

    with TestClient(app):
        adapter = app.state.email_adapter
        assert isinstance(adapter, HttpUpstreamEmailAdapter)
        assert adapter.endpoint == "http://mailer.test/send"
        assert isinstance(app.state.log_recorder, EmailLogRecorder)
        assert app.state.log_recorder.pending == 0
        assert float(http_client_mod.get_http_client().timeout.read) == 3.0
        redis_kwargs = redis_pool_mod._client.connection_pool.connection_kwargs
        assert redis_kwargs["socket_timeout"] == 2.0
        assert redis_kwargs["db"] == 9

    assert http_client_mod._client is None
    assert redis_pool_mod._client is None
