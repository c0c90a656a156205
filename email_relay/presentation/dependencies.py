from fastapi import Request

from email_relay.application.record_emails import EmailLogRecorder
from email_relay.domain.ports.email_port import EmailPort
from email_relay.settings import Settings


def get_app_settings(request: Request) -> Settings:
    # This is set in email_relay.main create_app()
    return request.app.state.settings


def get_email_port(request: Request) -> EmailPort:
    # This is set in email_relay.main lifespan()
    return request.app.state.email_adapter


def get_log_recorder(request: Request) -> EmailLogRecorder:
    return request.app.state.log_recorder
