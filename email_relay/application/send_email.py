from typing import Any

from email_relay.application.record_emails import EmailLogRecorder
from email_relay.domain.ports.email_port import EmailPort


async def send_email(
    email: Any,
    email_port: EmailPort,
    log_recorder: EmailLogRecorder,
) -> None:
    # forward first: only emails the upstream accepted get logged
    await email_port.forward(email)

    # not awaited, the response must not wait on the log store
    log_recorder.record([email])
