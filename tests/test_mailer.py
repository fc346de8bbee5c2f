import httpx

from homedirect.config import Settings
from homedirect.infrastructure.mailer import (
    LoggingNotifier,
    MailAPIClient,
    build_notifier,
    format_verification_message,
)


def make_client(handler):
    settings = Settings(NOTIFIER="http", MAIL_API_URL="http://mail.test/", MAIL_API_KEY="k")
    client = MailAPIClient(settings, transport=httpx.MockTransport(handler))
    client.retry_delay = 0
    return client


def test_message_mentions_code_and_expiry():
    body = format_verification_message("Alice", "123456", 30)

    assert "123456" in body
    assert "30 minutes" in body
    assert "expire" not in format_verification_message("Alice", "123456", 0)


def test_mail_client_posts_payload():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(202, json={"id": "m1"})

    make_client(handler).send("alice@x.com", "Hi", "Body")

    assert len(seen) == 1
    assert str(seen[0].url) == "http://mail.test/send"
    assert seen[0].headers["Authorization"] == "Bearer k"


def test_mail_client_retries_server_errors_without_raising():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(503)

    make_client(handler).send("alice@x.com", "Hi", "Body")

    assert len(calls) == 3


def test_mail_client_gives_up_on_client_error():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(400)

    make_client(handler).send("alice@x.com", "Hi", "Body")

    assert len(calls) == 1


def test_build_notifier():
    assert isinstance(build_notifier(Settings(NOTIFIER="log")), LoggingNotifier)
    assert isinstance(build_notifier(Settings(NOTIFIER="http")), MailAPIClient)
