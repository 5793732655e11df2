import logging

from app.client.notify import Navigator, Notifier
from app.client.session import SessionContext


def test_session_starts_signed_out():
    session = SessionContext()

    assert session.get_token() is None
    assert session.user is None
    assert not session.is_logged_in


def test_session_set_and_clear():
    session = SessionContext()
    session.set_user({"id": 1})
    session.set_token("tok")
    session.set_logged_in()

    assert session.get_token() == "tok"
    assert session.is_logged_in

    session.clear()

    assert session.get_token() is None
    assert session.user is None
    assert not session.is_logged_in


def test_notifier_records_and_logs(caplog):
    notifier = Notifier()

    with caplog.at_level(logging.INFO, logger="app.client.notify"):
        notifier.notify("Forbidden", "No access")
        notifier.notify("Saved", "All good", type="success")

    assert [n.title for n in notifier.history] == ["Forbidden", "Saved"]
    assert notifier.last.type == "success"
    assert "Forbidden: No access" in caplog.text


def test_navigator_tracks_history():
    navigator = Navigator()

    navigator.push("login")
    navigator.push("/")

    assert navigator.current == "/"
    assert navigator.history == ["/", "login", "/"]
