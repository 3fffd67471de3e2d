"""Tests for the Flickrie entry point."""

import flickrie
from flickrie import Flickrie, Settings


def test_credentials_from_arguments(mocker):
    flickr = Flickrie("key", "secret", "token", "token_secret", session=mocker.Mock())
    assert flickr.settings.api_key == "key"
    assert flickr.authenticated is True
    assert repr(flickr) == "<Flickrie authenticated=True>"


def test_arguments_override_settings():
    flickr = Flickrie(api_key="other", settings=Settings(api_key="key", shared_secret="secret"), debug=True)
    assert flickr.settings.api_key == "other"
    assert flickr.settings.shared_secret == "secret"
    assert flickr.settings.debug is True
    assert flickr.client.debug is True


def test_credentials_from_environment(monkeypatch):
    monkeypatch.setenv("FLICKR_API_KEY", "env_key")
    monkeypatch.delenv("FLICKR_ACCESS_TOKEN", raising=False)
    monkeypatch.delenv("FLICKR_ACCESS_SECRET", raising=False)

    flickr = Flickrie()

    assert flickr.settings.api_key == "env_key"
    assert flickr.authenticated is False


def test_context_manager_closes_sessions(mocker):
    session, upload_session = mocker.Mock(), mocker.Mock()

    with Flickrie(api_key="key", session=session, upload_session=upload_session) as flickr:
        assert isinstance(flickr, Flickrie)

    session.close.assert_called_once()
    upload_session.close.assert_called_once()


def test_package_exports():
    assert flickrie.__version__
    assert "Flickrie" in flickrie.__all__
