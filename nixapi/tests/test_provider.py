"""
Tests for the provider used to configure the API factory.
"""

from unittest.mock import patch

from nixapi.client import DEFAULT_API_ENDPOINT, ClientSettings, NixApi, NixApiProvider


class TestNixApiProvider:
    """Test cases for NixApiProvider."""

    def test_defaults(self) -> None:
        provider = NixApiProvider()

        assert provider.settings.endpoint == DEFAULT_API_ENDPOINT
        assert provider.settings.app_id is None
        assert provider.settings.app_key is None
        assert provider.settings.http_config == {}

    def test_setters(self) -> None:
        provider = (
            NixApiProvider()
            .set_endpoint("https://api.example.com/v1/")
            .set_credentials("app-id", "app-key")
            .set_http_config({"timeout": 5})
        )

        assert provider.settings.endpoint == "https://api.example.com/v1/"
        assert provider.settings.app_id == "app-id"
        assert provider.settings.app_key == "app-key"
        assert provider.settings.http_config == {"timeout": 5}

    def test_invalid_http_config_is_ignored(self) -> None:
        provider = NixApiProvider().set_http_config({"timeout": 5})

        provider.set_http_config("not a dict")
        provider.set_http_config(None)
        provider.set_http_config([("timeout", 1)])

        assert provider.settings.http_config == {"timeout": 5}

    def test_get_returns_factory_sharing_settings(self) -> None:
        provider = NixApiProvider()
        nix_api = provider.get()

        assert isinstance(nix_api, NixApi)
        provider.set_credentials("late-id", "late-key")
        assert nix_api.build_config("/foo")["headers"] == {
            "X-APP-ID": "late-id",
            "X-APP-KEY": "late-key",
        }

    def test_providers_are_independent(self) -> None:
        first = NixApiProvider().set_credentials("a", "a-key")
        second = NixApiProvider().set_credentials("b", "b-key")

        assert first.get().build_config("/x")["headers"]["X-APP-ID"] == "a"
        assert second.get().build_config("/x")["headers"]["X-APP-ID"] == "b"


class TestClientSettings:
    """Test cases for ClientSettings."""

    @patch("nixapi.client.settings.load_dotenv")
    def test_from_env(self, mock_load_dotenv) -> None:  # type: ignore[no-untyped-def]
        env = {
            "NIX_API_ENDPOINT": "https://api.example.com/v2/",
            "NIX_APP_ID": "env-id",
            "NIX_APP_KEY": "env-key",
        }
        with patch.dict("os.environ", env):
            settings = ClientSettings.from_env()

        mock_load_dotenv.assert_called_once()
        assert settings.endpoint == "https://api.example.com/v2/"
        assert settings.app_id == "env-id"
        assert settings.app_key == "env-key"

    @patch("nixapi.client.settings.load_dotenv")
    def test_from_env_defaults(self, mock_load_dotenv) -> None:  # type: ignore[no-untyped-def]
        with patch.dict("os.environ", {}, clear=True):
            settings = ClientSettings.from_env()

        assert settings.endpoint == DEFAULT_API_ENDPOINT
        assert settings.app_id is None
        assert settings.app_key is None
