"""Unit tests for application settings."""

from capstone.config import Settings, settings
from capstone.generation import FirstChoiceSelector, Selector, default_selector


class TestSettingsValidation:
    """Test Settings.validate and validate_server."""

    def test_valid_local(self):
        assert Settings(companion_strategy="local", title_max_attempts=50).validate() == []

    def test_unknown_strategy(self):
        errors = Settings(companion_strategy="psychic").validate()
        assert any("COMPANION_STRATEGY" in e for e in errors)

    def test_remote_needs_endpoint(self):
        errors = Settings(companion_strategy="remote", companion_endpoint_url="").validate()
        assert errors == ["COMPANION_ENDPOINT_URL is not set"]

    def test_attempts_must_be_positive(self):
        errors = Settings(companion_strategy="local", title_max_attempts=0).validate()
        assert errors == ["TITLE_MAX_ATTEMPTS must be at least 1"]

    def test_server_needs_api_key(self):
        errors = Settings(companion_strategy="local", anthropic_api_key="").validate_server()
        assert "ANTHROPIC_API_KEY is not set" in errors

    def test_cors_origins_is_a_list(self):
        assert isinstance(Settings().cors_origins, list)


class TestDefaultSelector:
    """Test the settings-driven default selector."""

    def test_seed_makes_generation_reproducible(self, monkeypatch):
        monkeypatch.setattr(settings, "generation_seed", 123)
        a, b = default_selector(), default_selector()
        assert [a.index(100) for _ in range(5)] == [b.index(100) for _ in range(5)]

    def test_default_selector_type(self, monkeypatch):
        monkeypatch.setattr(settings, "generation_seed", None)
        selector = default_selector()
        assert isinstance(selector, Selector)
        assert not isinstance(selector, FirstChoiceSelector)
