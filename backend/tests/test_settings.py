"""
Tests for application settings and schema configuration.
"""

from admin_api.models import Country
from admin_api.schemas import AirlineOutput, CountryOutput
from shared.config.constants import Limits
from shared.config.settings import Settings


class TestSettings:
    def test_pagination_defaults_follow_limits(self):
        config = Settings(_env_file=None)

        assert config.default_page_size == Limits.DEFAULT_PAGE_SIZE
        assert config.max_page_size == Limits.MAX_PAGE_SIZE

    def test_development_settings_pass_production_checks(self):
        assert Settings(_env_file=None).validate_production_settings() == []

    def test_production_requires_safe_values(self):
        config = Settings(
            _env_file=None,
            environment="production",
            debug=True,
            allowed_origins="",
            database_url="sqlite:///:memory:",
        )

        errors = config.validate_production_settings()

        assert len(errors) == 3
        assert "DEBUG must be False in production" in errors

    def test_allowed_origins_are_split_and_trimmed(self):
        config = Settings(_env_file=None, allowed_origins="https://a.example, https://b.example,")

        assert config.get_allowed_origins() == ["https://a.example", "https://b.example"]


class TestOutputSchemas:
    def test_outputs_read_from_attributes(self):
        country = Country(iso_code="FRA", name="France", continent="Europe", is_deleted=False)

        assert CountryOutput.model_validate(country).name == "France"
        assert AirlineOutput.model_config["from_attributes"] is True
