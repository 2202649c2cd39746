import pytest

from inmomatch import config
from inmomatch.config import Settings, get_settings
from inmomatch.database import supabase_client
from inmomatch.database.supabase_client import SupabaseClient, get_supabase_client
from inmomatch.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def clear_caches():
    get_settings.cache_clear()
    get_supabase_client.cache_clear()
    yield
    get_settings.cache_clear()
    get_supabase_client.cache_clear()


def test_settings_defaults(monkeypatch):
    for name in ("MATCH_MIN_PERCENTAGE", "SUMMARY_MIN_PERCENTAGE", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.match_min_percentage == 50
    assert settings.summary_min_percentage == 70
    assert settings.log_level == "INFO"


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("SUMMARY_MIN_PERCENTAGE", "60")
    assert Settings(_env_file=None).summary_min_percentage == 60


def test_config_exposes_only_settings_and_tables():
    public = {name for name in vars(config) if name.isupper() and not name.startswith("_")}
    assert public == {"LISTINGS_TABLE", "USERS_TABLE"}


def test_supabase_client_delegates_table():
    class Raw:
        def table(self, name):
            return f"query:{name}"

    wrapper = SupabaseClient(Raw())

    assert wrapper.table("propiedades") == "query:propiedades"
    assert not hasattr(wrapper, "client")


def test_missing_credentials(monkeypatch):
    monkeypatch.setattr(
        supabase_client,
        "get_settings",
        lambda: Settings(_env_file=None, supabase_url=None, supabase_key=None),
    )

    with pytest.raises(ConfigurationError):
        get_supabase_client()
