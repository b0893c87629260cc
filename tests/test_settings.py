"""Tests for environment driven configuration."""

import hashlib

import pytest
from pydantic import ValidationError

from jazzicon.colors import DEFAULT_PALETTE
from jazzicon.composer import JazzIcon
from jazzicon.seed import derive_seed
from jazzicon.settings import IdenticonSettings, composer_from_settings, get_settings


class TestIdenticonSettings:
    def test_defaults(self):
        settings = IdenticonSettings()
        assert settings.shape_count == 4
        assert settings.wobble == 30
        assert settings.digest == "md5"
        assert settings.palette_colors() == DEFAULT_PALETTE

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("JAZZICON_SHAPE_COUNT", "3")
        monkeypatch.setenv("JAZZICON_WOBBLE", "20")
        monkeypatch.setenv("JAZZICON_PALETTE", "#000000,#111111,#222222,#333333")
        monkeypatch.setenv("JAZZICON_DIGEST", "SHA256")
        settings = get_settings()
        assert settings.shape_count == 3
        assert settings.wobble == 20
        assert [c.hex for c in settings.palette_colors()] == ["#000000", "#111111", "#222222", "#333333"]
        assert settings.digest == "sha256"

    def test_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("JAZZICON_WOBBLE=12\n")
        assert IdenticonSettings().wobble == 12

    def test_blank_palette_means_default(self):
        assert IdenticonSettings(palette="  ").palette_colors() == DEFAULT_PALETTE

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    @pytest.mark.parametrize("kwargs", [
        {"palette": "#01888c,nothex"},
        {"digest": "rot13"},
        {"shape_count": 1},
        {"render_scale": 0},
    ])
    def test_invalid(self, kwargs):
        with pytest.raises(ValidationError):
            IdenticonSettings(**kwargs)


class TestComposerFromSettings:
    def test_default_matches_plain_composer(self):
        assert composer_from_settings("dave").generate(50) == JazzIcon("dave").generate(50)

    def test_digest_is_used(self):
        icon = composer_from_settings("dave", IdenticonSettings(digest="sha1"))
        expected = int(hashlib.sha1(b"dave").hexdigest()[:12], 16)
        assert icon.seed == expected
        assert icon.seed != derive_seed("dave")

    def test_palette_too_short_for_shapes(self):
        settings = IdenticonSettings(palette="#000000,#111111,#222222")
        with pytest.raises(ValueError):
            composer_from_settings(1, settings)

    def test_shape_count_applied(self):
        settings = IdenticonSettings(shape_count=5)
        assert len(composer_from_settings(1, settings).generate(10).shapes) == 5
