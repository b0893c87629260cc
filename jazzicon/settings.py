import hashlib
from functools import lru_cache
from typing import Optional, Tuple, Union

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .colors import DEFAULT_PALETTE, Color, parse_palette
from .composer import DEFAULT_SHAPE_COUNT, DEFAULT_WOBBLE, JazzIcon
from .seed import hexdigest_for


class IdenticonSettings(BaseSettings):
    shape_count: int = DEFAULT_SHAPE_COUNT
    wobble: int = DEFAULT_WOBBLE
    palette: Optional[str] = None  # comma separated hex colours
    digest: str = "md5"
    render_scale: int = 4
    circular: bool = False

    model_config = SettingsConfigDict(env_prefix="JAZZICON_", env_file=".env",
                                      case_sensitive=False, extra="ignore")

    @field_validator("palette")
    @classmethod
    def _check_palette(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        if value is not None:
            parse_palette(value)
        return value

    @field_validator("digest")
    @classmethod
    def _check_digest(cls, value: str) -> str:
        value = value.lower()
        if value not in hashlib.algorithms_available:
            raise ValueError(f"unknown digest algorithm: {value}")
        return value

    @field_validator("shape_count")
    @classmethod
    def _check_shape_count(cls, value: int) -> int:
        if value < 2:
            raise ValueError("at least 2 shapes are needed")
        return value

    @field_validator("render_scale")
    @classmethod
    def _check_scale(cls, value: int) -> int:
        if value < 1:
            raise ValueError("must be positive")
        return value

    def palette_colors(self) -> Tuple[Color, ...]:
        if self.palette is None:
            return DEFAULT_PALETTE
        return parse_palette(self.palette)


@lru_cache
def get_settings() -> IdenticonSettings:
    return IdenticonSettings()


def composer_from_settings(seed: Union[int, str], settings: Optional[IdenticonSettings] = None) -> JazzIcon:
    settings = settings or get_settings()
    return JazzIcon(
        seed,
        settings.palette_colors(),
        shape_count=settings.shape_count,
        wobble=settings.wobble,
        digest=hexdigest_for(settings.digest),
    )
