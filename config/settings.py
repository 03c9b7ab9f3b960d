#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Settings - Centralized configuration management
"""

from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    DEFAULT_KEYWORD_LOCALES,
    DEFAULT_QUESTION_POINTS,
    FALLBACK_SENTENCE_COUNT,
    LOG_FILE,
    LOG_LEVEL,
    MAX_BULLET_OPTIONS,
    MAX_OPTION_LENGTH,
    MAX_SLIDE_BULLETS,
    MINUTES_PER_SLIDE,
    OPTION_WINDOW,
    SUMMARY_SAMPLE_ANSWERS,
    WORDS_PER_PAGE,
)


# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_file=str(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        env_prefix="NOTEBRIDGE_",
        case_sensitive=False,
        extra="ignore",
    )

    # ========== Logging ==========
    log_level: str = LOG_LEVEL
    log_to_file: bool = False  # Library default: console only
    log_file: str = LOG_FILE

    # ========== Document Analysis ==========
    words_per_page: int = Field(default=WORDS_PER_PAGE, gt=0)

    # ========== Presentation Analysis ==========
    max_slide_bullets: int = Field(default=MAX_SLIDE_BULLETS, ge=0)
    fallback_sentence_count: int = Field(default=FALLBACK_SENTENCE_COUNT, ge=0)
    minutes_per_slide: float = Field(default=MINUTES_PER_SLIDE, gt=0)

    # ========== Question Detection ==========
    option_window: int = Field(default=OPTION_WINDOW, ge=0)
    max_bullet_options: int = Field(default=MAX_BULLET_OPTIONS, ge=0)
    max_option_length: int = Field(default=MAX_OPTION_LENGTH, gt=0)
    keyword_locales: List[str] = Field(default_factory=lambda: list(DEFAULT_KEYWORD_LOCALES))

    # ========== Forms ==========
    summary_sample_answers: int = Field(default=SUMMARY_SAMPLE_ANSWERS, ge=2)
    default_question_points: int = Field(default=DEFAULT_QUESTION_POINTS, ge=0)


@lru_cache
def get_settings() -> Settings:
    """Return cached settings."""
    return Settings()
