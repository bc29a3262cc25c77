#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Settings - Centralized configuration management
"""

from pathlib import Path
from typing import Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings

from core.qa_export.layout import FontSpec, LayoutSpec, PageSpec


# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent

OVERFLOW_POLICIES = ("accept", "fail")


class Settings(BaseSettings):
    """Application settings"""

    # ========== Page ==========
    page_width: float = 595.28  # A4 portrait, points
    page_height: float = 841.89
    page_margin: float = 50

    # ========== Title block ==========
    title_top: float = 80
    title_font: str = "Helvetica-Bold"
    title_size: float = 24
    title_leading: float = 26
    title_spacing: float = 40

    # ========== Question / answer blocks ==========
    question_font: str = "Helvetica-Bold"
    question_size: float = 12
    question_leading: float = 14
    question_spacing: float = 15

    answer_font: str = "Helvetica"
    answer_size: float = 11
    answer_leading: float = 12
    answer_spacing: float = 10

    pair_spacing: float = 25

    # ========== Footer ==========
    footer_font: str = "Helvetica"
    footer_size: float = 9
    footer_offset: float = 20  # distance from the page bottom

    # ========== Behaviour ==========
    # accept | fail
    overflow_policy: str = "accept"
    split_answer_paragraphs: bool = False
    default_title: str = "Exam Answer Generator"
    title_max_chars: int = 40

    # Optional TTF font files (registered under the font names above)
    font_dir: Optional[Path] = None

    # ========== Directories ==========
    output_dir: Path = BASE_DIR / "data" / "output"
    transcript_path: Path = BASE_DIR / "data" / "exam-helper-chat.json"

    # ========== API ==========
    # CORS origins (comma-separated in env, parsed to list)
    cors_origins: str = ""  # Empty = use default dev origins

    # ========== Logging ==========
    log_level: str = "INFO"

    class Config:
        env_file = str(BASE_DIR / ".env")
        env_file_encoding = "utf-8"
        env_prefix = "QA_EXPORT_"
        case_sensitive = False
        extra = "ignore"  # Allow extra fields from .env that aren't defined in model

    @field_validator("overflow_policy")
    @classmethod
    def _check_overflow_policy(cls, value: str) -> str:
        value = value.lower()
        if value not in OVERFLOW_POLICIES:
            raise ValueError(
                f"overflow_policy must be one of {OVERFLOW_POLICIES}, got {value!r}"
            )
        return value

    @field_validator("page_margin")
    @classmethod
    def _check_margin(cls, value: float) -> float:
        if value < 0:
            raise ValueError("page_margin must not be negative")
        return value

    def to_layout(self) -> LayoutSpec:
        """Build the layout constants for one export run."""
        gray = 150 / 255
        body = 50 / 255
        return LayoutSpec(
            page=PageSpec(
                width=self.page_width,
                height=self.page_height,
                top_margin=self.page_margin,
                right_margin=self.page_margin,
                bottom_margin=self.page_margin,
                left_margin=self.page_margin,
            ),
            title_font=FontSpec(self.title_font, self.title_size, self.title_leading),
            question_font=FontSpec(self.question_font, self.question_size, self.question_leading),
            answer_font=FontSpec(
                self.answer_font, self.answer_size, self.answer_leading,
                color=(body, body, body),
            ),
            footer_font=FontSpec(
                self.footer_font, self.footer_size, self.footer_size,
                color=(gray, gray, gray),
            ),
            title_top=self.title_top,
            title_spacing=self.title_spacing,
            question_spacing=self.question_spacing,
            answer_spacing=self.answer_spacing,
            pair_spacing=self.pair_spacing,
            footer_offset=self.footer_offset,
        )

    def get_cors_origins(self) -> list:
        """Get CORS origins as a list. Falls back to dev defaults if empty."""
        if self.cors_origins:
            return [o.strip() for o in self.cors_origins.split(",") if o.strip()]
        # Dev defaults
        return [
            "http://localhost:3000",
            "http://127.0.0.1:3000",
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ]

    def print_config(self):
        """Print configuration summary"""
        print("\n" + "=" * 60)
        print("EXPORT CONFIGURATION")
        print("=" * 60)
        print(f"Page:            {self.page_width} x {self.page_height} pt")
        print(f"Margin:          {self.page_margin} pt")
        print(f"Overflow Policy: {self.overflow_policy}")
        print(f"Split Answers:   {self.split_answer_paragraphs}")
        print(f"Output Dir:      {self.output_dir}")
        print("=" * 60 + "\n")


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return settings
