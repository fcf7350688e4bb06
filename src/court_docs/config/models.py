"""Pydantic models for court document configuration.

These models validate and type the JSON configuration file that drives
page geometry and typography for the Word and PDF exports.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Page
# ---------------------------------------------------------------------------


class Margins(BaseModel):
    """Page margins in millimetres."""

    top_mm: float = 25.4
    bottom_mm: float = 25.4
    left_mm: float = 25.4
    right_mm: float = 25.4


class PageConfig(BaseModel):
    """Paper size and margins shared by both exports."""

    paper: str = "A4"
    width_mm: float = Field(210.0, gt=0)
    height_mm: float = Field(297.0, gt=0)
    margins: Margins = Field(default_factory=Margins)


# ---------------------------------------------------------------------------
# Typography (Word export)
# ---------------------------------------------------------------------------


class TypographyConfig(BaseModel):
    """Font and spacing rules for the Word export."""

    font_name: str = "Century Gothic"
    font_size_pt: int = Field(12, ge=8, le=24)
    body_line_spacing: float = Field(1.5, ge=1.0, le=3.0)
    hanging_indent_inches: float = 0.5
    space_after_pt: int = 10
    heading_space_before_pt: int = 20
    heading_space_after_pt: int = 10
    rule_weight_eighths: int = Field(12, description="Bottom border size, in 1/8 pt")


# ---------------------------------------------------------------------------
# PDF export
# ---------------------------------------------------------------------------


class PdfConfig(BaseModel):
    """Core-font PDF layout. fpdf2 built-in fonts: Times, Helvetica, Courier."""

    font_family: str = "Times"
    font_size_pt: int = Field(12, ge=8, le=24)
    margin_mm: float = 25.0
    line_height_mm: float = Field(6.0, gt=0)
    block_gap_mm: float = 2.0
    number_indent_mm: float = 10.0
    rule_width_mm: float = 0.5


# ---------------------------------------------------------------------------
# Document defaults
# ---------------------------------------------------------------------------


class DocumentDefaults(BaseModel):
    """Defaults offered by the wizard."""

    prepared_by: str = ""
    exhibit_types: list[str] = Field(
        default_factory=lambda: [
            "Letter",
            "Email",
            "Text Message",
            "Photograph",
            "Report",
            "Contract",
            "Invoice",
            "Court Order",
            "Other",
        ]
    )


# ---------------------------------------------------------------------------
# Root
# ---------------------------------------------------------------------------


class CourtDocsConfig(BaseModel):
    """Root configuration model."""

    page: PageConfig = Field(default_factory=PageConfig)
    typography: TypographyConfig = Field(default_factory=TypographyConfig)
    pdf: PdfConfig = Field(default_factory=PdfConfig)
    document: DocumentDefaults = Field(default_factory=DocumentDefaults)
