from typing import Literal

from pydantic import BaseModel, Field


class ConverterSettings(BaseModel):
    prog_id: str
    intent: Literal["print", "screen"] = "print"


class PdfCreatorConfig(BaseModel):
    word: ConverterSettings = Field(
        default_factory=lambda: ConverterSettings(prog_id="Word.Application")
    )
    excel: ConverterSettings = Field(
        default_factory=lambda: ConverterSettings(prog_id="Excel.Application")
    )
    powerpoint: ConverterSettings = Field(
        default_factory=lambda: ConverterSettings(prog_id="PowerPoint.Application")
    )
    pause_on_exit: bool = True
    log_level: Literal["debug", "info", "warn", "error"] = "warn"
