"""
ExportService – validates the form state and writes the PDF file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from core.config.config_service import ConfigService, config_service
from core.logging.logic.logger import Logger, logger as default_logger
from ..exceptions.errors import CompanyRequiredError
from .document_renderer import render_document
from .form_state import FormState

_FEATURE = "Leistungsnachweis"


class ExportService:
    def __init__(self, *, config: Optional[ConfigService] = None, logger: Optional[Logger] = None) -> None:
        self._config = config or config_service
        self._logger = logger or default_logger

    def output_path(self, target_dir: str | Path | None = None) -> Path:
        directory = Path(target_dir) if target_dir else self._config.export.output_dir
        return directory / self._config.export.filename

    def validate(self, state: FormState) -> None:
        """Raises CompanyRequiredError (and raises the marker) when no company is selected."""
        if not state.order.company:
            state.mark_company_touched()
            self._logger.log(feature=_FEATURE, event="ExportRejected", level="WARNING",
                             message="company not selected")
            raise CompanyRequiredError()

    def render(self, state: FormState) -> bytes:
        self.validate(state)
        return render_document(state.snapshot())

    def export(self, state: FormState, target_dir: str | Path | None = None) -> Path:
        pdf = self.render(state)
        path = self.output_path(target_dir)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(pdf)
        self._logger.log(
            feature=_FEATURE,
            event="Exported",
            reference_id=state.order.order_number or None,
            message=f"{len(state.services)} service entries -> {path}",
        )
        return path
