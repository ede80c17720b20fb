"""Template-driven toasts loaded from YAML."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel

from toaster.core.types import ToastVariant
from toaster.notifications.service import ToastHandle, ToastService

_DEFAULT_TEMPLATES_PATH = Path(__file__).resolve().parents[3] / "config" / "toast_templates.yml"
_PLACEHOLDER = re.compile(r"\{(\w+)\}")


class ToastTemplate(BaseModel):
    id: str
    title: str
    description: str = ""
    variant: ToastVariant = ToastVariant.DEFAULT
    duration: int | None = None


class ToastEngine:
    """Renders named templates and enqueues the result on a ToastService."""

    def __init__(
        self,
        service: ToastService,
        templates_path: str | Path | None = None,
    ) -> None:
        self._service = service
        self._templates: dict[str, ToastTemplate] = {}
        self._load_templates(Path(templates_path) if templates_path else _DEFAULT_TEMPLATES_PATH)

    def _load_templates(self, path: Path) -> None:
        if not path.exists():
            return
        with open(path) as fh:
            data = yaml.safe_load(fh) or {}
        for tmpl_id, tmpl_data in (data.get("templates") or {}).items():
            self._templates[tmpl_id] = ToastTemplate(id=tmpl_id, **(tmpl_data or {}))

    @property
    def templates(self) -> dict[str, ToastTemplate]:
        return dict(self._templates)

    def render(self, template_id: str, context: dict[str, Any] | None = None) -> dict[str, Any]:
        """Build the toast payload for ``template_id`` without enqueueing it."""
        context = context or {}
        template = self._templates.get(template_id)
        if template is None:
            return {"title": template_id.replace("_", " ").capitalize()}

        payload: dict[str, Any] = {
            "title": self._render(template.title, context),
            "variant": template.variant,
        }
        if template.description:
            payload["description"] = self._render(template.description, context)
        if template.duration is not None:
            payload["duration"] = template.duration
        return payload

    def show(self, template_id: str, context: dict[str, Any] | None = None, **overrides: Any) -> ToastHandle:
        payload = self.render(template_id, context)
        payload.update(overrides)
        return self._service.enqueue(**payload)

    def _render(self, template_str: str, context: dict[str, Any]) -> str:
        """Single-pass {key} substitution; unknown placeholders are kept."""
        str_context = {k: str(v) for k, v in context.items()}

        def _replace(m: re.Match) -> str:
            return str_context.get(m.group(1), m.group(0))

        return _PLACEHOLDER.sub(_replace, template_str)
