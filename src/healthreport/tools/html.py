"""HTML report rendering."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from healthreport.templates.report_template import REPORT_TEMPLATE


logger = logging.getLogger(__name__)


class HTMLRenderer:
    """Renders report data into a standalone HTML page."""

    def __init__(self, templates_dir: Path | None = None) -> None:
        self._templates_dir = templates_dir
        self._env: Environment | None = None

    def _get_env(self) -> Environment:
        if self._env is None:
            self._env = Environment(
                loader=FileSystemLoader(self._templates_dir) if self._templates_dir else None,
                autoescape=select_autoescape(["html", "xml"], default_for_string=True),
            )
        return self._env

    def render(self, data: dict[str, Any], template_name: str = "report.html") -> str:
        """Render with a template from ``templates_dir``, or the built-in one."""
        env = self._get_env()
        if self._templates_dir and (self._templates_dir / template_name).exists():
            template = env.get_template(template_name)
        else:
            template = env.from_string(REPORT_TEMPLATE)
        return template.render(**data)

    def write(self, data: dict[str, Any], output_path: str | Path) -> Path:
        html_content = self.render(data)
        output = Path(output_path)
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(html_content, encoding="utf-8")
        logger.info("Report written: %s (%d bytes)", output, len(html_content))
        return output.absolute()
