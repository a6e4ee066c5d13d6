"""Renders the banner and end-of-run summary."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from .models import MigrationSummary

_RULE = "=" * 47
_BANNER_TITLE = "Biome Migration Assistant"
_SUMMARY_TITLE = "Summary"


class SummaryRenderer:
    """Formats run reports from Jinja templates shipped with the package."""

    def __init__(self, templates_dir: Path | None = None) -> None:
        self.templates_dir = templates_dir or Path(__file__).with_name("templates")
        self._env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def banner(self) -> str:
        template = self._env.get_template("banner.j2")
        return template.render(rule=_RULE, title=_centered(_BANNER_TITLE))

    def summary(self, summary: MigrationSummary) -> str:
        template = self._env.get_template("summary.j2")
        return template.render(rule=_RULE, title=_centered(_SUMMARY_TITLE), summary=summary)


def _centered(title: str) -> str:
    return title.center(len(_RULE)).rstrip()


__all__ = ["SummaryRenderer"]
