"""Jinja2 template loading and report rendering with per-project overrides."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from jinja2 import BaseLoader, ChoiceLoader, Environment, FileSystemLoader, PackageLoader

from bugintake.domain.sections import Section

if TYPE_CHECKING:
    from bugintake.domain.report import BugReport

REPORT_TEMPLATE = "report.md.j2"
BLANK_TEMPLATE = "blank.md.j2"


def build_template_environment(group: str, *, project_root: Path | None = None) -> Environment:
    """Build a Jinja2 environment with user overrides before packaged defaults.

    User overrides are loaded from ``.bugintake/templates/`` inside the
    project. Both a namespaced directory (for example
    ``.bugintake/templates/report/``) and the shared root are searched.
    """

    loaders: list[BaseLoader] = []
    if project_root is not None:
        template_root = project_root / ".bugintake" / "templates"
        loaders.append(FileSystemLoader([str(template_root / group), str(template_root)]))

    loaders.append(PackageLoader("bugintake", f"templates/{group}"))
    return Environment(
        loader=ChoiceLoader(loaders),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render_report(report: BugReport, *, project_root: Path | None = None) -> str:
    """Serialize *report* back into the template layout.

    Validating the output yields a report equal to *report*.
    """
    env = build_template_environment("report", project_root=project_root)
    sections = [(section.label, body) for section, body in report.section_bodies()]
    return env.get_template(REPORT_TEMPLATE).render(sections=sections).rstrip("\n") + "\n"


def render_blank_template(*, project_root: Path | None = None) -> str:
    """Render the empty issue template with placeholder prompts."""
    env = build_template_environment("report", project_root=project_root)
    return env.get_template(BLANK_TEMPLATE).render(sections=list(Section)).rstrip("\n") + "\n"
