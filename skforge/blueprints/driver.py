# skforge/blueprints/driver.py
"""
driver.md generation.

Renders a client's feature selection into the driver document consumed by
the build tooling. Output depends only on the selection: no timestamps, no
filesystem access.
"""

from ..models.driver import DriverSelection

FALLBACK_CATEGORY = "load-balancers"
FALLBACK_PROJECT = "project"
FALLBACK_LANGUAGE = "rust"
FALLBACK_HARDWARE = "server"
FALLBACK_MEMORY = "standard"


def generate_driver(selection: DriverSelection) -> str:
    """
    Render driver.md for a selection.

    Sections are emitted in a fixed order: title, blueprint, language,
    profile, one checklist per selected group, build options.
    """
    project = selection.category or FALLBACK_PROJECT

    lines = [
        f"# driver.md — My Custom {project.replace('-', ' ')}",
        "",
        "## Blueprint",
        f"category: {selection.category or FALLBACK_CATEGORY}",
        "",
        "## Language",
        f"target: {selection.language or FALLBACK_LANGUAGE}",
        "",
        "## Profile",
        f"hardware: {selection.hardware or FALLBACK_HARDWARE}",
        f"memory: {selection.memory or FALLBACK_MEMORY}",
        "",
        "## Features",
        "<!-- Select features below. [x] = include, [ ] = skip -->",
        "",
    ]

    for group, choices in selection.selected_features.items():
        lines.append(f"### {group}")
        for choice in choices:
            check = "x" if choice.enabled else " "
            lines.append(f"- [{check}] {choice.name}")
        lines.append("")

    lines.extend([
        "## Build",
        "auto-test: true",
        "auto-benchmark: false",
        f"output: ./{project}-custom/",
    ])

    return "\n".join(lines) + "\n"
