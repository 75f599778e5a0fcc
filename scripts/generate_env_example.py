#!/usr/bin/env python3
"""Generate .env.example from ReaperSettings fields.

This script introspects the Pydantic settings classes and generates
a documented .env.example file with all available environment variables.

Usage:
    python scripts/generate_env_example.py
"""

from __future__ import annotations

from pathlib import Path


def render_env_example() -> str:
    from reaper.config import LoggingSettings, SegmentSettings, StorageSettings

    lines = [
        "# Reaper Configuration",
        "# Auto-generated from settings definitions - DO NOT EDIT MANUALLY",
        "# Copy to .env and modify as needed",
        "",
    ]

    settings_sections = [
        ("Logging", LoggingSettings),
        ("Storage", StorageSettings),
        ("Segments", SegmentSettings),
    ]

    for section_name, cls in settings_sections:
        lines.append(f"# === {section_name} ===")

        model_config = getattr(cls, "model_config", {})
        prefix = model_config.get("env_prefix", "")

        for field_name, field_info in cls.model_fields.items():  # type: ignore[attr-defined]
            env_var = f"{prefix}{field_name.upper()}"
            default = field_info.default
            desc = field_info.description or ""

            if isinstance(default, bool):
                val = "true" if default else "false"
            elif default is None:
                val = ""
            else:
                val = str(default)

            if desc:
                lines.append(f"# {desc}")

            lines.append(f"{env_var}={val}")

        lines.append("")

    return "\n".join(lines)


def main() -> int:
    """Generate .env.example from settings definitions."""
    output_path = Path(__file__).parent.parent / ".env.example"
    output_path.write_text(render_env_example())
    print(f"Generated {output_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
