"""Block renderers for the GTK 3 and GTK 4 stylesheets."""

from __future__ import annotations

from accent_sync.accent import AccentResolution
from accent_sync.block import ManagedBlock


def render_gtk3(accent: AccentResolution) -> ManagedBlock:
    """adw-gtk3 reads literal @define-color bindings."""
    return ManagedBlock(
        f"@define-color accent_bg_color {accent.hex_code};\n"
        "@define-color accent_color @accent_bg_color;"
    )


def render_gtk4(accent: AccentResolution) -> ManagedBlock | None:
    """libadwaita only knows the named palette; custom hex gets no block."""
    if not accent.is_named or not accent.name:
        return None
    return ManagedBlock(
        ":root {\n"
        f"  --accent-bg-color: var(--accent-{accent.name});\n"
        "}"
    )


RENDERERS = {
    "gtk3": render_gtk3,
    "gtk4": render_gtk4,
}


def render_block(target: str, accent: AccentResolution) -> ManagedBlock | None:
    """Render the block for a target key, or None if it should be removed."""
    renderer = RENDERERS.get(target)
    if renderer is None:
        raise ValueError(f"Unknown target: {target}")
    return renderer(accent)
