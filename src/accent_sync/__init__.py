"""Accent color sync for GTK user stylesheets.

Keeps a managed block inside ~/.config/gtk-3.0/gtk.css and
~/.config/gtk-4.0/gtk.css in step with the desktop accent-color setting.

Managed blocks are demarcated:
    /* adw-gtk3 Colorizer Extension Start */
    @define-color accent_bg_color #3584e4;
    ...
    /* adw-gtk3 Colorizer Extension End */

Anything outside these markers is preserved untouched.
"""

__version__ = "0.3.0"

# Marker constants used by block, render and sync
START_MARKER = "/* adw-gtk3 Colorizer Extension Start */"
END_MARKER = "/* adw-gtk3 Colorizer Extension End */"
