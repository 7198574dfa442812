"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palette and visual appearance
- Theme variables (borders, scrollbars, footer)

To add a new theme, define it here and register it in the app.
"""

from textual.theme import Theme

# Dark slate background with the cyan-to-blue accents of the Aura brand
AURA_NIGHT = Theme(
    name="aura-night",
    primary="#3b82f6",      # Blue - user messages, input focus
    secondary="#22d3ee",    # Cyan - assistant messages
    accent="#7dd3fc",       # Sky - temperature, highlights
    foreground="#e5e7eb",
    background="#111827",
    success="#34d399",
    warning="#fbbf24",
    error="#ef4444",
    surface="#1f2937",
    panel="#18212f",
    dark=True,
    variables={
        "block-cursor-foreground": "#111827",
        "block-cursor-background": "#7dd3fc",
        "input-selection-background": "#3b82f6 30%",

        "border": "#374151",
        "border-blurred": "#1f2937",

        "scrollbar": "#374151",
        "scrollbar-hover": "#4b5563",
        "scrollbar-active": "#3b82f6",
        "scrollbar-background": "#18212f",

        "footer-background": "#111827",
        "footer-key-foreground": "#22d3ee",
        "footer-description-foreground": "#9ca3af",

        "text-muted": "#6b7280",
        "text-disabled": "#4b5563",
    },
)
