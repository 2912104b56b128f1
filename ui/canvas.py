"""
canvas.py — SVG Bar Chart Renderer
====================================
Pure rendering function: Snapshot → SVG string.

The renderer consumes:
  • snapshot   – the current Snapshot (values, per-index states, pointers)
  • config     – visual config (canvas size, colors, fonts, …)

And produces an SVG string ready to inject into the DOM.

Design decisions:
  - NO mutation.  This function is stateless — the caller passes in
    everything it needs and gets back a string.
  - State-based coloring is a simple dict lookup: ElementState value → hex color.
  - Bar height is proportional to value / max(array), so a zero still
    gets a visible sliver.
  - Value labels are drawn only while bars are wide enough to hold them.
"""

from typing import Dict, Optional

from algorithms.snapshot import Snapshot


# ---------------------------------------------------------------------------
# Visual Config: color palette, dimensions, fonts
# ---------------------------------------------------------------------------
class CanvasConfig:
    # canvas
    width:  int = 900
    height: int = 420
    bg:     str = "#0d1117"

    # bar colors (state → fill)
    bar_colors: Dict[str, str] = {
        "normal":          "#0ea5e9",   # cyan
        "comparing":       "#d946ef",   # magenta
        "swapping":        "#ef4444",   # red
        "current":         "#facc15",   # yellow: pivot / key
        "selected":        "#f8fafc",   # white
        "partition_left":  "#3b82f6",   # blue
        "partition_right": "#f97316",   # orange
        "sorted":          "#10b981",   # emerald green
    }

    # bars
    padding:        int = 24
    bar_gap:        int = 2
    min_bar_height: int = 3
    bar_radius:     int = 2

    # labels
    label_color:     str = "#e6edf3"
    label_size:      int = 11
    label_min_width: int = 18     # bars narrower than this get no value label
    empty_color:     str = "#7d8590"


CONFIG = CanvasConfig()


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def render_bars(
    snapshot: Optional[Snapshot],
    config: CanvasConfig = CONFIG,
    show_values: bool = True,
) -> str:
    """
    Returns an SVG string.

    Args:
        snapshot    : Current frame (or None for an empty canvas).
        config      : Visual config.
        show_values : If True, print each value above its bar when it fits.
    """
    svg_parts = [
        f'<svg width="{config.width}" height="{config.height}" '
        f'viewBox="0 0 {config.width} {config.height}" '
        f'xmlns="http://www.w3.org/2000/svg" style="background: {config.bg};">',
        f'<rect width="{config.width}" height="{config.height}" fill="{config.bg}"/>',
    ]

    if snapshot is None or not snapshot.array:
        svg_parts.append(
            f'<text x="{config.width // 2}" y="{config.height // 2}" text-anchor="middle" '
            f'font-size="14" font-family="\'DM Sans\', sans-serif" '
            f'fill="{config.empty_color}">No data — generate or import a dataset</text>'
        )
        svg_parts.append("</svg>")
        return "\n".join(svg_parts)

    values = snapshot.array
    n = len(values)
    top = max(max(values), 1)

    usable_w = config.width - 2 * config.padding
    usable_h = config.height - 2 * config.padding - config.label_size
    slot = usable_w / n
    bar_w = max(slot - config.bar_gap, 1.0)
    baseline = config.height - config.padding

    svg_parts.append('<g class="bars">')
    for i, value in enumerate(values):
        state = snapshot.states[i].value if i < len(snapshot.states) else "normal"
        fill = config.bar_colors.get(state, config.bar_colors["normal"])
        h = max(value / top * usable_h, config.min_bar_height)
        x = config.padding + i * slot
        y = baseline - h
        svg_parts.append(
            f'  <rect class="bar {state}" data-index="{i}" x="{x:.2f}" y="{y:.2f}" '
            f'width="{bar_w:.2f}" height="{h:.2f}" rx="{config.bar_radius}" fill="{fill}"/>'
        )
        if show_values and bar_w >= config.label_min_width:
            svg_parts.append(
                f'  <text x="{x + bar_w / 2:.2f}" y="{y - 4:.2f}" text-anchor="middle" '
                f'font-size="{config.label_size}" font-family="\'JetBrains Mono\', monospace" '
                f'fill="{config.label_color}">{value}</text>'
            )
    svg_parts.append('</g>')

    svg_parts.append("</svg>")
    return "\n".join(svg_parts)
