"""Dark theme (default)."""

from matchup_graph.render.style import Theme

DARK_THEME = Theme(
    name="dark",
    background_color="#2b2b2b",
    node_fill="#ffffff",
    node_stroke="#333333",
    node_radius=8.0,
    node_stroke_width=1.5,
    edge_width=2.0,
    path_edge_width=4.0,
    label_color="#e0e0e0",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=13.0,
    title_color="#ffffff",
    title_font_size=22.0,
    message_color="#aaaaaa",
    legend_background="rgba(0, 0, 0, 0.3)",
    legend_text_color="#e0e0e0",
    legend_font_size=13.0,
    endpoint_fill="#4562aa",
)
