"""Light theme."""

from matchup_graph.render.style import Theme

LIGHT_THEME = Theme(
    name="light",
    background_color="none",
    node_fill="#ffffff",
    node_stroke="#333333",
    node_radius=8.0,
    node_stroke_width=2.0,
    edge_width=2.0,
    path_edge_width=4.5,
    label_color="#333333",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=14.0,
    title_color="#111111",
    title_font_size=24.0,
    message_color="#666666",
    legend_background="rgba(255, 255, 255, 0.8)",
    legend_text_color="#333333",
    legend_font_size=14.0,
    endpoint_fill="#c6d4f5",
)
