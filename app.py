import os

import dash
from dash import dcc, html, Input, Output, State, ctx
from dash.dependencies import ALL
from dash.exceptions import PreventUpdate
import dash_bootstrap_components as dbc
import plotly.graph_objects as go
import numpy as np

from takeoff_core import (
    COLORS,
    DEFAULT_ANGLE_OF_ATTACK,
    SEARCH_DEBOUNCE_MS,
    SPEED_CURVE_ANGLES,
    SPEED_UNIT_LABEL,
    SessionState,
    compute_results,
    display_rows,
    dprint,
    format_speed,
    load_aircraft_table,
    run_search,
    select_suggestion,
    set_angle,
    set_override_wing_area,
    set_query,
    speed_curve,
    summary_rows,
)
from takeoff_core.constants import SERVER_HOST, SERVER_PORT

# ✅ Load aircraft table FIRST (once, read-only afterwards)
print("[BOOT] Loading aircraft dataset once...")
AIRCRAFT_TABLE = load_aircraft_table()
print(f"[BOOT] Loaded {len(AIRCRAFT_TABLE)} aircraft")

# ✅ Initialize Dash app
app = dash.Dash(
    __name__,
    external_stylesheets=[dbc.themes.DARKLY],
    suppress_callback_exceptions=True,
)
server = app.server

app.index_string = """
<!DOCTYPE html>
<html>
    <head>
        {%metas%}
        <title>Aircraft Takeoff Speed Calculator</title>
        <meta name="description" content="Look up an aircraft by ICAO code, FAA designator, manufacturer or model and estimate an approximate takeoff speed from its wing geometry and angle of attack.">
        {%favicon%}
        {%css%}
    </head>
    <body>
        {%app_entry%}
        <footer>
            {%config%}
            {%scripts%}
            {%renderer%}
        </footer>
    </body>
</html>
"""

CARD_STYLE = {
    "background": COLORS["card_bg"],
    "padding": "20px",
    "borderRadius": "12px",
    "boxShadow": "0 4px 12px rgba(0,0,0,0.5)",
    "marginBottom": "20px",
}

INPUT_STYLE = {
    "width": "100%",
    "padding": "10px",
    "marginTop": "6px",
    "borderRadius": "8px",
    "border": "1px solid #555",
    "outline": "none",
    "background": COLORS["input_bg"],
    "color": COLORS["text"],
}

HIDDEN = {"display": "none"}


# === Layout ===
def calculator_layout():
    return html.Div([
        dcc.Store(id="session-store", data=SessionState().to_dict()),

        html.H1("Aircraft Takeoff Speed Calculator", style={
            "textAlign": "center",
            "marginBottom": "30px",
            "color": COLORS["accent"],
        }),

        # Input Card
        html.Div([
            html.Div([
                html.Label("Aircraft Name:", style={"fontWeight": 600}),
                dcc.Input(
                    id="aircraft-name-input",
                    type="text",
                    value="",
                    placeholder="Start typing...",
                    debounce=SEARCH_DEBOUNCE_MS / 1000,
                    style=INPUT_STYLE,
                ),
                html.Div(id="suggestions-container", style=HIDDEN),
            ], style={"marginBottom": "16px", "position": "relative"}),

            html.Div([
                html.Label("Wing Area (ft²):", style={"fontWeight": 600}),
                dcc.Input(
                    id="wing-area-input",
                    type="number",
                    min=0,
                    placeholder="Enter wing area...",
                    debounce=True,
                    style=INPUT_STYLE,
                ),
            ], style={"marginBottom": "16px"}),

            html.Div([
                html.Label("Angle of Attack (°):", style={"fontWeight": 600}),
                dcc.Input(
                    id="angle-input",
                    type="number",
                    value=DEFAULT_ANGLE_OF_ATTACK,
                    placeholder="Enter angle of attack...",
                    debounce=True,
                    style=INPUT_STYLE,
                ),
            ]),
        ], style=CARD_STYLE),

        # Speed Card
        html.Div([
            html.H3("Takeoff Speed", style={"marginBottom": "12px", "color": COLORS["accent"]}),
            html.P(["Normal Wings: ", html.Strong(id="speed-normal")], style={"fontSize": "18px"}),
            html.P(
                ["Extended Wings: ", html.Strong(id="speed-extended")],
                id="speed-extended-row",
                style=HIDDEN,
            ),
            dcc.Graph(id="speed-curve-graph", config={"displayModeBar": False}),
        ], style={**CARD_STYLE, "background": COLORS["speed_card_bg"]}),

        # Aircraft Info Card
        html.Div(
            id="aircraft-info-card",
            style={**CARD_STYLE, "background": COLORS["info_card_bg"], "display": "none"},
        ),
    ], style={
        "padding": "20px",
        "maxWidth": "900px",
        "margin": "auto",
        "fontFamily": "Segoe UI, sans-serif",
        "background": COLORS["dark_bg"],
        "minHeight": "100vh",
        "color": COLORS["text"],
    })


app.layout = calculator_layout


# === Session updates ===
@app.callback(
    Output("session-store", "data"),
    Output("aircraft-name-input", "value"),
    Output("wing-area-input", "value"),
    Input("aircraft-name-input", "value"),
    Input({"type": "suggestion", "index": ALL}, "n_clicks"),
    Input("wing-area-input", "value"),
    Input("angle-input", "value"),
    State("session-store", "data"),
    prevent_initial_call=True
)
def update_session(name, suggestion_clicks, wing_area, angle, session_data):
    triggered = ctx.triggered_id
    state = SessionState.from_dict(session_data, AIRCRAFT_TABLE)
    name_out = dash.no_update
    wing_area_out = dash.no_update

    if isinstance(triggered, dict) and triggered.get("type") == "suggestion":
        # Re-rendering the list fires this with n_clicks=None; ignore that
        if not ctx.triggered or not ctx.triggered[0].get("value"):
            raise PreventUpdate
        record = AIRCRAFT_TABLE.by_row(triggered["index"])
        if record is None:
            raise PreventUpdate
        state = select_suggestion(state, record)
        dprint(f"[DEBUG] Selected row {record.row}: {record.model_name}")
        name_out = state.query
        wing_area_out = state.override_wing_area
    elif triggered == "aircraft-name-input":
        if (name or "") == state.query:
            raise PreventUpdate
        state = run_search(set_query(state, name), AIRCRAFT_TABLE)
        dprint(f"[SEARCH] {state.query!r} -> {len(state.suggestions)} matches")
    elif triggered == "wing-area-input":
        state = set_override_wing_area(state, wing_area)
    elif triggered == "angle-input":
        state = set_angle(state, angle)
    else:
        raise PreventUpdate

    return state.to_dict(), name_out, wing_area_out


# === Rendering ===
@app.callback(
    Output("suggestions-container", "children"),
    Output("suggestions-container", "style"),
    Input("session-store", "data")
)
def render_suggestions(session_data):
    state = SessionState.from_dict(session_data, AIRCRAFT_TABLE)
    if not state.suggestions:
        return [], HIDDEN

    last = len(state.suggestions) - 1
    items = [
        html.Div(
            rec.model_name,
            id={"type": "suggestion", "index": rec.row},
            n_clicks=0,
            className="suggestion-item",
            style={
                "padding": "10px",
                "cursor": "pointer",
                "borderBottom": "1px solid #555" if i != last else "none",
            },
        )
        for i, rec in enumerate(state.suggestions)
    ]
    return items, {
        "position": "absolute",
        "background": COLORS["card_bg"],
        "border": "1px solid #555",
        "borderRadius": "8px",
        "width": "100%",
        "maxHeight": "180px",
        "overflowY": "auto",
        "zIndex": 10,
        "marginTop": "2px",
    }


@app.callback(
    Output("wing-area-input", "placeholder"),
    Output("speed-normal", "children"),
    Output("speed-extended", "children"),
    Output("speed-extended-row", "style"),
    Input("session-store", "data")
)
def render_speeds(session_data):
    state = SessionState.from_dict(session_data, AIRCRAFT_TABLE)
    results = compute_results(state)

    # An empty override field shows the area actually in use
    placeholder = (
        f"{results.effective_wing_area:g}"
        if results.effective_wing_area is not None
        else "Enter wing area..."
    )
    extended_style = {"fontSize": "18px"} if results.extended is not None else HIDDEN
    return (
        placeholder,
        format_speed(results.normal),
        format_speed(results.extended),
        extended_style,
    )


@app.callback(
    Output("speed-curve-graph", "figure"),
    Input("session-store", "data")
)
def render_speed_curve(session_data):
    state = SessionState.from_dict(session_data, AIRCRAFT_TABLE)
    results = compute_results(state)

    fig = go.Figure()
    fig.update_layout(
        template="plotly_dark",
        paper_bgcolor=COLORS["speed_card_bg"],
        plot_bgcolor=COLORS["speed_card_bg"],
        margin=dict(l=40, r=20, t=30, b=40),
        height=260,
        xaxis=dict(title="Angle of Attack (°)", showgrid=True),
        yaxis=dict(title=f"Takeoff Speed ({SPEED_UNIT_LABEL})", showgrid=True),
        dragmode=False,
        hovermode="closest",
        showlegend=False,
    )
    if results.effective_wing_area is None:
        return fig

    lo, hi = SPEED_CURVE_ANGLES
    angles, speeds = speed_curve(results.effective_wing_area, np.linspace(lo, hi, 91))
    fig.add_trace(go.Scatter(
        x=angles, y=speeds,
        mode="lines",
        line=dict(color=COLORS["speed_curve"], width=2),
        hovertemplate="%{x:.1f}°: %{y:.0f} " + SPEED_UNIT_LABEL + "<extra></extra>",
    ))
    if results.normal is not None:
        fig.add_trace(go.Scatter(
            x=[state.angle_of_attack], y=[results.normal],
            mode="markers",
            marker=dict(color=COLORS["selected_angle"], size=10),
            hovertemplate="%{x:.1f}°: %{y} " + SPEED_UNIT_LABEL + "<extra></extra>",
        ))
    return fig


@app.callback(
    Output("aircraft-info-card", "children"),
    Output("aircraft-info-card", "style"),
    Input("session-store", "data")
)
def render_aircraft_info(session_data):
    state = SessionState.from_dict(session_data, AIRCRAFT_TABLE)
    style = {**CARD_STYLE, "background": COLORS["info_card_bg"]}
    if state.selection is None:
        return [], {**style, "display": "none"}

    rows = display_rows(state.selection) + summary_rows(state.selection)
    children = [html.H3("Selected Aircraft Info", style={"marginBottom": "16px", "color": COLORS["accent"]})]
    children += [html.P([html.Strong(f"{label}:"), f" {text}"]) for label, text in rows]
    return children, style


if __name__ == "__main__":
    # Use env var to control Dash debug (1 = on, 0 = off)
    debug_mode = os.environ.get("TAKEOFF_DASH_DEBUG", "0") == "1"
    app.run(debug=debug_mode, host=SERVER_HOST, port=SERVER_PORT)
