# simulation/visual_elements.py
import plotly.graph_objects as go

from simulation.config import (
    INITIAL_VIEW_STATE,
    LAYER_COLORS,
    MAP_STYLE,
    POINT_OPACITY,
    TRIP_WIDTH_PX,
)
from simulation.trip_selection import position_at, trail_at


def _rgb(color):
    return "rgb({},{},{})".format(*color)


def draw_stops(fig, stops):
    fig.add_trace(go.Scattermap(
        lon=[s.coordinates[0] for s in stops],
        lat=[s.coordinates[1] for s in stops],
        mode="markers",
        name="Stops",
        marker=dict(size=14, color=_rgb(LAYER_COLORS["stop"])),
        hoverinfo="skip"
    ))


def draw_trips(fig, trips, time, trail_length, color_key, name):
    # one line trace for all trails, separated by None gaps
    lons, lats = [], []
    for record in trips:
        trail = trail_at(record, time, trail_length)
        if len(trail) < 2:
            continue
        lons.extend([p[0] for p in trail] + [None])
        lats.extend([p[1] for p in trail] + [None])
    fig.add_trace(go.Scattermap(
        lon=lons, lat=lats,
        mode="lines",
        name=name,
        line=dict(width=TRIP_WIDTH_PX, color=_rgb(LAYER_COLORS[color_key])),
        hoverinfo="skip"
    ))


def draw_points(fig, points, time):
    positions = [position_at(p, time) for p in points]
    positions = [pos for pos in positions if pos is not None]
    fig.add_trace(go.Scattermap(
        lon=[x for x, _ in positions],
        lat=[y for _, y in positions],
        mode="markers",
        name="Vehicles",
        opacity=POINT_OPACITY,
        marker=dict(size=12, color=_rgb(LAYER_COLORS["point_car"]))
    ))


def build_figure(frame):
    fig = go.Figure()
    draw_stops(fig, frame.stops)
    draw_trips(fig, frame.car_trips, frame.time, frame.trail_length, "trip_car", "Car trips")
    draw_trips(fig, frame.foot_trips, frame.time, frame.trail_length, "trip_foot", "Foot trips")
    draw_points(fig, frame.car_points, frame.time)

    fig.update_layout(
        height=700,
        margin=dict(l=0, r=0, t=0, b=0),
        showlegend=False,
        uirevision="trip-map",
        map=dict(
            style=MAP_STYLE,
            center=dict(lon=INITIAL_VIEW_STATE["longitude"], lat=INITIAL_VIEW_STATE["latitude"]),
            zoom=INITIAL_VIEW_STATE["zoom"],
            pitch=INITIAL_VIEW_STATE["pitch"],
            bearing=INITIAL_VIEW_STATE["bearing"],
        )
    )
    return fig
