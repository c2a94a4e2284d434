"""Shared test fixtures and scene builders."""

from __future__ import annotations

import pytest

from backdrop.engine.provider import DocumentProvider
from backdrop.models.scene import (
    BBox,
    Color,
    Fill,
    NodeType,
    PaintType,
    RGB,
    SceneDocument,
    SceneNodeModel,
)


def solid(hex_color: str, **kwargs) -> Fill:
    rgb = RGB.from_hex(hex_color)
    return Fill(color=Color(r=rgb.r / 255, g=rgb.g / 255, b=rgb.b / 255), **kwargs)


def gradient() -> Fill:
    return Fill(type=PaintType.GRADIENT_LINEAR)


def node(
    node_id: str,
    box: tuple[float, float, float, float] | None = (0, 0, 100, 100),
    fill: str | None = None,
    *,
    type: NodeType = NodeType.RECTANGLE,
    children: list[SceneNodeModel] | None = None,
    fills: list[Fill] | None = None,
    **kwargs,
) -> SceneNodeModel:
    if fills is None:
        fills = [solid(fill)] if fill else []
    return SceneNodeModel(
        id=node_id,
        name=node_id,
        type=type,
        bbox=BBox(x=box[0], y=box[1], width=box[2], height=box[3]) if box else None,
        fills=fills,
        children=children or [],
        **kwargs,
    )


def frame(
    node_id: str,
    box=(0, 0, 400, 400),
    fill: str | None = None,
    children=None,
    type: NodeType = NodeType.FRAME,
    **kwargs,
) -> SceneNodeModel:
    return node(node_id, box, fill, type=type, children=children, **kwargs)


def text(node_id: str, box=(10, 10, 80, 20), **kwargs) -> SceneNodeModel:
    return node(node_id, box, None, type=NodeType.TEXT, **kwargs)


def document(children, background: str | None = "#FFFFFF", selection=None) -> SceneDocument:
    return SceneDocument(
        background=[solid(background)] if background else [],
        children=children,
        selection=selection or [],
    )


def provider_for(children, background: str | None = "#FFFFFF", selection=None) -> DocumentProvider:
    return DocumentProvider(document(children, background, selection))


# Page #FFFFFF, frame F (#1E1E1E) containing text T without fill
FRAME_WITH_TEXT = document(
    [frame("F", (0, 0, 300, 200), "#1E1E1E", children=[text("T", (20, 20, 100, 30))])],
    selection=["T"],
)

# Two overlapping root rectangles, R2 above R1
OVERLAPPING_RECTS = document(
    [
        node("R1", (0, 0, 100, 100), "#FF0000"),
        node("R2", (50, 50, 100, 100)),
    ],
    selection=["R2"],
)

# Card layout: page > section(#F4F4F4) > card(no fill) > [shadow(#333333), label]
NESTED_CARD = document(
    [
        frame(
            "section",
            (0, 0, 800, 600),
            "#F4F4F4",
            children=[
                frame(
                    "card",
                    (100, 100, 300, 200),
                    None,
                    type=NodeType.GROUP,
                    children=[
                        node("shadow", (110, 110, 280, 180), "#333333"),
                        text("label", (150, 150, 100, 20)),
                    ],
                ),
            ],
        ),
    ],
    selection=["label"],
)


@pytest.fixture
def frame_with_text() -> DocumentProvider:
    return DocumentProvider(FRAME_WITH_TEXT)


@pytest.fixture
def overlapping_rects() -> DocumentProvider:
    return DocumentProvider(OVERLAPPING_RECTS)


@pytest.fixture
def nested_card() -> DocumentProvider:
    return DocumentProvider(NESTED_CARD)
