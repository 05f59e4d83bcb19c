"""PieceItem — draggable chess piece drawn as a Unicode glyph."""

from __future__ import annotations

from PyQt6.QtCore import QPointF, Qt
from PyQt6.QtGui import QBrush, QCursor, QFont, QPen
from PyQt6.QtWidgets import QGraphicsItem, QGraphicsSimpleTextItem

from chessdss.core.enums import PieceKind, Side
from chessdss.core.rules import PieceInfo
from chessdss.core.types import SquareName
from chessdss.ui.styles.theme import BoardTheme

# Filled glyphs for both sides; colour comes from the brush.
_GLYPHS: dict[PieceKind, str] = {
    PieceKind.KING: "♚",
    PieceKind.QUEEN: "♛",
    PieceKind.ROOK: "♜",
    PieceKind.BISHOP: "♝",
    PieceKind.KNIGHT: "♞",
    PieceKind.PAWN: "♟",
}


def piece_glyph(kind: PieceKind) -> str:
    return _GLYPHS[kind]


class PieceItem(QGraphicsSimpleTextItem):
    """A single chess piece on the board.

    Stores its logical *square* and supports drag & drop.
    """

    _FONT_RATIO = 0.72

    def __init__(
        self,
        piece: PieceInfo,
        square: SquareName,
        tile_size: int,
        theme: BoardTheme | None = None,
    ) -> None:
        super().__init__(piece_glyph(piece.kind))
        self.piece = piece
        self.square = square
        self._drag_origin: QPointF | None = None
        self._offset = QPointF(0.0, 0.0)

        theme = theme or BoardTheme.default()
        fill = theme.piece_white if piece.side == Side.WHITE else theme.piece_black
        self.setBrush(QBrush(fill))
        outline = QPen(theme.piece_outline if piece.side == Side.WHITE else fill)
        outline.setWidthF(1.0)
        self.setPen(outline)

        self.setFlag(QGraphicsItem.GraphicsItemFlag.ItemIsMovable, False)
        self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))
        self.setZValue(1)
        self.set_tile_size(tile_size)

    @property
    def offset(self) -> QPointF:
        """Position of the glyph inside its tile, centring it."""
        return self._offset

    def set_tile_size(self, size: int) -> None:
        font = QFont("DejaVu Sans")
        font.setPixelSize(max(int(size * self._FONT_RATIO), 8))
        self.setFont(font)
        bounds = self.boundingRect()
        self._offset = QPointF(
            (size - bounds.width()) / 2.0,
            (size - bounds.height()) / 2.0,
        )

    def enable_drag(self, enabled: bool) -> None:
        """Allow / disallow dragging."""
        self.setFlag(QGraphicsItem.GraphicsItemFlag.ItemIsMovable, enabled)
        if enabled:
            self.setCursor(QCursor(Qt.CursorShape.OpenHandCursor))
        else:
            self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))

    def start_drag(self) -> None:
        """Called at the beginning of a drag gesture."""
        self._drag_origin = self.pos()
        self.setZValue(10)  # bring to front
        self.setCursor(QCursor(Qt.CursorShape.ClosedHandCursor))
        self.setOpacity(0.85)

    def cancel_drag(self) -> None:
        """Return to the origin square and drop the drag styling."""
        if self._drag_origin is not None:
            self.setPos(self._drag_origin)
            self._drag_origin = None
        self.setZValue(1)
        self.setOpacity(1.0)
        self.setCursor(QCursor(Qt.CursorShape.OpenHandCursor))
