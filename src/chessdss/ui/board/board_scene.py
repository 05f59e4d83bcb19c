"""BoardScene — renderer side of the match: squares, pieces and gestures."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from chessdss.core.enums import Side
from chessdss.core.rules import PieceInfo, piece_map
from chessdss.core.types import SquareName, file_index, rank_number, square_name
from chessdss.game.state import NO_HIGHLIGHTS, SquareHighlights
from chessdss.ui.board.piece_item import PieceItem
from chessdss.ui.dialogs.promotion_dialog import PromotionDialog
from chessdss.ui.styles.theme import BoardTheme

if TYPE_CHECKING:
    from chessdss.core.position import Position
    from chessdss.game.controller import RendererView

PromotionCheck = Callable[[SquareName, SquareName], bool]

_SQUARE_Z = 0.0
_COORD_Z = 0.3
_HIGHLIGHT_Z = 0.8


class BoardScene(QGraphicsScene):
    """Draws a :class:`RendererView` and reports what the user does with it.

    Legality is never decided here: a drop or a click on a highlighted
    target is forwarded as a move attempt, and the controller answers
    with a fresh view.

    Signals:
        square_clicked(str): A square was pressed.
        move_attempted(str, str, str): Origin, target and the code of the
            moved piece (``"wP"``).
        promotion_chosen(str, str, str): Piece symbol picked in the
            promotion dialog, then origin and target.
    """

    square_clicked = pyqtSignal(str)
    move_attempted = pyqtSignal(str, str, str)
    promotion_chosen = pyqtSignal(str, str, str)

    TILE = 80

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._position: Position | None = None
        self._pieces: dict[SquareName, PieceInfo] = {}
        self._highlights: SquareHighlights = NO_HIGHLIGHTS
        self._flipped = False
        self._interactive = True
        self._promotion_check: PromotionCheck | None = None
        self._drag: PieceItem | None = None

        self._square_items: dict[SquareName, QGraphicsRectItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []
        self._highlight_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[SquareName, PieceItem] = {}

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_view(self, view: RendererView) -> None:
        """Show *view*: position, orientation, highlights and interactivity."""
        self._interactive = view.interaction_enabled
        flipped = view.orientation == Side.BLACK
        if flipped != self._flipped:
            self.set_flipped(flipped)
        if view.position != self._position:
            self.set_position(view.position)
        self.set_highlights(view.highlights)

    def set_position(self, position: Position) -> None:
        self._position = position
        self._pieces = piece_map(position)
        self._sync_pieces()

    def position(self) -> Position | None:
        return self._position

    def is_interactive(self) -> bool:
        return self._interactive

    def set_flipped(self, flipped: bool) -> None:
        """Draw the board from Black's side when *flipped*."""
        self._flipped = flipped
        self._draw_board()
        self._sync_pieces()
        self._draw_highlights()

    def is_flipped(self) -> bool:
        return self._flipped

    def set_highlights(self, highlights: SquareHighlights) -> None:
        self._highlights = highlights
        self._draw_highlights()

    def highlights(self) -> SquareHighlights:
        return self._highlights

    def set_promotion_check(self, check: PromotionCheck | None) -> None:
        """Install the "does this move need a promotion piece?" query."""
        self._promotion_check = check

    # ── Drawing ──────────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        for rect in self._square_items.values():
            self.removeItem(rect)
        self._square_items.clear()
        for label in self._coord_items:
            self.removeItem(label)
        self._coord_items.clear()

        theme = self._theme
        font = QFont("Helvetica Neue", max(9, self.TILE // 8))
        for sq in _all_squares():
            dark = (file_index(sq) + rank_number(sq)) % 2 == 1
            self._square_items[sq] = self._add_rect(
                sq, theme.dark_square if dark else theme.light_square, _SQUARE_Z
            )

            col, row = self._visual_coords(file_index(sq), rank_number(sq) - 1)
            brush = QBrush(theme.coord_dark if dark else theme.coord_light)
            # Ranks along the visual left edge, files along the bottom.
            if col == 0:
                self._add_coord(sq[1], col * self.TILE + 2, row * self.TILE + 1, brush, font)
            if row == 7:
                x = col * self.TILE + self.TILE - 12
                y = row * self.TILE + self.TILE - 16
                self._add_coord(sq[0], x, y, brush, font)

        self.setSceneRect(0, 0, 8 * self.TILE, 8 * self.TILE)

    def _add_coord(
        self, text: str, x: float, y: float, brush: QBrush, font: QFont
    ) -> None:
        label = QGraphicsSimpleTextItem(text)
        label.setFont(font)
        label.setBrush(brush)
        label.setPos(x, y)
        label.setZValue(_COORD_Z)
        self.addItem(label)
        self._coord_items.append(label)

    def _draw_highlights(self) -> None:
        for rect in self._highlight_items:
            self.removeItem(rect)
        self._highlight_items.clear()

        selected = self._highlights.selected
        if selected is not None:
            self._highlight_items.append(
                self._add_rect(selected, self._theme.highlight_from, _HIGHLIGHT_Z)
            )
        for sq in sorted(self._highlights.destinations):
            self._highlight_items.append(
                self._add_rect(sq, self._theme.highlight_to, _HIGHLIGHT_Z)
            )

    def _add_rect(self, sq: SquareName, color: QColor, z: float) -> QGraphicsRectItem:
        t = self.TILE
        col, row = self._visual_coords(file_index(sq), rank_number(sq) - 1)
        rect = QGraphicsRectItem(col * t, row * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(z)
        self.addItem(rect)
        return rect

    def _sync_pieces(self) -> None:
        """Rebuild every piece item from ``self._pieces``."""
        self._drag = None
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        for sq, piece in self._pieces.items():
            item = PieceItem(piece, sq, self.TILE, self._theme)
            col, row = self._visual_coords(file_index(sq), rank_number(sq) - 1)
            item.setPos(QPointF(col * self.TILE, row * self.TILE) + item.offset)
            self.addItem(item)
            self._piece_items[sq] = item

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        sq = None
        if event is not None and self._interactive and self._position is not None:
            sq = self._pos_to_square(event.scenePos())
        if sq is None:
            return super().mousePressEvent(event)

        # A click on a highlighted target moves the selected piece there.
        selected = self._highlights.selected
        if selected not in (None, sq) and sq in self._highlights.destinations:
            self._submit(selected, sq)
            return

        self.square_clicked.emit(sq)
        item = self._piece_items.get(sq)
        if item is not None and item.piece.side == self._position.side_to_move:
            item.enable_drag(True)
            item.start_drag()
            self._drag = item
        super().mousePressEvent(event)

    def mouseReleaseEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        item, self._drag = self._drag, None
        if item is None or event is None:
            return super().mouseReleaseEvent(event)

        target = self._pos_to_square(event.scenePos())
        super().mouseReleaseEvent(event)
        # The piece always snaps back; an applied move redraws the board.
        item.cancel_drag()
        item.enable_drag(False)
        if target is not None and target != item.square:
            self._submit(item.square, target)

    def _submit(self, from_sq: SquareName, to_sq: SquareName) -> bool:
        """Forward a move, asking for the promotion piece first if needed.

        Returns False when the promotion dialog is cancelled.
        """
        piece = self._pieces.get(from_sq)
        check = self._promotion_check
        if piece is not None and check is not None and check(from_sq, to_sq):
            views = self.views()
            kind = PromotionDialog.ask(piece.side, views[0] if views else None)
            if kind is None:
                return False
            self.promotion_chosen.emit(kind.symbol, from_sq, to_sq)
            return True

        self.move_attempted.emit(from_sq, to_sq, piece.code if piece else "")
        return True

    # ── Coordinates ──────────────────────────────────────────────────────

    def _visual_coords(self, file: int, rank: int) -> tuple[int, int]:
        """Board file/rank indices (0–7) to visual column/row."""
        if self._flipped:
            return 7 - file, rank
        return file, 7 - rank

    def _pos_to_square(self, pos: QPointF) -> SquareName | None:
        col = int(pos.x() // self.TILE)
        row = int(pos.y() // self.TILE)
        if not (0 <= col < 8 and 0 <= row < 8):
            return None
        if self._flipped:
            return square_name(7 - col, row)
        return square_name(col, 7 - row)


def _all_squares() -> list[SquareName]:
    return [square_name(f, r) for r in range(8) for f in range(8)]
