"""UI/match state synchronisation helpers for MainWindow."""

from __future__ import annotations

from collections.abc import Callable

from chessdss.game.clock import ClockState
from chessdss.game.controller import MatchController
from chessdss.game.outcome import GameOverOutcome
from chessdss.ui.board.board_scene import BoardScene
from chessdss.ui.i18n import side_name, t
from chessdss.ui.panels.analysis_panel import AnalysisPanel
from chessdss.ui.panels.clock_widget import ClockWidget
from chessdss.ui.panels.control_panel import ControlPanel


class GameSync:
    """Applies match-state changes to UI widgets."""

    __slots__ = (
        "_controller",
        "_board_scene",
        "_clock_widget",
        "_control_panel",
        "_analysis_panel",
        "_set_turn_text",
    )

    def __init__(
        self,
        *,
        controller: MatchController,
        board_scene: BoardScene,
        clock_widget: ClockWidget,
        control_panel: ControlPanel,
        analysis_panel: AnalysisPanel,
        set_turn_text: Callable[[str], None],
    ) -> None:
        self._controller = controller
        self._board_scene = board_scene
        self._clock_widget = clock_widget
        self._control_panel = control_panel
        self._analysis_panel = analysis_panel
        self._set_turn_text = set_turn_text

    def sync_all(self) -> None:
        """Full refresh, used at start-up and after a reset."""
        self._control_panel.set_minutes(self._controller.time_setting.base_minutes)
        self._analysis_panel.set_game_over(self._controller.is_game_over)
        self.sync_board()
        self.on_clock_changed(self._controller.clock_state)

    def after_reset(self) -> None:
        self._analysis_panel.clear()
        self.sync_all()

    def sync_board(self) -> None:
        """Push the controller's renderer view to the board and turn line."""
        self._board_scene.set_view(self._controller.renderer_view())
        self.update_turn()

    def on_clock_changed(self, state: ClockState) -> None:
        self._clock_widget.show_state(state)
        self._control_panel.set_clock_status(state.status)
        self._analysis_panel.set_stats(self._controller.stats())

    def on_game_over(self, _outcome: GameOverOutcome) -> None:
        """Sync UI when the match reaches a terminal state."""
        self._clock_widget.stop()
        self._analysis_panel.set_game_over(True)
        self.sync_board()

    def update_turn(self) -> None:
        s = t()
        self._set_turn_text(
            s.turn_label.format(color=side_name(self._controller.side_to_move))
        )
