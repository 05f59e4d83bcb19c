"""Internationalisation strings for the desktop UI.

Usage::

    from chessdss.ui.i18n import t, set_language

    set_language("Russian")
    print(t().btn_play_again)          # "Играть снова"
    print(t().turn_label.format(color=t().color_white))
"""

from __future__ import annotations

from dataclasses import dataclass

from chessdss.core.enums import Side


@dataclass(frozen=True)
class Strings:
    # ── Main window ──────────────────────────────────────────────────────
    window_title: str
    subtitle: str
    turn_label: str  # "Turn: {color}"
    move_error: str
    color_white: str
    color_black: str
    menu_game: str
    menu_quit: str

    # ── ControlPanel ─────────────────────────────────────────────────────
    clock_per_side: str
    time_option: str  # "{minutes} minutes"
    btn_pause: str
    btn_resume: str

    # ── ClockWidget ──────────────────────────────────────────────────────
    clock_white: str
    clock_black: str

    # ── PromotionDialog ──────────────────────────────────────────────────
    promote_title: str
    promote_label: str

    # ── GameOverDialog ───────────────────────────────────────────────────
    game_over_title: str
    game_over_draw: str  # "Game Over: Draw ({reason})"
    game_over_winner: str  # "Winner: {color}"
    game_over_reason: str  # "Reason: {reason}"
    btn_play_again: str

    # ── AnalysisPanel ────────────────────────────────────────────────────
    dashboard_title: str
    btn_analyze: str
    btn_analyzing: str
    analysis_failed: str
    terminal_title: str
    terminal_checkmate: str  # "Checkmate! {color} wins. Score: {score}."
    terminal_draw: str
    terminal_other: str
    analysis_for_title: str
    analysis_for: str  # "{color} (current player)"
    best_move_title: str
    best_move_score: str  # " ({score} cp)"
    payoff_title: str
    payoff_empty: str
    payoff_axes: str
    payoff_perspective: str
    payoff_black_prefers: str
    dominated_tooltip: str
    dominated_title: str
    dominated_hint: str
    win_prob_title: str
    mock_badge: str
    stats_title: str
    stats_total_moves: str
    stats_total_time: str
    stats_avg_white: str
    stats_avg_black: str
    analysis_hint: str


_EN = Strings(
    window_title="Chess Decision Support System",
    subtitle="Game theory: Payoff matrix, dominance, minimax",
    turn_label="Turn: {color}",
    move_error="Legal move required",
    color_white="White",
    color_black="Black",
    menu_game="Game",
    menu_quit="Quit",
    clock_per_side="Clock (per side):",
    time_option="{minutes} minutes",
    btn_pause="Pause",
    btn_resume="Resume",
    clock_white="White",
    clock_black="Black",
    promote_title="Pawn Promotion",
    promote_label="Choose a piece to promote to:",
    game_over_title="Match Over",
    game_over_draw="Game Over: Draw ({reason})",
    game_over_winner="Winner: {color}",
    game_over_reason="Reason: {reason}",
    btn_play_again="Play Again",
    dashboard_title="Game Theory Dashboard",
    btn_analyze="Analyze position",
    btn_analyzing="Analyzing…",
    analysis_failed="Analysis failed",
    terminal_title="Terminal state",
    terminal_checkmate="Checkmate! {color} wins. Score: {score}.",
    terminal_draw="Game Over: Draw.",
    terminal_other="Game over.",
    analysis_for_title="Analysis for",
    analysis_for="{color} (current player)",
    best_move_title="Best move (Minimax, depth 3)",
    best_move_score=" ({score} cp)",
    payoff_title="Payoff Matrix",
    payoff_empty="Analyze a position to see the 3×3 payoff matrix.",
    payoff_axes="Rows: Current player's top 3 moves · Cols: Opponent's best responses",
    payoff_perspective="Scores from White's perspective (positive = White advantage).",
    payoff_black_prefers="Black prefers lower values.",
    dominated_tooltip="Strictly dominated move",
    dominated_title="Strictly dominated moves",
    dominated_hint="These moves are worse than some other move in every response.",
    win_prob_title="Win probability",
    mock_badge="Mock",
    stats_title="Performance & Quantitative Stats",
    stats_total_moves="Total moves (plies):",
    stats_total_time="Total match time:",
    stats_avg_white="Average move time – White:",
    stats_avg_black="Average move time – Black:",
    analysis_hint='Click "Analyze position" to run Minimax and see the payoff matrix.',
)

_RU = Strings(
    window_title="Система поддержки шахматных решений",
    subtitle="Теория игр: платёжная матрица, доминирование, минимакс",
    turn_label="Ход: {color}",
    move_error="Нужен допустимый ход",
    color_white="Белые",
    color_black="Чёрные",
    menu_game="Партия",
    menu_quit="Выход",
    clock_per_side="Часы (на сторону):",
    time_option="{minutes} минут",
    btn_pause="Пауза",
    btn_resume="Продолжить",
    clock_white="Белые",
    clock_black="Чёрные",
    promote_title="Превращение пешки",
    promote_label="Выберите фигуру для превращения:",
    game_over_title="Партия окончена",
    game_over_draw="Партия окончена: ничья ({reason})",
    game_over_winner="Победитель: {color}",
    game_over_reason="Причина: {reason}",
    btn_play_again="Играть снова",
    dashboard_title="Панель теории игр",
    btn_analyze="Анализировать позицию",
    btn_analyzing="Анализ…",
    analysis_failed="Анализ не удался",
    terminal_title="Конечное состояние",
    terminal_checkmate="Мат! {color} побеждают. Оценка: {score}.",
    terminal_draw="Партия окончена: ничья.",
    terminal_other="Партия окончена.",
    analysis_for_title="Анализ для",
    analysis_for="{color} (текущий игрок)",
    best_move_title="Лучший ход (минимакс, глубина 3)",
    best_move_score=" ({score} сп)",
    payoff_title="Платёжная матрица",
    payoff_empty="Проанализируйте позицию, чтобы увидеть платёжную матрицу 3×3.",
    payoff_axes="Строки: 3 лучших хода текущего игрока · Столбцы: лучшие ответы соперника",
    payoff_perspective="Оценки с точки зрения белых (плюс = перевес белых).",
    payoff_black_prefers="Чёрные предпочитают меньшие значения.",
    dominated_tooltip="Строго доминируемый ход",
    dominated_title="Строго доминируемые ходы",
    dominated_hint="Эти ходы хуже какого-то другого хода при любом ответе.",
    win_prob_title="Вероятность победы",
    mock_badge="Заглушка",
    stats_title="Статистика партии",
    stats_total_moves="Всего ходов (полуходов):",
    stats_total_time="Общее время партии:",
    stats_avg_white="Среднее время хода – белые:",
    stats_avg_black="Среднее время хода – чёрные:",
    analysis_hint="Нажмите «Анализировать позицию», чтобы запустить минимакс и увидеть платёжную матрицу.",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Russian": _RU,
}

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)


def side_name(side: Side) -> str:
    """Localised colour name for *side*."""
    return t().color_white if side == Side.WHITE else t().color_black
