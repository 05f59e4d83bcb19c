"""HTTP client for the game-theory analysis backend."""

from __future__ import annotations

import logging
from typing import Any

import requests

from chessdss.analysis.models import AnalysisResult, PositionReport, WinProbability
from chessdss.config import DEFAULT_API_BASE, DEFAULT_REQUEST_TIMEOUT_S
from chessdss.errors import AnalysisError

_LOGGER = logging.getLogger(__name__)

ANALYZE_PATH = "/api/analyze"
WIN_PROBABILITY_PATH = "/api/win-probability"


class AnalysisClient:
    """Blocking client for ``/api/analyze`` and ``/api/win-probability``.

    Meant to run off the UI thread (see
    :class:`~chessdss.ui.analysis_session.AnalysisSession`).
    """

    __slots__ = ("_base", "_timeout")

    def __init__(
        self,
        api_base: str = DEFAULT_API_BASE,
        timeout_s: float = DEFAULT_REQUEST_TIMEOUT_S,
    ) -> None:
        self._base = api_base.rstrip("/")
        self._timeout = timeout_s

    @property
    def api_base(self) -> str:
        return self._base

    def analyze(self, fen: str) -> AnalysisResult:
        """Best move, payoff matrix and dominated moves for *fen*.

        Raises :class:`AnalysisError` on any transport or payload failure.
        """
        try:
            payload = self._post(ANALYZE_PATH, fen)
        except ValueError as exc:
            # requests.JSONDecodeError lands here too.
            _LOGGER.warning("Analysis response is not JSON: %s", exc)
            raise AnalysisError("Analysis failed") from exc
        except requests.RequestException as exc:
            _LOGGER.warning("Analysis request failed: %s", exc)
            raise AnalysisError(_error_text(exc)) from exc

        if not isinstance(payload, dict):
            raise AnalysisError("Analysis failed")
        try:
            return AnalysisResult.from_json(payload)
        except (TypeError, ValueError) as exc:
            _LOGGER.warning("Malformed analysis payload: %s", exc)
            raise AnalysisError("Analysis failed") from exc

    def win_probability(self, fen: str) -> WinProbability:
        """ML win estimate. Never raises; failures give the mock estimate."""
        try:
            payload = self._post(WIN_PROBABILITY_PATH, fen)
            if not isinstance(payload, dict):
                raise ValueError(f"unexpected payload {payload!r}")
            return WinProbability.from_json(payload)
        except (requests.RequestException, TypeError, ValueError) as exc:
            _LOGGER.warning("Win probability unavailable, using mock: %s", exc)
            return WinProbability.unavailable()

    def evaluate(self, fen: str) -> PositionReport:
        """Analyse *fen* and attach a win estimate.

        Terminal positions get a local estimate instead of the ML call.
        """
        result = self.analyze(fen)
        if result.game_over:
            probability = WinProbability.for_terminal(result)
        else:
            probability = self.win_probability(fen)
        return PositionReport(fen=fen, analysis=result, win_probability=probability)

    def _post(self, path: str, fen: str) -> Any:
        resp = requests.post(
            f"{self._base}{path}",
            json={"fen": fen},
            timeout=self._timeout,
        )
        resp.raise_for_status()
        return resp.json()


def _error_text(exc: requests.RequestException) -> str:
    """Server ``error`` field when present, else the transport message."""
    response = exc.response
    if response is not None:
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("error"):
            return str(body["error"])
    return str(exc) or "Analysis failed"
