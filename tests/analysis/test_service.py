"""Tests for the analysis HTTP client with ``requests.post`` stubbed out."""

from __future__ import annotations

from typing import Any

import pytest
import requests

from chessdss.analysis import service
from chessdss.analysis.models import ML_UNAVAILABLE_MESSAGE
from chessdss.analysis.service import AnalysisClient
from chessdss.core.enums import Side
from chessdss.errors import AnalysisError

FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"


class _FakeResponse:
    def __init__(self, payload: Any, status: int = 200) -> None:
        self._payload = payload
        self.status_code = status

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def json(self) -> Any:
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class _FakePost:
    """Route ``requests.post`` by URL suffix and record the calls."""

    def __init__(self, routes: dict[str, Any]) -> None:
        self.routes = routes
        self.calls: list[tuple[str, dict, float]] = []

    def __call__(self, url: str, *, json: dict, timeout: float) -> _FakeResponse:
        self.calls.append((url, json, timeout))
        for suffix, response in self.routes.items():
            if url.endswith(suffix):
                if isinstance(response, Exception):
                    raise response
                return response
        raise AssertionError(f"unexpected URL {url}")


@pytest.fixture
def client() -> AnalysisClient:
    return AnalysisClient("http://api.test/", timeout_s=3.0)


def _install(monkeypatch: pytest.MonkeyPatch, routes: dict[str, Any]) -> _FakePost:
    fake = _FakePost(routes)
    monkeypatch.setattr(service.requests, "post", fake)
    return fake


class TestAnalyze:
    def test_posts_fen(self, monkeypatch: pytest.MonkeyPatch, client: AnalysisClient) -> None:
        fake = _install(
            monkeypatch,
            {"/api/analyze": _FakeResponse({"bestMove": {"san": "e4"}, "turn": "w"})},
        )
        result = client.analyze(FEN)

        assert result.best_move is not None and result.best_move.san == "e4"
        assert result.turn == Side.WHITE
        assert fake.calls == [("http://api.test/api/analyze", {"fen": FEN}, 3.0)]
        assert client.api_base == "http://api.test"

    def test_server_error_message(
        self, monkeypatch: pytest.MonkeyPatch, client: AnalysisClient
    ) -> None:
        _install(
            monkeypatch,
            {"/api/analyze": _FakeResponse({"error": "Invalid FEN"}, status=400)},
        )
        with pytest.raises(AnalysisError, match="Invalid FEN"):
            client.analyze("bogus")

    def test_transport_error(
        self, monkeypatch: pytest.MonkeyPatch, client: AnalysisClient
    ) -> None:
        _install(monkeypatch, {"/api/analyze": requests.ConnectionError("refused")})
        with pytest.raises(AnalysisError, match="refused"):
            client.analyze(FEN)

    def test_bad_json(self, monkeypatch: pytest.MonkeyPatch, client: AnalysisClient) -> None:
        _install(monkeypatch, {"/api/analyze": _FakeResponse(ValueError("no json"))})
        with pytest.raises(AnalysisError, match="Analysis failed"):
            client.analyze(FEN)

    def test_non_object_payload(
        self, monkeypatch: pytest.MonkeyPatch, client: AnalysisClient
    ) -> None:
        _install(monkeypatch, {"/api/analyze": _FakeResponse([1, 2, 3])})
        with pytest.raises(AnalysisError, match="Analysis failed"):
            client.analyze(FEN)


class TestWinProbability:
    def test_success(self, monkeypatch: pytest.MonkeyPatch, client: AnalysisClient) -> None:
        _install(
            monkeypatch,
            {"/api/win-probability": _FakeResponse({"winProbability": 0.6, "message": "ok"})},
        )
        wp = client.win_probability(FEN)
        assert wp.probability == 0.6
        assert not wp.mock

    @pytest.mark.parametrize(
        "response",
        [
            requests.Timeout("slow"),
            _FakeResponse({"error": "down"}, status=503),
            _FakeResponse(ValueError("no json")),
            _FakeResponse("text"),
        ],
    )
    def test_failures_fall_back_to_mock(
        self, monkeypatch: pytest.MonkeyPatch, client: AnalysisClient, response: Any
    ) -> None:
        _install(monkeypatch, {"/api/win-probability": response})
        wp = client.win_probability(FEN)
        assert wp.mock
        assert wp.probability == 0.5
        assert wp.message == ML_UNAVAILABLE_MESSAGE


class TestEvaluate:
    def test_live_position_calls_both(
        self, monkeypatch: pytest.MonkeyPatch, client: AnalysisClient
    ) -> None:
        fake = _install(
            monkeypatch,
            {
                "/api/analyze": _FakeResponse({"gameOver": False}),
                "/api/win-probability": _FakeResponse({"winProbability": 0.4}),
            },
        )
        report = client.evaluate(FEN)
        assert report.fen == FEN
        assert report.win_probability.probability == 0.4
        assert [url for url, _, _ in fake.calls] == [
            "http://api.test/api/analyze",
            "http://api.test/api/win-probability",
        ]

    def test_terminal_position_skips_ml(
        self, monkeypatch: pytest.MonkeyPatch, client: AnalysisClient
    ) -> None:
        fake = _install(
            monkeypatch,
            {
                "/api/analyze": _FakeResponse(
                    {"gameOver": True, "checkmate": True, "winner": "b"}
                )
            },
        )
        report = client.evaluate(FEN)
        assert report.win_probability.probability == 0.0
        assert len(fake.calls) == 1

    def test_analysis_failure_propagates(
        self, monkeypatch: pytest.MonkeyPatch, client: AnalysisClient
    ) -> None:
        _install(monkeypatch, {"/api/analyze": requests.ConnectionError("refused")})
        with pytest.raises(AnalysisError):
            client.evaluate(FEN)
