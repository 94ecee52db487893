"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

import api.main
from api.main import app
from tksq import __version__
from tksq.config import ConfigManager, TksqConfig
from tksq.learning import MemoryBackend, PhraseStore
from tksq.service import CompressionService

REPEATING = "the quick brown fox jumps. The quick brown fox sleeps."


@pytest.fixture
def client(tmp_path, monkeypatch):
    manager = ConfigManager(tmp_path)
    manager.save(TksqConfig(tokenizer="approximate"))
    monkeypatch.setattr(api.main, "service", CompressionService(manager, PhraseStore(MemoryBackend())))
    # No context manager: the lifespan (and its Redis connection) is skipped.
    return TestClient(app)


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {
            "status": "ok",
            "version": __version__,
            "cache_enabled": False,
            "redis_connected": False,
        }


class TestCompress:
    def test_compress(self, client):
        response = client.post("/compress", json={"text": "In order to win, basically train."})
        assert response.status_code == 200
        data = response.json()
        assert data["text"] == "To win, train."
        assert data["level"] == "medium"
        assert data["language"] == "en"
        assert data["tokenizer"] == "approximate"
        assert [s["stage"] for s in data["stages"]] == ["Cleanup", "Semantic"]
        assert {c["rule"] for c in data["changes"]} == {"cleanup:filler", "semantic:substitution"}

    def test_explicit_stages(self, client):
        response = client.post(
            "/compress", json={"text": "I do not know", "stages": ["shorthand"]}
        )
        assert response.json()["text"] == "I don't know"

    def test_unknown_domain(self, client):
        response = client.post("/compress", json={"text": "hi", "domain": "medical"})
        assert response.status_code == 422
        assert "Unknown domain" in response.json()["detail"]

    def test_unknown_stage(self, client):
        response = client.post("/compress", json={"text": "hi", "stages": ["bogus"]})
        assert response.status_code == 422
        assert 'Unknown stage "bogus"' in response.json()["detail"]

    def test_invalid_level(self, client):
        response = client.post("/compress", json={"text": "hi", "level": "extreme"})
        assert response.status_code == 422

    def test_missing_text(self, client):
        assert client.post("/compress", json={}).status_code == 422


class TestAnalysis:
    def test_pack(self, client):
        response = client.post("/pack", json={"text": "In order to win, basically train."})
        assert response.status_code == 200
        assert response.json()["text"].startswith("To win, train.\n\n[packed: ")

    def test_count(self, client):
        response = client.post("/count", json={"text": "hello world\nbye"})
        assert response.json() == {
            "tokens": 4,
            "chars": 15,
            "words": 3,
            "lines": 2,
            "tokenizer": "approximate",
            "chars_per_token": 3.8,
        }

    def test_diff(self, client):
        response = client.post("/diff", json={"original": "big cat", "compressed": "small cat"})
        data = response.json()
        assert data["formatted"] == "[-big-][+small+] cat"
        assert data["words_removed"] == 1
        assert data["words_added"] == 1
        assert data["original_tokens"] is None

    def test_diff_compresses(self, client):
        response = client.post("/diff", json={"original": "We did this in order to save time."})
        assert response.json()["compressed"] == "We did this to save time."

    def test_benchmark(self, client):
        response = client.post("/benchmark", json={"text": "In order to win, basically train."})
        assert response.status_code == 200
        data = response.json()
        assert [row["level"] for row in data["levels"]] == ["light", "medium", "aggressive"]
        assert len(data["aggressive_breakdown"]) == 4

    def test_benchmark_unknown_language(self, client):
        response = client.post("/benchmark", json={"text": "hi", "language": "xx"})
        assert response.status_code == 422


class TestConfig:
    def test_get(self, client, tmp_path):
        data = client.get("/config").json()
        assert data["level"] == "medium"
        assert data["config_path"] == str(tmp_path / "config.json")
        assert data["promoted"] == 0

    def test_update(self, client):
        response = client.post(
            "/config", json={"level": "aggressive", "learning": {"min_frequency": 2}}
        )
        assert response.status_code == 200
        assert response.json()["level"] == "aggressive"
        assert response.json()["learning"]["min_frequency"] == 2
        assert client.get("/config").json()["level"] == "aggressive"

    def test_update_unknown_domain(self, client):
        response = client.post("/config", json={"domain": "medical"})
        assert response.status_code == 422


class TestLearning:
    def test_candidates_and_promote(self, client):
        client.post("/compress", json={"text": REPEATING})
        phrases = [c["phrase"] for c in client.get("/learn/candidates").json()]
        assert "the quick brown fox" in phrases

        response = client.post("/learn/promote", json={"phrase": "the quick brown fox"})
        assert response.json() == {"phrase": "the quick brown fox", "replacement": "TQBF"}
        assert client.get("/config").json()["promoted"] == 1

    def test_promote_without_replacement(self, client):
        response = client.post("/learn/promote", json={"phrase": "never seen"})
        assert response.status_code == 422

    def test_reject(self, client):
        client.post("/compress", json={"text": REPEATING})
        response = client.post("/learn/reject", json={"phrase": "the quick brown fox"})
        assert response.json() == {"phrase": "the quick brown fox", "removed": True}

    def test_add(self, client):
        response = client.post("/learn/add", json={"phrase": "foo bar baz", "replacement": "FBB"})
        assert response.status_code == 200
        compressed = client.post("/compress", json={"text": "see foo bar baz"}).json()["text"]
        assert compressed == "see FBB"

    def test_add_requires_replacement(self, client):
        response = client.post("/learn/add", json={"phrase": "foo bar"})
        assert response.status_code == 422

    def test_stats_and_reset(self, client):
        client.post("/compress", json={"text": "In order to win, basically train."})
        assert client.get("/learn/stats").json()["total_compressions"] == 1
        assert client.post("/learn/reset").json() == {"status": "reset"}
        assert client.get("/learn/stats").json()["total_compressions"] == 0

    def test_dashboard(self, client):
        data = client.get("/dashboard").json()
        assert set(data["dictionaries"]) == {"en", "ru"}
        assert data["promoted_total"] == 0
