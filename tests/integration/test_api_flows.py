"""
End-to-end API flows against the real container with the in-memory backend.
"""
import time

import pytest

pytestmark = pytest.mark.integration
from fastapi.testclient import TestClient

from vision_showcase.di.container import reset_container


@pytest.fixture
def client():
    """Test client backed by a fresh in-memory container."""
    from vision_showcase.main import app

    reset_container()
    with TestClient(app) as c:
        yield c
    reset_container()


def _wait_for_status(client, job_id, statuses, attempts=200):
    for _ in range(attempts):
        job = client.get(f"/api/training/jobs/{job_id}").json()
        if job["status"] in statuses:
            return job
        time.sleep(0.05)
    raise AssertionError(f"Job {job_id} never reached {statuses}")


class TestAnalysisFlow:
    def test_classify_then_list_and_fetch(self, client, png_bytes):
        created = client.post("/api/classify", files={"image": ("dog.png", png_bytes, "image/png")})
        assert created.status_code == 200
        result = created.json()
        assert result["type"] == "classification"

        stored_name = result["imagePath"].rsplit("/", 1)[-1]
        assert client.get(f"/uploads/{stored_name}").content == png_bytes

        listed = client.get("/api/results").json()
        assert [r["id"] for r in listed] == [result["id"]]
        assert client.get(f"/api/results/{result['id']}").json()["predictions"] == result["predictions"]

        assert client.delete("/api/results").json() == {"removed": 1}
        assert client.get("/api/results").json() == []

    def test_enhanced_classify_uses_catalog_model(self, client, png_bytes):
        response = client.post(
            "/api/classify/enhanced",
            files={"image": ("dog.png", png_bytes, "image/png")},
            data={"model": "mobilenet", "threshold": "0"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["type"] == "enhanced-classification"
        assert data["predictions"]
        assert [p["rank"] for p in data["predictions"]] == list(range(1, len(data["predictions"]) + 1))

    def test_batch(self, client, png_bytes):
        response = client.post(
            "/api/batch",
            files=[("images", ("a.png", png_bytes, "image/png")), ("images", ("b.jpg", png_bytes, "image/jpeg"))],
        )
        assert response.status_code == 200
        assert response.json()["stats"]["totalFiles"] == 2


class TestTrainingFlow:
    def test_feedback_stats_and_export(self, client):
        feedback = {
            "predictions": [{"class": "cat", "confidence": 0.8}],
            "feedback": {"isCorrect": True, "correctClass": "cat"},
            "model": "mobilenet",
        }
        response = client.post("/api/training/feedback", json=feedback)
        assert response.status_code == 201
        assert response.json()["totalTrainingSamples"] == 1

        stats = client.get("/api/training/stats").json()
        assert stats["totalTrainingSamples"] == 1
        assert stats["modelsTracked"] == 4

        exported = client.get("/api/training/export").json()
        assert len(exported["trainingData"]) == 1

        assert client.delete("/api/training/data").json() == {"status": "cleared"}
        assert client.get("/api/training/stats").json()["totalTrainingSamples"] == 0

    def test_feedback_requires_predictions(self, client):
        response = client.post(
            "/api/training/feedback",
            json={"predictions": [], "feedback": {"isCorrect": True}},
        )
        assert response.status_code == 422

    def test_training_job_runs_to_completion(self, client):
        client.post(
            "/api/datasets/registry",
            json={"name": "tiny", "totalImages": 4, "categories": ["cat", "dog"]},
        )

        started = client.post(
            "/api/training/jobs",
            json={"dataset": "tiny", "batchSize": 2, "epochs": 2, "checkpointFrequency": 1},
        )
        assert started.status_code == 202
        job_id = started.json()["id"]

        job = _wait_for_status(client, job_id, {"completed", "failed"})
        assert job["status"] == "completed"
        assert job["checkpoints"] == [1, 2]
        assert job["progress"]["processedImages"] == 8

        assert client.post(f"/api/training/jobs/{job_id}/pause").status_code == 409
        assert client.get("/api/training/jobs/job_missing").status_code == 404

    def test_job_on_unknown_dataset(self, client):
        response = client.post("/api/training/jobs", json={"dataset": "nowhere"})
        assert response.status_code == 404

    def test_job_socket_rejects_unknown_job(self, client):
        from fastapi import WebSocketDisconnect

        with pytest.raises(WebSocketDisconnect) as exc_info:
            with client.websocket_connect("/api/training/jobs/job_missing/ws") as websocket:
                websocket.receive_json()
        assert exc_info.value.code == 1008

    def test_job_socket_streams_progress_and_status(self, client):
        from vision_showcase.application.services.training_jobs import TrainingJobService
        from vision_showcase.di.container import get_container

        get_container().get(TrainingJobService).trainer.step_delay_seconds = 0.5
        client.post(
            "/api/datasets/registry",
            json={"name": "tiny", "totalImages": 4, "categories": ["cat", "dog"]},
        )
        job_id = client.post(
            "/api/training/jobs", json={"dataset": "tiny", "batchSize": 2, "epochs": 1}
        ).json()["id"]

        with client.websocket_connect(f"/api/training/jobs/{job_id}/ws") as websocket:
            hello = websocket.receive_json()
            messages = []
            for _ in range(10):
                message = websocket.receive_json()
                messages.append(message)
                if message["type"] == "status" and message["status"] == "completed":
                    break

        assert hello["type"] == "connection_established"
        assert hello["jobId"] == job_id
        assert hello["job"]["dataset"] == "tiny"

        progress = [m for m in messages if m["type"] == "progress"]
        assert progress
        assert progress[-1]["jobId"] == job_id
        assert progress[-1]["data"]["processedImages"] == 4
        assert {"totalBatches", "memoryUsage", "estimatedTimeRemaining"} <= set(progress[-1]["data"])
        memory = progress[-1]["data"]["memoryUsage"]
        assert memory["cached_images"] <= memory["cache_limit"]
        assert messages[-1] == {"type": "status", "jobId": job_id, "status": "completed", "error": None}


class TestDatasetChatAndModels:
    def test_dataset_registry(self, client):
        assert set(client.get("/api/datasets").json()) == {"imagenet", "cifar10", "coco", "pascal", "celeba"}

        popular = client.post("/api/datasets/registry/popular").json()
        assert [d["name"] for d in popular] == ["ImageNet", "COCO", "Open Images", "CIFAR-100"]

        batch = client.get(
            "/api/datasets/registry/COCO/batch", params={"batchSize": 2, "startIndex": 1}
        ).json()
        assert batch["count"] == 2
        assert batch["images"][0]["annotations"]["bounding_boxes"][0]["label"] == "person"

        assert client.get("/api/datasets/registry/unknown").status_code == 404

    def test_chat_round_trip(self, client):
        exchange = client.post("/api/chat/message", json={"message": "Can you detect objects?"}).json()
        assert exchange["message"]["role"] == "assistant"
        assert exchange["message"]["metadata"]["type"] == "vision"

        history = client.get("/api/chat/history").json()["messages"]
        assert [m["role"] for m in history] == ["user", "assistant"]

        context = client.patch("/api/chat/context", json={"currentModel": "cocoSsd"}).json()
        assert context["currentModel"] == "cocoSsd"
        assert len(client.get("/api/chat/suggestions").json()["suggestions"]) == 4

    def test_chat_preferences_merge_and_reject_unknown_keys(self, client):
        response = client.patch(
            "/api/chat/context", json={"userPreferences": {"confidenceThreshold": 0.9}}
        )
        assert response.status_code == 200
        preferences = response.json()["userPreferences"]
        assert preferences["confidenceThreshold"] == 0.9
        assert preferences["showTechnicalDetails"] is False

        response = client.patch("/api/chat/context", json={"userPreferences": {"theme": "dark"}})
        assert response.status_code == 400
        assert "theme" in response.json()["detail"]
        assert client.get("/api/chat/context").json()["userPreferences"]["confidenceThreshold"] == 0.9

    def test_models_and_benchmarks(self, client):
        models = client.get("/api/models").json()
        assert len(models) >= 4
        assert client.get("/api/models/benchmarks", params={"metric": "bogus"}).status_code == 400
