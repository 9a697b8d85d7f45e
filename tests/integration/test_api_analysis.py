"""
Integration tests for the analysis and results API endpoints.
Uses TestClient with mocked use cases (no real storage).
Note: Runs full app lifespan (slower). Use: pytest tests/unit/ for fast unit-only runs.
"""
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

pytestmark = pytest.mark.integration
from fastapi.testclient import TestClient

from vision_showcase.application.dto.analysis_dto import AnalysisResultResponse
from vision_showcase.application.use_cases.analysis import (
    AnalyzeImageUseCase,
    ClearResultsUseCase,
    EnhancedClassifyUseCase,
    GetResultUseCase,
    ListResultsUseCase,
)
from vision_showcase.core.exceptions import (
    InvalidUploadError,
    ResultNotFoundError,
    UploadTooLargeError,
)


def _response(**extra) -> AnalysisResultResponse:
    return AnalysisResultResponse(
        id=1735036200123,
        type="classification",
        image_path="uploads/1735036200123-cat.png",
        timestamp="2024-12-24T10:30:00.123Z",
        **extra,
    )


@pytest.fixture
def mock_analyze_use_case():
    return AsyncMock(spec=AnalyzeImageUseCase)


@pytest.fixture
def mock_enhanced_use_case():
    return AsyncMock(spec=EnhancedClassifyUseCase)


@pytest.fixture
def mock_list_use_case():
    return AsyncMock(spec=ListResultsUseCase)


@pytest.fixture
def mock_get_use_case():
    return AsyncMock(spec=GetResultUseCase)


@pytest.fixture
def mock_clear_use_case():
    return AsyncMock(spec=ClearResultsUseCase)


@pytest.fixture
def mock_container(
    mock_analyze_use_case,
    mock_enhanced_use_case,
    mock_list_use_case,
    mock_get_use_case,
    mock_clear_use_case,
):
    container = MagicMock()
    container.get.side_effect = lambda cls: {
        AnalyzeImageUseCase: mock_analyze_use_case,
        EnhancedClassifyUseCase: mock_enhanced_use_case,
        ListResultsUseCase: mock_list_use_case,
        GetResultUseCase: mock_get_use_case,
        ClearResultsUseCase: mock_clear_use_case,
    }.get(cls, None)
    return container


@pytest.fixture
def client(mock_container):
    """Create test client with mocked container."""
    from vision_showcase.main import app

    with patch("vision_showcase.api.v1.analysis_controller.get_container", return_value=mock_container), patch(
        "vision_showcase.api.v1.results_controller.get_container", return_value=mock_container
    ):
        with TestClient(app) as c:
            yield c


class TestAnalysisAPI:
    """Tests for the /api upload endpoints"""

    def test_classify_success(self, client, mock_analyze_use_case, png_bytes):
        mock_analyze_use_case.execute.return_value = _response(
            predictions=[{"class": "Dog", "confidence": 0.95}],
        )

        response = client.post(
            "/api/classify",
            files={"image": ("cat.png", png_bytes, "image/png")},
            data={"dataset": "imagenet"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["imagePath"] == "uploads/1735036200123-cat.png"
        assert data["predictions"][0]["class"] == "Dog"
        assert "model" not in data
        kwargs = mock_analyze_use_case.execute.call_args.kwargs
        assert kwargs["analysis_type"] == "classification"
        assert kwargs["dataset"] == "imagenet"

    @pytest.mark.parametrize(
        "path,analysis_type",
        [
            ("/api/detect", "detection"),
            ("/api/segment", "segmentation"),
            ("/api/facial", "facial"),
            ("/api/ocr", "ocr"),
            ("/api/autonomous", "autonomous"),
        ],
    )
    def test_route_selects_analysis_type(self, client, mock_analyze_use_case, png_bytes, path, analysis_type):
        mock_analyze_use_case.execute.return_value = _response()

        response = client.post(path, files={"image": ("a.png", png_bytes, "image/png")})

        assert response.status_code == 200
        assert mock_analyze_use_case.execute.call_args.kwargs["analysis_type"] == analysis_type

    def test_missing_image_returns_422(self, client):
        response = client.post("/api/classify", data={"dataset": "imagenet"})
        assert response.status_code == 422

    def test_invalid_upload_returns_400(self, client, mock_analyze_use_case, png_bytes):
        mock_analyze_use_case.execute.side_effect = InvalidUploadError(
            "bad", user_message="Invalid image file. Use: bmp, gif, jpeg, jpg, png, webp"
        )
        response = client.post("/api/ocr", files={"image": ("a.txt", b"x", "text/plain")})
        assert response.status_code == 400
        assert response.json()["detail"].startswith("Invalid image file")

    def test_too_large_returns_413(self, client, mock_analyze_use_case, png_bytes):
        mock_analyze_use_case.execute.side_effect = UploadTooLargeError(20)
        response = client.post("/api/detect", files={"image": ("a.png", png_bytes, "image/png")})
        assert response.status_code == 413
        assert response.json()["detail"] == "File too large. Max 20 MB."

    def test_unexpected_error_returns_500(self, client, mock_analyze_use_case, png_bytes):
        mock_analyze_use_case.execute.side_effect = RuntimeError("disk exploded")
        response = client.post("/api/segment", files={"image": ("a.png", png_bytes, "image/png")})
        assert response.status_code == 500
        assert "disk exploded" not in response.json()["detail"]

    def test_enhanced_form_fields(self, client, mock_enhanced_use_case, png_bytes):
        mock_enhanced_use_case.execute.return_value = _response(model="efficientNet", threshold=0.3, predictions=[])

        response = client.post(
            "/api/classify/enhanced",
            files={"image": ("a.png", png_bytes, "image/png")},
            data={"model": "efficientNet", "threshold": "0.3"},
        )

        assert response.status_code == 200
        kwargs = mock_enhanced_use_case.execute.call_args.kwargs
        assert kwargs["model"] == "efficientNet"
        assert kwargs["threshold"] == 0.3


class TestResultsAPI:
    """Tests for /api/results"""

    def test_list_with_type_filter(self, client, mock_list_use_case):
        mock_list_use_case.execute.return_value = [_response()]

        response = client.get("/api/results", params={"type": "classification"})

        assert response.status_code == 200
        assert len(response.json()) == 1
        mock_list_use_case.execute.assert_called_once_with(result_type="classification")

    def test_get_not_found(self, client, mock_get_use_case):
        mock_get_use_case.execute.side_effect = ResultNotFoundError(5)
        response = client.get("/api/results/5")
        assert response.status_code == 404

    def test_non_numeric_id_rejected(self, client):
        assert client.get("/api/results/abc").status_code == 422

    def test_clear_reports_removed(self, client, mock_clear_use_case):
        mock_clear_use_case.execute.return_value = 3
        response = client.delete("/api/results")
        assert response.status_code == 200
        assert response.json() == {"removed": 3}
