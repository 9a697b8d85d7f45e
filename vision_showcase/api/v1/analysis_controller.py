# Standard library imports
from typing import List, Optional

# External package imports
from fastapi import APIRouter, File, Form, UploadFile

# Local application imports
from ...application.dto.analysis_dto import AnalysisResultResponse, BatchProcessResponse
from ...application.use_cases.analysis.analyze_image import AnalyzeImageUseCase
from ...application.use_cases.analysis.batch_process import BatchProcessUseCase
from ...application.use_cases.analysis.enhanced_classify import EnhancedClassifyUseCase
from ...di.container import get_container
from ...domain.constants import (
    ANALYSIS_AUTONOMOUS,
    ANALYSIS_CLASSIFICATION,
    ANALYSIS_DETECTION,
    ANALYSIS_FACIAL,
    ANALYSIS_OCR,
    ANALYSIS_SEGMENTATION,
)
from .errors import to_http_exception


router = APIRouter(tags=["analysis"])


async def _analyze(analysis_type: str, image: UploadFile, dataset: Optional[str]) -> AnalysisResultResponse:
    container = get_container()
    analyze_image_use_case = container.get(AnalyzeImageUseCase)

    try:
        return await analyze_image_use_case.execute(
            analysis_type=analysis_type,
            file=image,
            dataset=dataset,
        )
    except Exception as exception:
        raise to_http_exception(exception)


@router.post("/classify", response_model=AnalysisResultResponse, response_model_exclude_none=True)
async def classify_image(
    image: UploadFile = File(...),
    dataset: Optional[str] = Form(None),
) -> AnalysisResultResponse:
    """
    Classify an uploaded image

    Args:
        image: Image file (multipart field `image`)
        dataset: Optional dataset the image belongs to

    Returns:
        AnalysisResultResponse with `predictions`
    """
    return await _analyze(ANALYSIS_CLASSIFICATION, image, dataset)


@router.post("/detect", response_model=AnalysisResultResponse, response_model_exclude_none=True)
async def detect_objects(
    image: UploadFile = File(...),
    dataset: Optional[str] = Form(None),
) -> AnalysisResultResponse:
    """Detect objects in an uploaded image; returns `detections` with bounding boxes"""
    return await _analyze(ANALYSIS_DETECTION, image, dataset)


@router.post("/segment", response_model=AnalysisResultResponse, response_model_exclude_none=True)
async def segment_image(
    image: UploadFile = File(...),
    dataset: Optional[str] = Form(None),
) -> AnalysisResultResponse:
    return await _analyze(ANALYSIS_SEGMENTATION, image, dataset)


@router.post("/facial", response_model=AnalysisResultResponse, response_model_exclude_none=True)
async def analyze_faces(
    image: UploadFile = File(...),
    dataset: Optional[str] = Form(None),
) -> AnalysisResultResponse:
    return await _analyze(ANALYSIS_FACIAL, image, dataset)


@router.post("/ocr", response_model=AnalysisResultResponse, response_model_exclude_none=True)
async def recognize_text(
    image: UploadFile = File(...),
    dataset: Optional[str] = Form(None),
) -> AnalysisResultResponse:
    return await _analyze(ANALYSIS_OCR, image, dataset)


@router.post("/autonomous", response_model=AnalysisResultResponse, response_model_exclude_none=True)
async def analyze_driving_scene(
    image: UploadFile = File(...),
    dataset: Optional[str] = Form(None),
) -> AnalysisResultResponse:
    """Driving-scene analysis: objects with distance, lane lines, conditions and a safety score"""
    return await _analyze(ANALYSIS_AUTONOMOUS, image, dataset)


@router.post("/classify/enhanced", response_model=AnalysisResultResponse, response_model_exclude_none=True)
async def classify_image_enhanced(
    image: UploadFile = File(...),
    model: str = Form("mobilenet"),
    threshold: float = Form(0.5),
    dataset: Optional[str] = Form(None),
) -> AnalysisResultResponse:
    """
    Classify with a catalog model and adjust the predictions with learned weights

    Args:
        image: Image file
        model: Catalog model key (mobilenet or efficientNet)
        threshold: Minimum adjusted confidence to keep a prediction
        dataset: Optional dataset the image belongs to

    Returns:
        AnalysisResultResponse with adjusted `predictions`
    """
    container = get_container()
    enhanced_classify_use_case = container.get(EnhancedClassifyUseCase)

    try:
        return await enhanced_classify_use_case.execute(
            file=image,
            model=model,
            threshold=threshold,
            dataset=dataset,
        )
    except Exception as exception:
        raise to_http_exception(exception)


@router.post("/batch", response_model=BatchProcessResponse)
async def process_batch(
    images: List[UploadFile] = File(...),
    model: str = Form("cocoSsd"),
) -> BatchProcessResponse:
    """Run the simulated detector over many images and return per-file results plus stats"""
    container = get_container()
    batch_process_use_case = container.get(BatchProcessUseCase)

    try:
        return await batch_process_use_case.execute(files=images, model=model)
    except Exception as exception:
        raise to_http_exception(exception)
