# Standard library imports
from typing import Dict, List

# External package imports
from fastapi import APIRouter, Query, status

# Local application imports
from ...application.dto.analysis_dto import DatasetCatalogEntry
from ...application.dto.dataset_dto import DatasetBatchResponse, DatasetConfigResponse, DatasetRegisterRequest
from ...application.use_cases.analysis.get_dataset_catalog import GetDatasetCatalogUseCase
from ...application.use_cases.dataset.list_datasets import GetDatasetUseCase, ListDatasetsUseCase
from ...application.use_cases.dataset.load_dataset_batch import LoadDatasetBatchUseCase
from ...application.use_cases.dataset.load_popular_datasets import LoadPopularDatasetsUseCase
from ...application.use_cases.dataset.register_dataset import RegisterDatasetUseCase
from ...di.container import get_container
from .errors import to_http_exception


router = APIRouter(tags=["datasets"])


@router.get("", response_model=Dict[str, DatasetCatalogEntry])
async def get_dataset_catalog() -> Dict[str, DatasetCatalogEntry]:
    """
    Static catalog of well-known datasets, keyed by id

    Returns:
        Mapping of dataset id to name, category count and image count
    """
    container = get_container()
    return await container.get(GetDatasetCatalogUseCase).execute()


@router.get("/registry", response_model=List[DatasetConfigResponse])
async def list_registered_datasets() -> List[DatasetConfigResponse]:
    container = get_container()
    list_datasets_use_case = container.get(ListDatasetsUseCase)

    try:
        return await list_datasets_use_case.execute()
    except Exception as exception:
        raise to_http_exception(exception)


@router.post("/registry", response_model=DatasetConfigResponse, status_code=status.HTTP_201_CREATED)
async def register_dataset(request: DatasetRegisterRequest) -> DatasetConfigResponse:
    """
    Register a training dataset (replaces one with the same name)

    Args:
        request: Name, total image count and categories

    Returns:
        DatasetConfigResponse with the default split, augmentation and preprocessing settings
    """
    container = get_container()
    register_dataset_use_case = container.get(RegisterDatasetUseCase)

    try:
        return await register_dataset_use_case.execute(request=request)
    except Exception as exception:
        raise to_http_exception(exception)


@router.post("/registry/popular", response_model=List[DatasetConfigResponse])
async def load_popular_datasets() -> List[DatasetConfigResponse]:
    container = get_container()
    load_popular_use_case = container.get(LoadPopularDatasetsUseCase)

    try:
        return await load_popular_use_case.execute()
    except Exception as exception:
        raise to_http_exception(exception)


@router.get("/registry/{name}", response_model=DatasetConfigResponse)
async def get_registered_dataset(name: str) -> DatasetConfigResponse:
    container = get_container()
    get_dataset_use_case = container.get(GetDatasetUseCase)

    try:
        return await get_dataset_use_case.execute(name=name)
    except Exception as exception:
        raise to_http_exception(exception)


@router.get("/registry/{name}/batch", response_model=DatasetBatchResponse, response_model_exclude_none=True)
async def load_dataset_batch(
    name: str,
    batch_size: int = Query(32, alias="batchSize"),
    start_index: int = Query(0, alias="startIndex"),
    preprocess: bool = Query(False),
) -> DatasetBatchResponse:
    """
    Load one batch of a registered dataset

    Args:
        name: Dataset name
        batch_size: Number of images to load
        start_index: Index of the first image
        preprocess: Also resize, normalize and augment the batch

    Returns:
        DatasetBatchResponse with the batch images (and augmented copies when preprocessed)
    """
    container = get_container()
    load_batch_use_case = container.get(LoadDatasetBatchUseCase)

    try:
        return await load_batch_use_case.execute(
            dataset_name=name,
            batch_size=batch_size,
            start_index=start_index,
            preprocess=preprocess,
        )
    except Exception as exception:
        raise to_http_exception(exception)
