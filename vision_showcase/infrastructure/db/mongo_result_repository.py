# Standard library imports
from typing import Optional, List, Dict, Any

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING
from pymongo.errors import PyMongoError

# Local application imports
from ...core.exceptions import RepositoryError
from ...domain.repositories.result_repository import ResultRepository
from ...domain.models.analysis_result import AnalysisResult
from ...domain.constants import ResultFields
from ...utils.datetime_utils import ensure_utc
from .mongo_connection import get_result_collection


class MongoResultRepository(ResultRepository):
    """MongoDB implementation of ResultRepository"""

    def __init__(self, result_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.result_collection = result_collection if result_collection is not None else get_result_collection()

    async def save(self, result: AnalysisResult) -> AnalysisResult:
        """
        Append a result

        Args:
            result: AnalysisResult domain model to store

        Returns:
            The stored AnalysisResult
        """
        if not result:
            raise ValueError("Result cannot be None")

        try:
            await self.result_collection.insert_one(self._result_to_dict(result))
            return result
        except PyMongoError as e:
            raise RepositoryError(f"Error saving result: {str(e)}", operation="save")

    async def find_by_id(self, result_id: int) -> Optional[AnalysisResult]:
        """
        Find result by ID

        Args:
            result_id: The numeric result ID

        Returns:
            AnalysisResult if found, None otherwise
        """
        try:
            document = await self.result_collection.find_one({ResultFields.ID: result_id})
        except PyMongoError as e:
            raise RepositoryError(f"Error finding result by ID: {str(e)}", operation="find_by_id")

        if document is None:
            return None
        return self._document_to_result(document)

    async def find_all(self, result_type: Optional[str] = None) -> List[AnalysisResult]:
        """
        List results in insertion order

        Args:
            result_type: Optional analysis type filter

        Returns:
            List of AnalysisResult domain models
        """
        query: Dict[str, Any] = {}
        if result_type:
            query[ResultFields.TYPE] = result_type

        try:
            cursor = self.result_collection.find(query).sort(ResultFields.MONGO_ID, ASCENDING)
            results = []
            async for document in cursor:
                results.append(self._document_to_result(document))
            return results
        except PyMongoError as e:
            raise RepositoryError(f"Error listing results: {str(e)}", operation="find_all")

    async def clear(self) -> int:
        try:
            delete_result = await self.result_collection.delete_many({})
            return delete_result.deleted_count
        except PyMongoError as e:
            raise RepositoryError(f"Error clearing results: {str(e)}", operation="clear")

    def _document_to_result(self, document: Dict[str, Any]) -> AnalysisResult:
        """
        Convert MongoDB document to AnalysisResult domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            AnalysisResult domain model
        """
        if not document:
            raise ValueError("Invalid document: document is None or empty")

        return AnalysisResult(
            id=int(document[ResultFields.ID]),
            type=document.get(ResultFields.TYPE, ""),
            image_path=document.get(ResultFields.IMAGE_PATH, ""),
            timestamp=ensure_utc(document[ResultFields.TIMESTAMP]),
            payload=document.get(ResultFields.PAYLOAD) or {},
            dataset=document.get(ResultFields.DATASET),
            model=document.get(ResultFields.MODEL),
            processing_time_ms=document.get(ResultFields.PROCESSING_TIME_MS),
        )

    def _result_to_dict(self, result: AnalysisResult) -> Dict[str, Any]:
        """
        Convert AnalysisResult domain model to MongoDB document

        Args:
            result: AnalysisResult domain model

        Returns:
            Dictionary ready for MongoDB storage
        """
        return {
            ResultFields.ID: result.id,
            ResultFields.TYPE: result.type,
            ResultFields.IMAGE_PATH: result.image_path,
            ResultFields.TIMESTAMP: result.timestamp,
            ResultFields.PAYLOAD: result.payload,
            ResultFields.DATASET: result.dataset,
            ResultFields.MODEL: result.model,
            ResultFields.PROCESSING_TIME_MS: result.processing_time_ms,
        }
