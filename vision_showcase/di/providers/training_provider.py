from typing import TYPE_CHECKING

from ...application.services.training_jobs import TrainingJobService
from ...application.services.training_system import TrainingSystemService
from ...application.use_cases.training.adjust_predictions import AdjustPredictionsUseCase
from ...application.use_cases.training.fine_tune_model import FineTuneModelUseCase
from ...application.use_cases.training.get_training_stats import GetTrainingStatsUseCase
from ...application.use_cases.training.manage_training_data import (
    ClearTrainingDataUseCase,
    ExportTrainingDataUseCase,
)
from ...application.use_cases.training.start_training_job import StartTrainingJobUseCase
from ...application.use_cases.training.submit_feedback import SubmitFeedbackUseCase
from ...application.use_cases.training.training_jobs import (
    ControlTrainingJobUseCase,
    GetSystemStatsUseCase,
    GetTrainingJobUseCase,
    ListTrainingJobsUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class TrainingProvider:
    """Feedback training and training job use case provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        # Feedback-driven learning
        for use_case in (
            SubmitFeedbackUseCase,
            GetTrainingStatsUseCase,
            FineTuneModelUseCase,
            AdjustPredictionsUseCase,
            ExportTrainingDataUseCase,
            ClearTrainingDataUseCase,
        ):
            container.register_factory(
                use_case,
                lambda use_case=use_case: use_case(training_system=container.get(TrainingSystemService)),
            )

        # Simulated large-scale training jobs
        for use_case in (
            StartTrainingJobUseCase,
            ListTrainingJobsUseCase,
            GetTrainingJobUseCase,
            ControlTrainingJobUseCase,
            GetSystemStatsUseCase,
        ):
            container.register_factory(
                use_case,
                lambda use_case=use_case: use_case(job_service=container.get(TrainingJobService)),
            )
