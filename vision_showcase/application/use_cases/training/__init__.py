from .submit_feedback import SubmitFeedbackUseCase
from .get_training_stats import GetTrainingStatsUseCase
from .fine_tune_model import FineTuneModelUseCase
from .adjust_predictions import AdjustPredictionsUseCase
from .manage_training_data import ExportTrainingDataUseCase, ClearTrainingDataUseCase
from .start_training_job import StartTrainingJobUseCase
from .training_jobs import (
    ListTrainingJobsUseCase,
    GetTrainingJobUseCase,
    ControlTrainingJobUseCase,
    GetSystemStatsUseCase,
    JOB_ACTIONS,
)

__all__ = [
    "SubmitFeedbackUseCase",
    "GetTrainingStatsUseCase",
    "FineTuneModelUseCase",
    "AdjustPredictionsUseCase",
    "ExportTrainingDataUseCase",
    "ClearTrainingDataUseCase",
    "StartTrainingJobUseCase",
    "ListTrainingJobsUseCase",
    "GetTrainingJobUseCase",
    "ControlTrainingJobUseCase",
    "GetSystemStatsUseCase",
    "JOB_ACTIONS",
]
