from .analysis_controller import router as analysis_router
from .results_controller import router as results_router
from .datasets_controller import router as datasets_router
from .training_controller import router as training_router
from .training_jobs_controller import router as training_jobs_router
from .chat_controller import router as chat_router
from .models_controller import router as models_router


__all__ = [
    "analysis_router",
    "results_router",
    "datasets_router",
    "training_router",
    "training_jobs_router",
    "chat_router",
    "models_router",
]
