"""Use case for the model comparison benchmarks."""
from dataclasses import asdict

from ....core.exceptions import ValidationError
from ....processing.models.catalog import BENCHMARK_METRICS, BENCHMARKS, best_model, metric_score
from ...dto.model_dto import BenchmarkSchema, BenchmarksResponse


class GetBenchmarksUseCase:
    """Scores every benchmarked model on a metric and names the best one"""

    async def execute(self, metric: str = "accuracy") -> BenchmarksResponse:
        if metric not in BENCHMARK_METRICS:
            raise ValidationError(
                f"Unknown metric: {metric}. Expected one of {', '.join(BENCHMARK_METRICS)}"
            )
        return BenchmarksResponse(
            metric=metric,
            best=best_model(metric).name,
            models=[
                BenchmarkSchema(**asdict(benchmark), score=metric_score(benchmark, metric))
                for benchmark in BENCHMARKS
            ],
        )
