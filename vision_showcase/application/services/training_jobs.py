"""
Million-image training simulation and background job management.

`MillionImageTrainer.run` is the batch/epoch loop: it pulls batches from the
dataset manager, preprocesses them, "trains" a mock model on each batch and
reports progress through a callback. `TrainingJobService` runs that loop as
asyncio tasks with pause/resume/stop and pushes progress to WebSocket
subscribers of the job.
"""
import asyncio
import logging
import math
import random
import time
from typing import Any, Awaitable, Callable, Dict, List, Optional

from ...core.config import get_settings
from ...core.exceptions import TrainingJobNotFoundError, TrainingJobStateError
from ...domain.models.dataset import TrainingBatch
from ...domain.models.training import TrainingConfig, TrainingJob, TrainingJobStatus
from ...infrastructure.notifications.websocket_manager import WebSocketManager
from ...utils.datetime_utils import now_ms
from ...utils.ids import prefixed_id
from ..dto.training_dto import TrainingProgress
from .dataset_manager import DatasetManagerService

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[Dict[str, Any]], Awaitable[None]]


class TrainingCancelled(Exception):
    """Raised inside the training loop when its job is stopped."""


class JobControl:
    """Pause/resume/stop switches checked by the training loop between batches."""

    def __init__(self) -> None:
        self._running = asyncio.Event()
        self._running.set()
        self.cancelled = False

    def pause(self) -> None:
        self._running.clear()

    def resume(self) -> None:
        self._running.set()

    def stop(self) -> None:
        self.cancelled = True
        self._running.set()

    @property
    def paused(self) -> bool:
        return not self._running.is_set()

    async def wait_if_paused(self) -> None:
        await self._running.wait()
        if self.cancelled:
            raise TrainingCancelled()


class MockBatchModel:
    """Stand-in for a trainable model: every step returns a random loss and accuracy."""

    def __init__(self, model_name: str, rng: random.Random) -> None:
        self.model_name = model_name
        self._rng = rng

    def train_on_batch(self, inputs, labels) -> Dict[str, float]:
        return {
            "loss": self._rng.random() * 0.5,
            "accuracy": 0.8 + self._rng.random() * 0.2,
        }


class MillionImageTrainer:
    """Batch/epoch training loop over a registered dataset."""

    def __init__(
        self,
        dataset_manager: DatasetManagerService,
        step_delay_seconds: Optional[float] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.dataset_manager = dataset_manager
        self.step_delay_seconds = (
            step_delay_seconds
            if step_delay_seconds is not None
            else get_settings().training_step_delay_seconds
        )
        self._rng = rng or random.Random()

    async def run(
        self,
        dataset_name: str,
        model_name: str,
        config: TrainingConfig,
        progress_callback: Optional[ProgressCallback] = None,
        control: Optional[JobControl] = None,
        checkpoints: Optional[List[int]] = None,
    ) -> Dict[str, Any]:
        """
        Train a mock model over a dataset.

        Args:
            dataset_name: Registered dataset name
            model_name: Name recorded on checkpoints and logs
            config: Batch size, epochs, learning rate, checkpoint frequency, image cap
            progress_callback: Awaited with a progress snapshot after every batch
            control: Pause/stop switches, checked before every batch
            checkpoints: List the epochs that got a checkpoint are appended to

        Returns:
            The final progress snapshot

        Raises:
            DatasetNotFoundError: If the dataset is not registered
            TrainingCancelled: If the job was stopped
        """
        dataset = await self.dataset_manager.get_dataset(dataset_name)
        control = control or JobControl()
        checkpoints = checkpoints if checkpoints is not None else []

        total_images = dataset.total_images
        if config.max_images is not None:
            total_images = min(total_images, config.max_images)
        total_batches = math.ceil(total_images / config.batch_size) if total_images else 0
        max_value = 1.0 if dataset.preprocessing.normalize else 255.0

        logger.info(
            f"Starting training of {model_name} on {dataset_name}: "
            f"{total_images} images in {total_batches} batches x {config.epochs} epochs"
        )

        model = MockBatchModel(model_name, self._rng)
        metrics: Dict[str, Any] = {
            "start_time": now_ms(),
            "total_images": total_images,
            "processed_images": 0,
            "samples_seen": 0,
            "current_epoch": 1,
            "total_epochs": config.epochs,
            "current_batch": 0,
            "total_batches": total_batches,
            "accuracy": 0.0,
            "loss": 0.0,
            "learning_rate": config.learning_rate,
            "validation_accuracy": None,
        }

        for epoch in range(1, config.epochs + 1):
            metrics["current_epoch"] = epoch
            epoch_accuracies: List[float] = []

            for batch_index in range(total_batches):
                await control.wait_if_paused()

                start_index = batch_index * config.batch_size
                size = min(config.batch_size, total_images - start_index)
                batch_images = await self.dataset_manager.load_dataset_batch(dataset_name, size, start_index)
                processed = await asyncio.to_thread(self.dataset_manager.preprocess_batch, batch_images, dataset)

                batch = TrainingBatch(
                    id=f"batch_{epoch}_{batch_index}",
                    images=processed,
                    batch_size=len(processed),
                    epoch=epoch,
                    start_time=time.time(),
                )
                await self.dataset_manager.run_worker({
                    "type": "process_batch",
                    "data": {
                        "batch_id": batch.id,
                        "images": [{"id": image.id, "label": image.label} for image in processed],
                        "config": {"augmentation": bool(dataset.augmentation_config.enabled())},
                    },
                })

                await asyncio.to_thread(self._train_on_batch, model, batch, max_value)
                self.dataset_manager.cleanup_memory()
                epoch_accuracies.append(batch.accuracy)

                if epoch % config.checkpoint_frequency == 0 and epoch not in checkpoints:
                    checkpoints.append(epoch)
                    logger.info(f"Saving checkpoint for {model_name} at epoch {epoch}")

                metrics["current_batch"] = batch_index + 1
                metrics["processed_images"] += len(batch_images)
                metrics["samples_seen"] += len(processed)
                metrics["accuracy"] = batch.accuracy
                metrics["loss"] = batch.loss

                snapshot = self._snapshot(metrics, batch_index, total_batches, epoch, config.epochs)
                if progress_callback is not None:
                    await progress_callback(snapshot)

                await asyncio.sleep(self.step_delay_seconds)

            metrics["validation_accuracy"] = self._validate(model_name, dataset_name, epoch_accuracies)

        snapshot = self._snapshot(metrics, max(total_batches - 1, 0), total_batches, config.epochs, config.epochs)
        logger.info(f"Training of {model_name} on {dataset_name} completed")
        return snapshot

    def _train_on_batch(self, model: MockBatchModel, batch: TrainingBatch, max_value: float) -> None:
        inputs, labels = self.dataset_manager.prepare_batch_for_training(batch, max_value)
        result = model.train_on_batch(inputs, labels)
        batch.loss = result["loss"]
        batch.accuracy = result["accuracy"]
        batch.end_time = time.time()
        batch.processed = True

    def _validate(self, model_name: str, dataset_name: str, accuracies: List[float]) -> Optional[float]:
        logger.info(f"Validating model {model_name} on {dataset_name}")
        if not accuracies:
            return None
        return sum(accuracies) / len(accuracies)

    def _snapshot(
        self,
        metrics: Dict[str, Any],
        batch_index: int,
        total_batches: int,
        epoch: int,
        total_epochs: int,
    ) -> Dict[str, Any]:
        total_work = metrics["total_images"] * total_epochs
        done = metrics["processed_images"]
        progress = (done / total_work * 100) if total_work else 100.0
        elapsed_ms = max(now_ms() - metrics["start_time"], 1)

        if done and progress < 100:
            eta_ms = elapsed_ms / (progress / 100) - elapsed_ms
        else:
            eta_ms = 0.0

        return {
            **metrics,
            "progress": progress,
            "batch_progress": ((batch_index + 1) / total_batches * 100) if total_batches else 100.0,
            "epoch_progress": epoch / total_epochs * 100,
            "estimated_time_remaining": eta_ms,
            "memory_usage": self._memory_usage(),
            "throughput": done / (elapsed_ms / 1000),
        }

    def _memory_usage(self) -> Dict[str, int]:
        return self.dataset_manager.cache_usage()


class TrainingJobService:
    """
    Runs training simulations as background jobs.

    Jobs live in process memory; their latest progress snapshot is kept on the
    job and published to WebSocket subscribers of the job id.
    """

    def __init__(
        self,
        trainer: MillionImageTrainer,
        websocket_manager: Optional[WebSocketManager] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.trainer = trainer
        self.websocket_manager = websocket_manager
        self._rng = rng or random.Random()
        self._jobs: Dict[str, TrainingJob] = {}
        self._controls: Dict[str, JobControl] = {}
        self._tasks: Dict[str, asyncio.Task] = {}

    async def start_training(self, dataset_name: str, model_name: str, config: TrainingConfig) -> TrainingJob:
        """
        Create a job and start its training loop in the background.

        Raises:
            DatasetNotFoundError: If the dataset is not registered
        """
        await self.trainer.dataset_manager.get_dataset(dataset_name)

        job = TrainingJob(
            id=prefixed_id("job", self._rng),
            dataset_name=dataset_name,
            model_name=model_name,
            config=config,
            created_at=now_ms(),
        )
        self._jobs[job.id] = job
        self._controls[job.id] = JobControl()
        self._tasks[job.id] = asyncio.create_task(self._run_job(job))
        logger.info(f"Created training job {job.id} for {model_name} on {dataset_name}")
        return job

    async def _run_job(self, job: TrainingJob) -> None:
        control = self._controls[job.id]
        job.status = TrainingJobStatus.RUNNING
        job.started_at = now_ms()
        await self._publish_status(job)

        async def on_progress(snapshot: Dict[str, Any]) -> None:
            job.progress = snapshot
            if self.websocket_manager is not None:
                data = TrainingProgress.model_validate(snapshot).model_dump(by_alias=True)
                await self.websocket_manager.send_to_channel(
                    job.id, {"type": "progress", "jobId": job.id, "data": data}
                )

        try:
            job.progress = await self.trainer.run(
                job.dataset_name,
                job.model_name,
                job.config,
                progress_callback=on_progress,
                control=control,
                checkpoints=job.checkpoints,
            )
            job.status = TrainingJobStatus.COMPLETED
        except TrainingCancelled:
            job.status = TrainingJobStatus.CANCELLED
            logger.info(f"Training job {job.id} cancelled")
        except Exception as e:
            job.status = TrainingJobStatus.FAILED
            job.error = str(e)
            logger.exception(f"Training job {job.id} failed: {e}")
        finally:
            job.finished_at = now_ms()
            self._tasks.pop(job.id, None)

        await self._publish_status(job)

    async def _publish_status(self, job: TrainingJob) -> None:
        if self.websocket_manager is None:
            return
        await self.websocket_manager.send_to_channel(
            job.id,
            {"type": "status", "jobId": job.id, "status": job.status.value, "error": job.error},
        )

    def get_job(self, job_id: str) -> TrainingJob:
        job = self._jobs.get(job_id)
        if job is None:
            raise TrainingJobNotFoundError(job_id)
        return job

    def list_jobs(self) -> List[TrainingJob]:
        return sorted(self._jobs.values(), key=lambda job: job.created_at)

    async def pause_job(self, job_id: str) -> TrainingJob:
        job = self.get_job(job_id)
        if job.status != TrainingJobStatus.RUNNING:
            raise TrainingJobStateError(job_id, job.status.value, "pause")
        self._controls[job_id].pause()
        job.status = TrainingJobStatus.PAUSED
        await self._publish_status(job)
        logger.info(f"Training job {job_id} paused")
        return job

    async def resume_job(self, job_id: str) -> TrainingJob:
        job = self.get_job(job_id)
        if job.status != TrainingJobStatus.PAUSED:
            raise TrainingJobStateError(job_id, job.status.value, "resume")
        job.status = TrainingJobStatus.RUNNING
        self._controls[job_id].resume()
        await self._publish_status(job)
        logger.info(f"Training job {job_id} resumed")
        return job

    async def stop_job(self, job_id: str) -> TrainingJob:
        """Ask a pending, running or paused job to stop; it becomes cancelled at its next batch."""
        job = self.get_job(job_id)
        if job.status.is_terminal:
            raise TrainingJobStateError(job_id, job.status.value, "stop")
        self._controls[job_id].stop()
        logger.info(f"Stop requested for training job {job_id}")
        return job

    async def wait_for(self, job_id: str, timeout: Optional[float] = None) -> TrainingJob:
        """Wait until a job's background task has finished."""
        job = self.get_job(job_id)
        task = self._tasks.get(job_id)
        if task is not None:
            await asyncio.wait_for(asyncio.shield(task), timeout)
        return job

    def is_training(self) -> bool:
        return any(
            job.status in (TrainingJobStatus.RUNNING, TrainingJobStatus.PAUSED)
            for job in self._jobs.values()
        )

    def system_stats(self) -> Dict[str, float]:
        """Simulated host utilisation percentages; GPU load depends on whether a job is training."""
        training = self.is_training()
        return {
            "cpu_usage": 60 + self._rng.random() * 30,
            "memory_usage": 70 + self._rng.random() * 20,
            "gpu_usage": 80 + self._rng.random() * 15 if training else 10 + self._rng.random() * 20,
            "disk_usage": 45 + self._rng.random() * 10,
            "active_jobs": sum(1 for job in self._jobs.values() if not job.status.is_terminal),
        }

    async def shutdown(self) -> None:
        """Stop every unfinished job and wait for the tasks to end."""
        for job_id, task in list(self._tasks.items()):
            self._controls[job_id].stop()
        tasks = list(self._tasks.values())
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
