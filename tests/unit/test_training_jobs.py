"""
Unit tests for MillionImageTrainer and TrainingJobService.
"""
import asyncio
import random
import threading
import time
from unittest.mock import AsyncMock, MagicMock

import pytest

from vision_showcase.application.services.dataset_manager import DatasetManagerService
from vision_showcase.application.services.training_jobs import (
    JobControl,
    MillionImageTrainer,
    TrainingCancelled,
    TrainingJobService,
)
from vision_showcase.core.exceptions import (
    DatasetNotFoundError,
    TrainingJobNotFoundError,
    TrainingJobStateError,
)
from vision_showcase.domain.models.dataset import AugmentationConfig, DatasetConfig, PreprocessingConfig
from vision_showcase.domain.models.training import TrainingConfig, TrainingJobStatus

NO_AUGMENTATION = AugmentationConfig(
    rotation=False, flip=False, brightness=False, contrast=False, noise=False, crop=False,
)


async def _tiny_dataset(repository, total_images: int = 10, augment: bool = False) -> None:
    await repository.save(
        DatasetConfig(
            name="tiny",
            total_images=total_images,
            categories=["cat", "dog"],
            augmentation_config=AugmentationConfig() if augment else NO_AUGMENTATION,
            preprocessing=PreprocessingConfig(width=8, height=8),
        )
    )


def _trainer(repository, delay: float = 0.0, cache_limit: int = 1000) -> MillionImageTrainer:
    manager = DatasetManagerService(repository, image_cache_limit=cache_limit, rng=random.Random(1))
    return MillionImageTrainer(manager, step_delay_seconds=delay, rng=random.Random(2))


class TestMillionImageTrainer:
    """Tests for the batch/epoch loop"""

    @pytest.mark.asyncio
    async def test_progress_reported_per_batch(self, dataset_repository):
        await _tiny_dataset(dataset_repository, total_images=10)
        trainer = _trainer(dataset_repository)
        snapshots = []

        async def on_progress(snapshot):
            snapshots.append(snapshot)

        final = await trainer.run(
            "tiny", "mobilenet",
            TrainingConfig(batch_size=4, epochs=2, checkpoint_frequency=1),
            progress_callback=on_progress,
        )

        assert len(snapshots) == 6
        assert snapshots[0]["total_batches"] == 3
        assert snapshots[2]["processed_images"] == 10
        assert snapshots[2]["progress"] == pytest.approx(50.0)
        assert final["progress"] == pytest.approx(100.0)
        assert final["processed_images"] == 20
        assert 0.8 <= final["validation_accuracy"] <= 1.0
        assert 0.0 <= final["loss"] <= 0.5

    @pytest.mark.asyncio
    async def test_max_images_caps_run(self, dataset_repository):
        await _tiny_dataset(dataset_repository, total_images=1000)
        final = await _trainer(dataset_repository).run(
            "tiny", "mobilenet", TrainingConfig(batch_size=2, epochs=1, max_images=5)
        )
        assert final["total_images"] == 5
        assert final["total_batches"] == 3
        assert final["processed_images"] == 5

    @pytest.mark.asyncio
    async def test_augmented_copies_counted_separately(self, dataset_repository):
        await _tiny_dataset(dataset_repository, total_images=2, augment=True)
        final = await _trainer(dataset_repository).run(
            "tiny", "mobilenet", TrainingConfig(batch_size=2, epochs=1)
        )
        assert final["processed_images"] == 2
        assert final["samples_seen"] == 2 * 11

    @pytest.mark.asyncio
    async def test_checkpoint_once_per_qualifying_epoch(self, dataset_repository):
        await _tiny_dataset(dataset_repository, total_images=4)
        checkpoints = []
        await _trainer(dataset_repository).run(
            "tiny", "mobilenet",
            TrainingConfig(batch_size=1, epochs=4, checkpoint_frequency=2),
            checkpoints=checkpoints,
        )
        assert checkpoints == [2, 4]

    @pytest.mark.asyncio
    async def test_unknown_dataset(self, dataset_repository):
        with pytest.raises(DatasetNotFoundError):
            await _trainer(dataset_repository).run("missing", "mobilenet", TrainingConfig())

    @pytest.mark.asyncio
    async def test_stopped_control_cancels(self, dataset_repository):
        await _tiny_dataset(dataset_repository)
        control = JobControl()
        control.stop()
        with pytest.raises(TrainingCancelled):
            await _trainer(dataset_repository).run("tiny", "mobilenet", TrainingConfig(), control=control)

    @pytest.mark.asyncio
    async def test_cache_stays_within_limit(self, dataset_repository):
        await _tiny_dataset(dataset_repository, total_images=48, augment=True)
        trainer = _trainer(dataset_repository, cache_limit=20)
        cached = []

        async def on_progress(snapshot):
            cached.append(snapshot["memory_usage"]["cached_images"])

        await trainer.run(
            "tiny", "mobilenet",
            TrainingConfig(batch_size=4, epochs=1),
            progress_callback=on_progress,
        )

        assert len(cached) == 12
        assert max(cached) <= 20
        assert len(trainer.dataset_manager.image_cache) <= 20

    @pytest.mark.asyncio
    async def test_batch_work_runs_in_worker_threads(self, dataset_repository):
        await _tiny_dataset(dataset_repository, total_images=4)
        trainer = _trainer(dataset_repository)
        manager = trainer.dataset_manager
        preprocess = manager.preprocess_batch
        prepare = manager.prepare_batch_for_training
        threads = []

        def recording_preprocess(*args):
            threads.append(threading.get_ident())
            return preprocess(*args)

        def recording_prepare(*args):
            threads.append(threading.get_ident())
            return prepare(*args)

        manager.preprocess_batch = recording_preprocess
        manager.prepare_batch_for_training = recording_prepare

        await trainer.run("tiny", "mobilenet", TrainingConfig(batch_size=2, epochs=1))

        assert len(threads) == 4
        assert threading.get_ident() not in threads

    @pytest.mark.asyncio
    async def test_slow_preprocessing_does_not_block_event_loop(self, dataset_repository):
        await _tiny_dataset(dataset_repository, total_images=4)
        trainer = _trainer(dataset_repository)
        preprocess = trainer.dataset_manager.preprocess_batch

        def slow_preprocess(*args):
            time.sleep(0.3)
            return preprocess(*args)

        trainer.dataset_manager.preprocess_batch = slow_preprocess
        gaps = []
        done = asyncio.Event()

        async def ticker():
            last = time.monotonic()
            while not done.is_set():
                await asyncio.sleep(0.01)
                now = time.monotonic()
                gaps.append(now - last)
                last = now

        ticking = asyncio.create_task(ticker())
        await trainer.run("tiny", "mobilenet", TrainingConfig(batch_size=2, epochs=1))
        done.set()
        await ticking

        assert max(gaps) < 0.2


class TestTrainingJobService:
    """Tests for background jobs"""

    @pytest.mark.asyncio
    async def test_job_completes_and_publishes(self, dataset_repository):
        await _tiny_dataset(dataset_repository, total_images=4)
        websocket_manager = AsyncMock()
        service = TrainingJobService(_trainer(dataset_repository), websocket_manager, rng=random.Random(3))

        job = await service.start_training("tiny", "mobilenet", TrainingConfig(batch_size=2, epochs=1))
        assert job.id.startswith("job_")
        await service.wait_for(job.id, timeout=10)

        assert job.status == TrainingJobStatus.COMPLETED
        assert job.progress["progress"] == pytest.approx(100.0)
        assert job.finished_at >= job.started_at

        messages = [call.args[1] for call in websocket_manager.send_to_channel.await_args_list]
        statuses = [m["status"] for m in messages if m["type"] == "status"]
        assert statuses == ["running", "completed"]
        progress = [m for m in messages if m["type"] == "progress"]
        assert len(progress) == 2
        assert progress[-1]["jobId"] == job.id
        assert "processedImages" in progress[-1]["data"]

    @pytest.mark.asyncio
    async def test_start_unknown_dataset(self, dataset_repository):
        service = TrainingJobService(_trainer(dataset_repository))
        with pytest.raises(DatasetNotFoundError):
            await service.start_training("missing", "mobilenet", TrainingConfig())
        assert service.list_jobs() == []

    @pytest.mark.asyncio
    async def test_pause_resume_stop(self, dataset_repository):
        await _tiny_dataset(dataset_repository, total_images=50)
        service = TrainingJobService(_trainer(dataset_repository, delay=0.01))

        job = await service.start_training("tiny", "mobilenet", TrainingConfig(batch_size=1, epochs=1))
        await asyncio.sleep(0.05)
        assert job.status == TrainingJobStatus.RUNNING

        await service.pause_job(job.id)
        assert job.status == TrainingJobStatus.PAUSED
        with pytest.raises(TrainingJobStateError):
            await service.pause_job(job.id)
        assert service.is_training()

        await service.resume_job(job.id)
        assert job.status == TrainingJobStatus.RUNNING

        await service.stop_job(job.id)
        await service.wait_for(job.id, timeout=10)
        assert job.status == TrainingJobStatus.CANCELLED
        with pytest.raises(TrainingJobStateError):
            await service.stop_job(job.id)

    @pytest.mark.asyncio
    async def test_resume_requires_paused(self, dataset_repository):
        await _tiny_dataset(dataset_repository, total_images=2)
        service = TrainingJobService(_trainer(dataset_repository))
        job = await service.start_training("tiny", "mobilenet", TrainingConfig(batch_size=1, epochs=1))
        await service.wait_for(job.id, timeout=10)

        with pytest.raises(TrainingJobStateError):
            await service.resume_job(job.id)

    @pytest.mark.asyncio
    async def test_failed_job_records_error(self):
        trainer = MagicMock()
        trainer.dataset_manager.get_dataset = AsyncMock()
        trainer.run = AsyncMock(side_effect=RuntimeError("disk full"))
        service = TrainingJobService(trainer)

        job = await service.start_training("any", "mobilenet", TrainingConfig())
        await service.wait_for(job.id, timeout=10)

        assert job.status == TrainingJobStatus.FAILED
        assert job.error == "disk full"

    def test_unknown_job(self, dataset_repository):
        service = TrainingJobService(_trainer(dataset_repository))
        with pytest.raises(TrainingJobNotFoundError):
            service.get_job("job_missing")

    def test_system_stats_idle(self, dataset_repository):
        service = TrainingJobService(_trainer(dataset_repository), rng=random.Random(4))
        stats = service.system_stats()
        assert 60 <= stats["cpu_usage"] <= 90
        assert 10 <= stats["gpu_usage"] <= 30
        assert stats["active_jobs"] == 0

    @pytest.mark.asyncio
    async def test_shutdown_cancels_running_jobs(self, dataset_repository):
        await _tiny_dataset(dataset_repository, total_images=50)
        service = TrainingJobService(_trainer(dataset_repository, delay=0.01))
        job = await service.start_training("tiny", "mobilenet", TrainingConfig(batch_size=1, epochs=5))
        await asyncio.sleep(0.02)

        await service.shutdown()

        assert job.status == TrainingJobStatus.CANCELLED
