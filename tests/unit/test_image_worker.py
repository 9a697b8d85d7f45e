"""
Unit tests for the image worker message protocol.
"""
from vision_showcase.processing.image_worker import WORKER_AUGMENTATIONS, handle_message


class TestProcessBatch:
    def test_progress_every_tenth_image(self):
        images = [{"id": f"img_{i}"} for i in range(25)]
        replies = handle_message({"type": "process_batch", "data": {"batch_id": "b", "images": images}})

        progress = [reply for reply in replies if reply["type"] == "batch_progress"]
        assert [p["data"]["processed"] for p in progress] == [1, 11, 21]
        assert replies[-1]["type"] == "batch_processed"

    def test_processed_images(self):
        replies = handle_message({
            "type": "process_batch",
            "data": {"batch_id": "b", "images": [{"id": "a"}], "config": {"augmentation": True}},
        })
        data = replies[-1]["data"]
        image = data["processed_images"][0]

        assert image["processed"] is True
        assert 50 <= image["processing_time"] <= 150
        assert image["transformations"] == ["resize", "normalize", "augment"]
        assert data["processing_time"] == image["processing_time"]

    def test_missing_images_is_error(self):
        replies = handle_message({"type": "process_batch", "data": {"batch_id": "b"}})
        assert replies[0]["type"] == "error"
        assert replies[0]["data"].startswith("Batch processing failed")


class TestSingleImageMessages:
    def test_preprocess_image(self):
        reply = handle_message({"type": "preprocess_image", "data": {"id": "a"}})[0]
        assert reply["type"] == "image_preprocessed"
        assert (reply["data"]["width"], reply["data"]["height"], reply["data"]["channels"]) == (224, 224, 3)
        assert reply["data"]["normalized"] is True
        assert 10 <= reply["data"]["processing_time"] <= 30

    def test_augment_image(self):
        reply = handle_message({"type": "augment_image", "data": {"id": "a"}})[0]
        assert reply["type"] == "image_augmented"
        assert set(reply["data"]["augmentations"]) <= set(WORKER_AUGMENTATIONS)


def test_unknown_message_type():
    assert handle_message({"type": "resize_all"}) == [
        {"type": "error", "data": "Unknown message type: resize_all"}
    ]
