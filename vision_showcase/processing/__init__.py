"""Processing layer: mock models, image operations and the image worker."""
