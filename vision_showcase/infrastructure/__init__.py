"""Infrastructure layer: storage backends, upload handling and WebSocket fan-out."""
