"""Vision showcase backend: mock computer-vision endpoints and a simulated training system."""

__version__ = "1.0.0"
