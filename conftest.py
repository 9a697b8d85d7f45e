"""
Root conftest - shared pytest configuration.
Ensures the vision_showcase package is importable when running pytest from the repository root.
"""
import os
import sys
import tempfile
from pathlib import Path

_root = Path(__file__).resolve().parent
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))

# Keep test uploads out of the working tree; must be set before the app module is imported
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="vision-showcase-uploads-"))
os.environ.setdefault("STORAGE_BACKEND", "memory")
