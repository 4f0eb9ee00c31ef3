"""Root conftest for pytest configuration."""
import sys
from pathlib import Path

# Add the project root to the Python path for all tests
project_root = Path(__file__).parent.resolve()
sys.path.insert(0, str(project_root))
