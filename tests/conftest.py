import sys
from pathlib import Path

# Make the package importable when running from a source checkout
sys.path.insert(0, str(Path(__file__).parent.parent))
