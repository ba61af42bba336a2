import os
import sys
from pathlib import Path

os.environ.setdefault("JOBHUNTER_NO_LOG_FILE", "1")
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))
