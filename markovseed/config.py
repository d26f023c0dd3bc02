import os
from pathlib import Path

# --- Path Configuration ---
# MARKOVSEED_HOME points at the directory holding saved models; the
# current directory is used when it is unset.
MARKOVSEED_HOME = Path(os.environ.get('MARKOVSEED_HOME', Path.cwd()))
DEFAULT_MODEL_PATH = MARKOVSEED_HOME / 'markov_model.json'

# --- Model Configuration ---
DEFAULT_N = 3
DEFAULT_LENGTH = 16

# --- Training Configuration ---
MAX_TRAINING_FILE_SIZE = 100 * 1024 * 1024  # 100 MiB
