# config.py
# Configuration constants for the clarity ranking tool.

# Input settings
DEFAULT_DATASET_DIR = "dataset"

# Focus measure settings
GAUSSIAN_KSIZE = 3
GAUSSIAN_SIGMA = -1  # non-positive: OpenCV derives sigma from the kernel size
TENG_KSIZE = 3
SOBEL_MAX_KSIZE = 31

# Report settings
# Labels printed next to each ranked entry ("glnv" kept as the tool always printed it)
REPORT_LABELS = {
    "lapm": "lapm",
    "lapv": "lapv",
    "teng": "teng",
    "glvn": "glnv",
}
REPORT_HEADER = "Sorting pics from blur to clarity:"

# Logging
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DEFAULT_LOG_LEVEL = "WARNING"

# Exit codes
EXIT_OK = 0
EXIT_ITEM_FAILURES = 1
EXIT_BAD_INPUT = 2
