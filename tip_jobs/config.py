# tip_jobs/config.py
# Run settings. Every constant can be overridden with a TIP_* environment variable.

import os
from datetime import datetime


def env_str(name, default):
    return os.environ.get(name, default)


def env_int(name, default):
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def env_float(name, default):
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def env_floats(name, default):
    """Comma separated list of numbers, e.g. TIP_HOUR_SPLITS=0,6,10,16,20,24"""
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return tuple(default)
    try:
        return tuple(float(x) for x in raw.split(","))
    except ValueError:
        raise ValueError(f"{name} must be comma separated numbers, got {raw!r}") from None


# ===== Spark =====
SPARK_MASTER       = env_str("TIP_SPARK_MASTER", "local[*]")
APP_NAME           = env_str("TIP_APP_NAME", "nyc-taxi-tip-models")
SHUFFLE_PARTITIONS = env_int("TIP_SHUFFLE_PARTITIONS", 64)
SPARK_LOG_LEVEL    = env_str("TIP_SPARK_LOG_LEVEL", "WARN")

# ===== Paths =====
BASE_DIR    = env_str("TIP_BASE_DIR", os.getcwd())
SAMPLE_PATH = env_str("TIP_SAMPLE_PATH", os.path.join(BASE_DIR, "data", "joined_sample_parquet"))
SAMPLE_FMT  = env_str("TIP_SAMPLE_FORMAT", "parquet")
OUT_BASE    = env_str("TIP_OUT_DIR", os.path.join(BASE_DIR, "data", "tip_models"))
TABLE_NAME  = env_str("TIP_TABLE_NAME", "joined_sample")

RUN = datetime.now().strftime("%Y%m%d_%H%M%S")

# ===== Features =====
TIP_THRESHOLD = env_float("TIP_THRESHOLD", 0.5)
HOUR_SPLITS   = env_floats("TIP_HOUR_SPLITS", (0, 6, 10, 16, 20, 24))

# ===== Train / test split =====
SPLIT_WEIGHTS = env_floats("TIP_SPLIT_WEIGHTS", (0.75, 0.25))
SPLIT_SEED    = env_int("TIP_SPLIT_SEED", 123)

# ===== Models =====
ENET_REG_PARAM  = env_float("TIP_ENET_REG_PARAM", 0.01)
ENET_ALPHA      = env_float("TIP_ENET_ALPHA", 0.5)
ENET_MAX_ITER   = env_int("TIP_ENET_MAX_ITER", 100)

RF_NUM_TREES    = env_int("TIP_RF_NUM_TREES", 25)
RF_MAX_DEPTH    = env_int("TIP_RF_MAX_DEPTH", 5)
RF_MAX_BINS     = env_int("TIP_RF_MAX_BINS", 32)

GBT_MAX_ITER    = env_int("TIP_GBT_MAX_ITER", 20)
GBT_MAX_DEPTH   = env_int("TIP_GBT_MAX_DEPTH", 3)
GBT_MAX_BINS    = env_int("TIP_GBT_MAX_BINS", 32)

MODEL_SEED      = env_int("TIP_MODEL_SEED", 42)

# ===== Plots =====
PLOT_SAMPLE_ROWS = env_int("TIP_PLOT_SAMPLE_ROWS", 5_000)


def run_dir(out_base=None, run=None):
    return os.path.join(out_base or OUT_BASE, f"run_{run or RUN}")
