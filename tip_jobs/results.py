# tip_jobs/results.py
# Read back run directories written by run_tip_models (used by the Streamlit viewer).
#
# <out_base>/run_<YYYYmmdd_HHMMSS>/
#     comparison.csv
#     models/<name>/model/          PipelineModel
#     models/<name>/metrics.json
#     predictions/<name>/           Parquet
#     plots/*.png

import glob
import json
import os

import pandas as pd


def list_runs(out_base):
    """Run directories, most recent first (names carry the timestamp)."""
    if not os.path.isdir(out_base):
        return []
    runs = [d for d in glob.glob(os.path.join(out_base, "run_*")) if os.path.isdir(d)]
    return sorted(runs, reverse=True)


def list_models(run_dir):
    base = os.path.join(run_dir, "models")
    if not os.path.isdir(base):
        return []
    return sorted(d for d in os.listdir(base) if os.path.isdir(os.path.join(base, d, "model")))


def load_metrics(run_dir, model_name):
    """metrics.json of one model, or None if the model has none."""
    path = os.path.join(run_dir, "models", model_name, "metrics.json")
    if not os.path.exists(path):
        return None
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_comparison(run_dir):
    path = os.path.join(run_dir, "comparison.csv")
    if not os.path.exists(path):
        return None
    return pd.read_csv(path)


def list_plots(run_dir):
    return sorted(glob.glob(os.path.join(run_dir, "plots", "*.png")))


def predictions_path(run_dir, model_name):
    return os.path.join(run_dir, "predictions", model_name)
