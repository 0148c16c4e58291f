# tip_jobs/outputs.py
# Everything a run leaves on disk: predictions (Parquet), models, metrics, comparison table.

import json
import os

import pandas as pd

from pyspark.sql import functions as F

from tip_jobs.models import LABEL_COL

PREDICTION_COLS = ["medallion", "hack_license", "pickup_datetime", "pickup_hour",
                   "tipped", "traffic_time_bins", LABEL_COL, "prediction"]


def ensure_dir(path):
    os.makedirs(path, exist_ok=True)


def write_predictions(pred, path, model_name=None):
    """Writes the scored test partition as Parquet. Id columns are kept when present."""
    cols = [c for c in PREDICTION_COLS if c in pred.columns]
    out = pred.select(*cols)
    if model_name:
        out = out.withColumn("model", F.lit(model_name))
    out.write.mode("overwrite").parquet(path)
    print(f">>> Predictions saved at: {path}")
    return path


def save_model(model, path):
    model.write().overwrite().save(path)
    print(f">>> Model (Pipeline) saved at: {path}")
    return path


def save_metrics(metrics, path):
    ensure_dir(os.path.dirname(path) or ".")
    with open(path, "w", encoding="utf-8") as f:
        json.dump(metrics, f, indent=2)
    return path


def write_comparison(rows, path):
    """One row per model: model, rmse, mae, r2, r2_corr."""
    ensure_dir(os.path.dirname(path) or ".")
    pdf = pd.DataFrame(rows, columns=["model", "rmse", "mae", "r2", "r2_corr"])
    pdf.to_csv(path, index=False)
    print(f"Saved: {path}")
    return pdf
