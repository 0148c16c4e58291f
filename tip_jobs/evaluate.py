# tip_jobs/evaluate.py
# Goodness of fit and label-vs-prediction scatter plots.

import math
import os

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from pyspark.ml.evaluation import RegressionEvaluator

from tip_jobs.models import LABEL_COL


def r_squared(pred, label_col=LABEL_COL, prediction_col="prediction"):
    """
    Squared Pearson correlation between label and prediction.
    Returns nan when the correlation is undefined (e.g. constant predictions).
    """
    corr = pred.stat.corr(label_col, prediction_col)
    if corr is None or math.isnan(corr):
        return float("nan")
    return corr ** 2


def regression_metrics(pred, label_col=LABEL_COL, prediction_col="prediction"):
    evaluator = RegressionEvaluator(labelCol=label_col, predictionCol=prediction_col)
    metrics = {}
    for m in ["rmse", "mae", "r2"]:
        metrics[m] = evaluator.evaluate(pred, {evaluator.metricName: m})
    metrics["r2_corr"] = r_squared(pred, label_col, prediction_col)
    return metrics


def plot_sample(pred, n=5_000, seed=42, label_col=LABEL_COL, prediction_col="prediction"):
    """Small pandas frame of (label, prediction) for plotting on the driver."""
    df = pred.select(label_col, prediction_col)
    total = df.count()
    if total > n:
        df = df.sample(withReplacement=False, fraction=min(1.0, 1.2 * n / total), seed=seed)
    return df.limit(n).toPandas()


def save_scatter(pdf, title, path, label_col=LABEL_COL, prediction_col="prediction"):
    plt.figure(figsize=(7, 6))
    plt.scatter(pdf[label_col], pdf[prediction_col], s=6, alpha=0.3)
    if len(pdf):
        lo = float(min(pdf[label_col].min(), pdf[prediction_col].min()))
        hi = float(max(pdf[label_col].max(), pdf[prediction_col].max()))
        plt.plot([lo, hi], [lo, hi], color="red", linewidth=1)
    plt.title(title)
    plt.xlabel(f"actual {label_col}")
    plt.ylabel(f"predicted {label_col}")
    plt.tight_layout()
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    plt.savefig(path, dpi=130)
    plt.close()
    print(f"Saved: {path}")
    return path
