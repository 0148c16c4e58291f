# tip_jobs/run_tip_models.py
# Tip amount regression on the joined trip+fare sample.
# Run with:
#   python -m tip_jobs.run_tip_models        (or the `tip-models` console script)
# Settings come from tip_jobs/config.py (TIP_* environment variables).

import os

from tip_jobs import config
from tip_jobs.evaluate import regression_metrics, plot_sample, save_scatter
from tip_jobs.features import add_features
from tip_jobs.load_sample import load_sample, uncache_table
from tip_jobs.models import MODEL_NAMES, FRIENDLY_MODEL_NAMES, fit_model
from tip_jobs.outputs import ensure_dir, save_model, save_metrics, write_predictions, write_comparison
from tip_jobs.partition import split_train_test
from tip_jobs.session import spark_session


def run(spark, sample_path, sample_fmt, out_dir, table_name):
    """Steps 2-6 on an open session. Returns the comparison table (pandas)."""
    ensure_dir(out_dir)

    print(f"\n>>> Loading joined sample: {sample_path} ({sample_fmt})")
    df = load_sample(spark, sample_path, sample_fmt, table_name)
    print(f">>> Rows after filtering (cached as '{table_name}'): {df.count():,}")

    # --- Feature transformers ---
    df = add_features(df)
    print("\n>>> Feature view:")
    df.select("pickup_hour", "traffic_time_bins", "tip_amount", "tipped").show(5, truncate=False)

    # --- Train / Test split ---
    parts = split_train_test(df, config.SPLIT_WEIGHTS, config.SPLIT_SEED)
    print(f">>> Train: {parts.training.count():,}  Test: {parts.test.count():,}")

    rows = []
    for i, name in enumerate(MODEL_NAMES, start=1):
        label = FRIENDLY_MODEL_NAMES[name]
        print(f"\n>>> Fitting {label}")
        model = fit_model(name, parts.training)
        pred = model.transform(parts.test)

        metrics = regression_metrics(pred)
        print(f"RMSE={metrics['rmse']:.4f}  MAE={metrics['mae']:.4f}  "
              f"R2={metrics['r2']:.4f}  R2(corr^2)={metrics['r2_corr']:.4f}")

        model_dir = os.path.join(out_dir, "models", name)
        save_model(model, os.path.join(model_dir, "model"))
        save_metrics(metrics, os.path.join(model_dir, "metrics.json"))
        write_predictions(pred, os.path.join(out_dir, "predictions", name), model_name=name)

        pdf = plot_sample(pred, config.PLOT_SAMPLE_ROWS, seed=config.MODEL_SEED)
        save_scatter(pdf, f"{label} (R2={metrics['r2_corr']:.3f})",
                     os.path.join(out_dir, "plots", f"{i:02d}_{name}_scatter.png"))

        rows.append({"model": name, **metrics})

    return write_comparison(rows, os.path.join(out_dir, "comparison.csv"))


def main(spark=None, sample_path=None, sample_fmt=None, out_dir=None, table_name=None):
    # a session passed in belongs to the caller and is left running
    if spark is None:
        with spark_session() as spark:
            return main(spark, sample_path, sample_fmt, out_dir, table_name)

    out_dir = out_dir or config.run_dir()
    table_name = table_name or config.TABLE_NAME
    try:
        comparison = run(spark, sample_path or config.SAMPLE_PATH,
                         sample_fmt or config.SAMPLE_FMT, out_dir, table_name)
        print("\n>>> Model comparison:")
        print(comparison.to_string(index=False))
        print(f"\nDone. Outputs saved in: {out_dir}")
        return comparison
    finally:
        uncache_table(spark, table_name)


if __name__ == "__main__":
    main()
