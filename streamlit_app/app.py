# streamlit_app/app.py
# Browse the outputs of tip_jobs.run_tip_models.
# Run with:
#   streamlit run streamlit_app/app.py
import os
import io

import streamlit as st

from pyspark.sql import functions as F, types as T

from tip_jobs import config
from tip_jobs.models import FRIENDLY_MODEL_NAMES
from tip_jobs.session import get_spark
from tip_jobs.results import (
    list_runs, list_models, load_metrics, load_comparison, list_plots, predictions_path
)


def friendly_label_for_path(p: str) -> str:
    return os.path.basename(p.rstrip("\\/")).replace("run_", "Run ")


# ========= SPARK SESSION =========
@st.cache_resource
def get_viewer_spark():
    return get_spark(app_name="nyc-taxi-tip-viewer")


def sdf_to_pandas_safe(sdf, n=1000):
    """Spark DF -> pandas with timestamps as strings and a row limit n."""
    cast_exprs = []
    for f in sdf.schema.fields:
        if isinstance(f.dataType, T.TimestampType):
            cast_exprs.append(F.date_format(F.col(f.name), "yyyy-MM-dd HH:mm:ss").alias(f.name))
        else:
            cast_exprs.append(F.col(f.name))
    return sdf.select(*cast_exprs).limit(n).toPandas()


# ========= UI =========
st.set_page_config(page_title="NYC Taxi Tips", layout="wide")
st.title("🚖 NYC Taxi Tip Models")

with st.sidebar:
    st.header("Runs")
    out_base = st.text_input("Output folder", value=config.OUT_BASE)
    runs = list_runs(out_base)
    if not runs:
        st.info("No runs found. Run `python -m tip_jobs.run_tip_models` first.")
        st.stop()
    run_sel = st.selectbox("Run", runs, format_func=friendly_label_for_path)
    models = list_models(run_sel)
    model_sel = st.selectbox(
        "Model", models,
        format_func=lambda m: FRIENDLY_MODEL_NAMES.get(m, m)
    ) if models else None

tab1, tab2, tab3 = st.tabs(["📊 Comparison", "📈 Scatter plots", "🤖 Predictions"])

# ========== TAB 1: Comparison ==========
with tab1:
    st.subheader("Goodness of fit on the test partition")
    comp = load_comparison(run_sel)
    if comp is None:
        st.info("comparison.csv not found in this run.")
    else:
        st.dataframe(comp)
        st.bar_chart(comp.set_index("model")[["r2_corr"]])

    if model_sel:
        m = load_metrics(run_sel, model_sel)
        if m:
            mc1, mc2, mc3, mc4 = st.columns(4)
            mc1.metric("RMSE", f"{m['rmse']:.4f}")
            mc2.metric("MAE", f"{m['mae']:.4f}")
            mc3.metric("R²", f"{m['r2']:.4f}")
            mc4.metric("R² (corr²)", f"{m['r2_corr']:.4f}")

# ========== TAB 2: Scatter plots ==========
with tab2:
    pngs = list_plots(run_sel)
    if not pngs:
        st.info("No plots found in this run.")
    for p in pngs:
        st.image(p, caption=os.path.basename(p), use_container_width=True)

# ========== TAB 3: Predictions ==========
with tab3:
    if not model_sel:
        st.caption("Select a model in the sidebar.")
    else:
        sample_n = st.slider("Rows to preview", 100, 5000, 1000, 100)
        spark = get_viewer_spark()
        pred = spark.read.parquet(predictions_path(run_sel, model_sel))
        pdf = sdf_to_pandas_safe(pred, n=sample_n)
        st.dataframe(pdf)
        buf = io.StringIO()
        pdf.to_csv(buf, index=False)
        st.download_button("Download predictions (CSV)", buf.getvalue(),
                           file_name=f"predictions_{model_sel}.csv", mime="text/csv")
