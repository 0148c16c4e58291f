# tip_jobs/models.py
# Regression pipelines for tip_amount: elastic net, random forest, gradient-boosted trees.

from pyspark.ml import Pipeline
from pyspark.ml.feature import StringIndexer, OneHotEncoder, VectorAssembler
from pyspark.ml.regression import LinearRegression, RandomForestRegressor, GBTRegressor

from tip_jobs import config

LABEL_COL = "tip_amount"
NUMERIC_COLS = ["fare_amount", "passenger_count", "trip_distance", "trip_time_in_secs"]
CATEGORICAL_COLS = ["payment_type", "vendor_id", "rate_code"]
BUCKET_COLS = ["traffic_time_bins"]

# fit order
MODEL_NAMES = ["elastic_net", "random_forest", "gbt"]

FRIENDLY_MODEL_NAMES = {
    "elastic_net":   "Tip Amount - Elastic Net Regression",
    "random_forest": "Tip Amount - Random Forest",
    "gbt":           "Tip Amount - Gradient-Boosted Trees",
}


def feature_stages():
    """Index + one-hot the categorical codes and assemble everything into `features`."""
    idx = [StringIndexer(inputCol=c, outputCol=f"{c}_idx", handleInvalid="keep")
           for c in CATEGORICAL_COLS]
    ohe = OneHotEncoder(
        inputCols=[f"{c}_idx" for c in CATEGORICAL_COLS] + BUCKET_COLS,
        outputCols=[f"{c}_ohe" for c in CATEGORICAL_COLS + BUCKET_COLS],
        handleInvalid="keep",
    )
    assembler = VectorAssembler(
        inputCols=NUMERIC_COLS + [f"{c}_ohe" for c in CATEGORICAL_COLS + BUCKET_COLS],
        outputCol="features",
        handleInvalid="keep",
    )
    return idx + [ohe, assembler]


def elastic_net():
    return LinearRegression(
        featuresCol="features",
        labelCol=LABEL_COL,
        maxIter=config.ENET_MAX_ITER,
        regParam=config.ENET_REG_PARAM,
        elasticNetParam=config.ENET_ALPHA,  # 0=L2, 1=L1
    )


def random_forest():
    return RandomForestRegressor(
        featuresCol="features",
        labelCol=LABEL_COL,
        numTrees=config.RF_NUM_TREES,
        maxDepth=config.RF_MAX_DEPTH,
        maxBins=config.RF_MAX_BINS,
        seed=config.MODEL_SEED,
    )


def gbt():
    return GBTRegressor(
        featuresCol="features",
        labelCol=LABEL_COL,
        maxIter=config.GBT_MAX_ITER,
        maxDepth=config.GBT_MAX_DEPTH,
        maxBins=config.GBT_MAX_BINS,
        seed=config.MODEL_SEED,
    )


ESTIMATORS = {
    "elastic_net": elastic_net,
    "random_forest": random_forest,
    "gbt": gbt,
}


def build_pipeline(name):
    if name not in ESTIMATORS:
        raise KeyError(f"Unknown model {name!r}; known models: {MODEL_NAMES}")
    return Pipeline(stages=feature_stages() + [ESTIMATORS[name]()])


def fit_model(name, training):
    return build_pipeline(name).fit(training)
