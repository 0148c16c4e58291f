# tip_jobs/features.py
# The two feature transformers applied to the joined sample.
# Defaults come from tip_jobs/config.py (TIP_THRESHOLD, TIP_HOUR_SPLITS).

from pyspark.ml.feature import Binarizer, Bucketizer
from pyspark.sql import functions as F

from tip_jobs import config

HOURS_IN_DAY = 24


def binarize_tips(df, threshold=None, input_col="tip_amount", output_col="tipped"):
    """tipped = 1.0 when tip_amount > threshold, else 0.0"""
    if threshold is None:
        threshold = config.TIP_THRESHOLD
    binarizer = Binarizer(threshold=float(threshold), inputCol=input_col, outputCol=output_col)
    return binarizer.transform(df.withColumn(input_col, F.col(input_col).cast("double")))


def bucketize_pickup_hour(df, splits=None, input_col="pickup_hour", output_col="traffic_time_bins"):
    """
    Maps pickup_hour into traffic-time buckets [s0, s1), [s1, s2), ...; the last
    bucket also includes its upper bound. Splits must cover 0-24 so every hour
    of the day has a bucket. NaN hours land in an extra bucket with index
    len(splits) - 1.
    """
    if splits is None:
        splits = config.HOUR_SPLITS
    splits = [float(s) for s in splits]
    if len(splits) < 3:
        raise ValueError(f"Bucket splits need at least 3 values, got {splits}")
    if any(b <= a for a, b in zip(splits, splits[1:])):
        raise ValueError(f"Bucket splits must be strictly increasing, got {splits}")
    if splits[0] > 0 or splits[-1] < HOURS_IN_DAY:
        raise ValueError(f"Bucket splits must cover hours 0-{HOURS_IN_DAY}, got {splits}")
    bucketizer = Bucketizer(splits=splits, inputCol=input_col, outputCol=output_col,
                            handleInvalid="keep")
    return bucketizer.transform(df.withColumn(input_col, F.col(input_col).cast("double")))


def add_features(df, threshold=None, splits=None):
    return bucketize_pickup_hour(binarize_tips(df, threshold), splits)
