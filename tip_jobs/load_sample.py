# tip_jobs/load_sample.py
# Read the joined trip+fare sample, cast types, drop unusable trips and cache it.

from pyspark.sql import functions as F, types as T

NUMERIC_COLS = {
    "passenger_count": T.IntegerType(),
    "trip_time_in_secs": T.DoubleType(),
    "trip_distance": T.DoubleType(),
    "fare_amount": T.DoubleType(),
    "tip_amount": T.DoubleType(),
}
CATEGORICAL_COLS = ["vendor_id", "rate_code", "payment_type"]
REQUIRED_COLS = CATEGORICAL_COLS + list(NUMERIC_COLS)


def read_joined_sample(spark, path, fmt="parquet"):
    """
    Reads the pre-joined, pre-sampled trip table.
    Parquet is read as is; CSV needs a header row and gets its schema inferred.
    """
    fmt = fmt.lower()
    if fmt == "parquet":
        return spark.read.parquet(path)
    if fmt == "csv":
        return (spark.read
                .option("header", "true")
                .option("inferSchema", "true")
                .csv(path))
    raise ValueError(f"Unsupported sample format {fmt!r} (expected 'parquet' or 'csv')")


def missing_columns(df):
    cols = set(df.columns)
    missing = [c for c in REQUIRED_COLS if c not in cols]
    if "pickup_hour" not in cols and "pickup_datetime" not in cols:
        missing.append("pickup_hour|pickup_datetime")
    return missing


def require_columns(df):
    missing = missing_columns(df)
    if missing:
        raise ValueError(f"Joined sample is missing columns: {missing}")
    return df


def prepare_columns(df):
    """Casts model columns and derives pickup_hour from pickup_datetime when needed."""
    for c, t in NUMERIC_COLS.items():
        df = df.withColumn(c, F.col(c).cast(t))
    # categorical codes are indexed as strings
    for c in CATEGORICAL_COLS:
        df = df.withColumn(c, F.col(c).cast("string"))
    if "pickup_hour" not in df.columns:
        df = df.withColumn("pickup_hour", F.hour(F.to_timestamp("pickup_datetime")))
    return df.withColumn("pickup_hour", F.col("pickup_hour").cast("double"))


def filter_trips(df):
    """Keeps trips with complete model columns and plausible amounts/durations."""
    return (
        df
        .dropna(subset=REQUIRED_COLS + ["pickup_hour"])
        .filter((F.col("fare_amount") >= 1) & (F.col("fare_amount") < 250))
        .filter((F.col("tip_amount") >= 0) & (F.col("tip_amount") < 40))
        .filter((F.col("trip_distance") > 0) & (F.col("trip_distance") < 100))
        .filter((F.col("passenger_count") >= 1) & (F.col("passenger_count") <= 8))
        .filter((F.col("trip_time_in_secs") > 0) & (F.col("trip_time_in_secs") <= 7200))
    )


def cache_table(df, name):
    df.createOrReplaceTempView(name)
    df.sparkSession.catalog.cacheTable(name)
    return df.sparkSession.table(name)


def uncache_table(spark, name):
    if spark.catalog.tableExists(name) and spark.catalog.isCached(name):
        spark.catalog.uncacheTable(name)


def load_sample(spark, path, fmt="parquet", table_name="joined_sample"):
    df = read_joined_sample(spark, path, fmt)
    df = filter_trips(prepare_columns(require_columns(df)))
    return cache_table(df, table_name)
