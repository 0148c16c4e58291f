# tip_jobs/session.py
# Spark session handling: opened once per run, stopped once at the end.

from contextlib import contextmanager

from pyspark.sql import SparkSession

from tip_jobs import config


def get_spark(app_name=None, master=None, shuffle_partitions=None, log_level=None):
    spark = (
        SparkSession.builder
        .appName(app_name or config.APP_NAME)
        .master(master or config.SPARK_MASTER)
        .config("spark.sql.shuffle.partitions", str(shuffle_partitions or config.SHUFFLE_PARTITIONS))
        .getOrCreate()
    )
    spark.sparkContext.setLogLevel(log_level or config.SPARK_LOG_LEVEL)
    return spark


@contextmanager
def spark_session(app_name=None, master=None, shuffle_partitions=None, log_level=None):
    """Yields a SparkSession and stops it on exit, also when the body raises."""
    spark = get_spark(app_name, master, shuffle_partitions, log_level)
    try:
        yield spark
    finally:
        spark.stop()
