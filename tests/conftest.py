"""Pytest configuration and shared fixtures."""

import random

import pandas as pd
import pytest

from pyspark.sql import SparkSession


@pytest.fixture(scope="session")
def spark():
    """Local Spark session shared by the whole test run."""
    spark = (
        SparkSession.builder
        .appName("tip-jobs-tests")
        .master("local[2]")
        .config("spark.sql.shuffle.partitions", "2")
        .config("spark.ui.enabled", "false")
        .getOrCreate()
    )
    spark.sparkContext.setLogLevel("ERROR")
    yield spark
    spark.stop()


@pytest.fixture(scope="session")
def trips_pdf() -> pd.DataFrame:
    """Synthetic joined trip+fare sample: card trips tip ~15% of the fare, cash trips don't."""
    rng = random.Random(7)
    rows = []
    for i in range(240):
        distance = round(rng.uniform(0.5, 10.0), 2)
        fare = round(2.5 + 2.5 * distance, 2)
        payment = "CRD" if i % 3 else "CSH"
        tip = round(0.15 * fare + rng.uniform(-0.3, 0.3), 2) if payment == "CRD" else 0.0
        hour = i % 24
        rows.append({
            "medallion": f"M{i:04d}",
            "hack_license": f"H{i % 17:04d}",
            "vendor_id": "CMT" if i % 2 else "VTS",
            "rate_code": 1 if i % 11 else 2,
            "pickup_datetime": f"2013-01-{1 + i % 28:02d} {hour:02d}:{i % 60:02d}:00",
            "passenger_count": 1 + i % 4,
            "trip_time_in_secs": int(distance * 200 + 60),
            "trip_distance": distance,
            "payment_type": payment,
            "fare_amount": fare,
            "tip_amount": max(tip, 0.0),
            "total_amount": round(fare + max(tip, 0.0) + 0.5, 2),
        })
    return pd.DataFrame(rows)


@pytest.fixture
def trips_csv(tmp_path, trips_pdf) -> str:
    path = tmp_path / "joined_sample.csv"
    trips_pdf.to_csv(path, index=False)
    return str(path)


@pytest.fixture
def trips_df(spark, trips_pdf):
    return spark.createDataFrame(trips_pdf)
