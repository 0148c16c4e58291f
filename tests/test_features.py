"""Tests for the Binarizer and Bucketizer feature steps."""

import pytest

from tip_jobs import config
from tip_jobs.features import add_features, binarize_tips, bucketize_pickup_hour


class TestBinarizeTips:
    def test_strictly_greater_than_threshold(self, spark):
        df = spark.createDataFrame([(0.0,), (0.5,), (0.51,), (3.0,)], ["tip_amount"])
        assert [r.tipped for r in binarize_tips(df).collect()] == [0.0, 0.0, 1.0, 1.0]

    def test_default_threshold_follows_config(self, spark, monkeypatch):
        monkeypatch.setattr(config, "TIP_THRESHOLD", 1.0)
        df = spark.createDataFrame([(0.8,), (1.5,)], ["tip_amount"])
        assert [r.tipped for r in binarize_tips(df).collect()] == [0.0, 1.0]

    def test_custom_threshold_and_int_input(self, spark):
        df = spark.createDataFrame([(1,), (2,), (5,)], ["tip_amount"])
        assert [r.tipped for r in binarize_tips(df, threshold=2).collect()] == [0.0, 0.0, 1.0]


class TestBucketizePickupHour:
    def test_traffic_time_bins(self, spark):
        hours = [0, 5, 6, 9, 10, 15, 16, 19, 20, 23, 24]
        df = spark.createDataFrame([(h,) for h in hours], ["pickup_hour"])
        bins = [r.traffic_time_bins for r in bucketize_pickup_hour(df).collect()]
        assert bins == [0.0, 0.0, 1.0, 1.0, 2.0, 2.0, 3.0, 3.0, 4.0, 4.0, 4.0]

    def test_nan_goes_to_extra_bucket(self, spark):
        df = spark.createDataFrame([(float("nan"),)], ["pickup_hour"])
        assert bucketize_pickup_hour(df).first().traffic_time_bins == 5.0

    @pytest.mark.parametrize("splits", [(0, 24), (0, 10, 6, 24), (0, 6, 6, 24)])
    def test_rejects_bad_splits(self, spark, splits):
        df = spark.createDataFrame([(1.0,)], ["pickup_hour"])
        with pytest.raises(ValueError):
            bucketize_pickup_hour(df, splits)

    @pytest.mark.parametrize("splits", [(6, 10, 16, 20), (0, 6, 12, 18), (1, 12, 24)])
    def test_rejects_splits_not_covering_the_day(self, spark, splits):
        df = spark.createDataFrame([(1.0,)], ["pickup_hour"])
        with pytest.raises(ValueError, match="cover hours"):
            bucketize_pickup_hour(df, splits)

    def test_wider_splits_are_accepted(self, spark):
        df = spark.createDataFrame([(0.0,), (23.0,)], ["pickup_hour"])
        bins = [r.traffic_time_bins for r in bucketize_pickup_hour(df, (-1, 12, 30)).collect()]
        assert bins == [0.0, 1.0]

    def test_defaults_follow_config(self, spark, monkeypatch):
        monkeypatch.setattr(config, "HOUR_SPLITS", (0, 12, 24))
        df = spark.createDataFrame([(3.0,), (15.0,)], ["pickup_hour"])
        assert [r.traffic_time_bins for r in bucketize_pickup_hour(df).collect()] == [0.0, 1.0]


def test_add_features_applies_both(spark):
    df = spark.createDataFrame([(7.0, 2.0), (21.0, 0.0)], ["pickup_hour", "tip_amount"])
    rows = add_features(df).collect()
    assert [(r.tipped, r.traffic_time_bins) for r in rows] == [(1.0, 1.0), (0.0, 4.0)]
