# tip_jobs/partition.py
from collections import namedtuple

Partitions = namedtuple("Partitions", ["training", "test"])


def split_train_test(df, weights=(0.75, 0.25), seed=123):
    """Seeded random split into disjoint training/test partitions."""
    weights = [float(w) for w in weights]
    if len(weights) != 2 or any(w <= 0 for w in weights):
        raise ValueError(f"Split weights must be two positive numbers, got {weights}")
    training, test = df.randomSplit(weights, seed=seed)
    return Partitions(training, test)
