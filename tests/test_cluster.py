import numpy as np
import pandas as pd
import pytest

from cluster import cluster_listings, cluster_profile, train_kmeans
from errors import ModelFitError


@pytest.fixture()
def blob_listings():
    """Three well separated groups in (number_of_reviews, price) space."""
    rng = np.random.default_rng(7)
    centers = [(5, 60), (150, 90), (20, 400)]
    frames = []
    for i, (reviews, price) in enumerate(centers):
        frames.append(pd.DataFrame({
            "number_of_reviews": reviews + rng.normal(0, 2, 20),
            "price": price + rng.normal(0, 5, 20),
            "blob": i,
        }))
    return pd.concat(frames, ignore_index=True)


def test_kmeans_is_reproducible_with_fixed_seed(blob_listings):
    X = blob_listings[["number_of_reviews", "price"]].to_numpy()
    _, first, _ = train_kmeans(X, k=3, random_state=42)
    _, second, _ = train_kmeans(X, k=3, random_state=42)
    np.testing.assert_array_equal(first, second)


def test_kmeans_recovers_groups(blob_listings):
    clustered, model, score = cluster_listings(blob_listings)

    assert model.n_clusters == 3
    assert score > 0.8
    # every generated group maps onto exactly one cluster
    mapping = clustered.groupby("blob")["cluster"].nunique()
    assert (mapping == 1).all()
    assert clustered.groupby("blob")["cluster"].first().nunique() == 3


def test_rows_with_missing_features_are_dropped(blob_listings):
    df = blob_listings.copy()
    df.loc[0, "price"] = np.nan
    df.loc[30, "number_of_reviews"] = np.nan

    clustered, _, _ = cluster_listings(df)

    assert len(clustered) == len(df) - 2
    assert "cluster" not in df.columns


def test_scaled_clustering(blob_listings):
    clustered, _, _ = cluster_listings(blob_listings, scale=True)
    assert clustered["cluster"].nunique() == 3


def test_cluster_profile(blob_listings):
    clustered, _, _ = cluster_listings(blob_listings)
    profile = cluster_profile(clustered)

    assert list(profile.columns) == ["cluster", "number_of_reviews", "price", "n_listings"]
    assert profile["n_listings"].sum() == len(blob_listings)
    assert sorted(profile["n_listings"]) == [20, 20, 20]


def test_too_few_rows_raises():
    with pytest.raises(ModelFitError):
        train_kmeans(np.array([[1.0, 2.0], [3.0, 4.0]]), k=3)


def test_silhouette_on_a_sample_is_reproducible(blob_listings):
    X = blob_listings[["number_of_reviews", "price"]].to_numpy()
    _, _, first = train_kmeans(X, k=3, sample_size=30)
    _, _, second = train_kmeans(X, k=3, sample_size=30)
    _, _, full = train_kmeans(X, k=3)

    assert first == second
    assert first > 0.8
    assert first != full
