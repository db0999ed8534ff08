# 4. cluster.py

from sklearn.cluster import KMeans
from sklearn.metrics import silhouette_score
from sklearn.preprocessing import StandardScaler

from config import config
from errors import ModelFitError


def train_kmeans(X, k=None, random_state=None, sample_size=None):
    k = k or config["N_CLUSTERS"]
    random_state = config["SEED"] if random_state is None else random_state
    if len(X) < k:
        raise ModelFitError(f"Need at least {k} rows for k-means, got {len(X)}")
    model = KMeans(n_clusters=k, random_state=random_state, n_init=10)
    labels = model.fit_predict(X)
    n_labels = len(set(labels))
    sample_size = sample_size or config["SILHOUETTE_SAMPLE"]
    if not 1 < n_labels < len(X):
        score = -1
    elif len(X) > sample_size:
        # large inputs are scored on a seeded sample
        score = silhouette_score(X, labels, sample_size=sample_size, random_state=random_state)
    else:
        score = silhouette_score(X, labels)
    return model, labels, score


def cluster_listings(df, features=None, k=None, scale=False):
    """
    Assign each listing a k-means cluster over the given features.

    Parameters:
        df (pd.DataFrame): Listings table.
        features (list): Feature columns. Defaults to config["CLUSTER_FEATURES"].
        k (int): Number of clusters. Defaults to config["N_CLUSTERS"].
        scale (bool): Standardize the features before fitting.

    Returns:
        tuple: (clustered rows with a 'cluster' column, fitted KMeans, silhouette score)
    """
    features = list(features or config["CLUSTER_FEATURES"])
    clustered = df.dropna(subset=features).copy()

    X = clustered[features].to_numpy(dtype=float)
    if scale:
        X = StandardScaler().fit_transform(X)

    model, labels, score = train_kmeans(X, k)
    clustered["cluster"] = labels
    print(f"[INFO] K-means (k={model.n_clusters}) on {len(clustered)} listings, silhouette: {score:.3f}")
    return clustered, model, score


def cluster_profile(clustered, features=None):
    features = list(features or config["CLUSTER_FEATURES"])
    profile = clustered.groupby("cluster")[features].mean()
    profile["n_listings"] = clustered.groupby("cluster").size()
    return profile.reset_index()
